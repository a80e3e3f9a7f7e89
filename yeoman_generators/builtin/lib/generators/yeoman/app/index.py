"""Default application scaffold: ignore files, editor settings, tests."""

from yeoman_generators import Base


class Generator(Base):
    def __init__(self, args, options, config):
        super().__init__(args, options, config)
        self.hook_for("test", default="jasmine")
        self.warn_on(".gitignore", ".editorconfig")

    def project_files(self):
        self.copy("gitignore", ".gitignore")
        self.copy("editorconfig", ".editorconfig")
