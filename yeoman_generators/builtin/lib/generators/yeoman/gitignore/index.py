"""Write a .gitignore for a Python project."""

from yeoman_generators import Base


class Generator(Base):
    def __init__(self, args, options, config):
        super().__init__(args, options, config)
        self.warn_on(".gitignore")

    def gitignore(self):
        self.copy("gitignore", ".gitignore")
