from yeoman_generators import Base


class Generator(Base):
    def __init__(self, args, options, config):
        super().__init__(args, options, config)
        self.warn_on("test/index.html", "test/spec/*.js")

    def setup_runner(self):
        self.copy("index.html", "test/index.html")
        self.copy("spec.js", "test/spec/spec.js")
