"""Write a README.md titled after the given name."""

from yeoman_generators import NamedBase


class Generator(NamedBase):
    def __init__(self, args, options, config):
        super().__init__(args, options, config)
        self.warn_on("README.md")

    def readme(self):
        self.write("README.md", self.read("README.md").replace("{{ name }}", self.name))
