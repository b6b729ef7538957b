"""AppForger - natural-language app descriptions forged into GitHub repositories."""

__version__ = "0.1.0"
