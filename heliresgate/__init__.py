"""Terminal helicopter rescue game with threaded rocket batteries."""

__version__ = "0.1.0"

__all__ = ["__version__"]