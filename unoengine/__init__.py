"""Turn resolution engine for Uno-style card games."""

__version__ = "0.1.0"
