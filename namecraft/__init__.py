"""namecraft - brandable name generation with domain intelligence."""

__version__ = "0.1.0"
