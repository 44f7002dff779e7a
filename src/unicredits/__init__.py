"""UniCredits: academic credit tracking service."""

__version__ = "0.1.0"
