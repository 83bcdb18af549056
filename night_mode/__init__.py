"""Night Mode: pick a day or night theme from local sunrise and sunset."""

__version__ = "1.0.0"
