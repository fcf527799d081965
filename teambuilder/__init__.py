"""TFT team builder site."""

__version__ = "1.0.0"
