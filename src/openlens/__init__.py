"""OpenLens: client-side style search over an exported page and image corpus."""

__version__ = "0.1.0"
