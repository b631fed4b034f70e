"""AssetLens vehicle valuation and land assessment backend."""

__version__ = "0.1.0"
