"""Branch governance and release preparation for trunk-based workflows."""

__version__ = "0.1.0"
