"""Distance-vector and link-state routing simulator."""

__version__ = "0.1.0"
