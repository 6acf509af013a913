"""Film catalog: multi-criteria movie search with an optional pirate vocabulary."""

__version__ = "1.0.0"
