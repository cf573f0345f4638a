"""Tasks and completion reports persisted in a property graph (FalkorDB)."""

__version__ = "0.1.0"
