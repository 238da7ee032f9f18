"""MINEMAP - mining deposit catalog and world map."""

__version__ = "0.1.0"
