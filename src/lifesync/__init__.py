"""LifeSync - personal productivity companion."""

__version__ = "0.1.0"
