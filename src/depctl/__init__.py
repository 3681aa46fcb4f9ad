"""depctl — dependency bookkeeping for a simulated package manager."""

__version__ = "0.1.0"
