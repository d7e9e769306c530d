"""Domain model, plain-text storage and controller for a mall security robot service."""

__version__ = "1.0.0"
__all__ = ["controller", "model", "persistence"]