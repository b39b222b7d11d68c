"""Generation and conversion of musical-note based identifiers, with a demo command."""

__version__ = "0.1.0"
__all__ = ["generator", "demo"]