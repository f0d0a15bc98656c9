"""skillroster — personnel profiles with a normalized skill vocabulary."""

__version__ = "0.1.0"
