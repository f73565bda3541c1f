"""A set driven by a custom equality predicate, a demonstration of it, and a text statistics tool."""

__version__ = "0.1.0"
__all__ = ["demo", "linked", "textstats"]