"""JSON value model with reference counting, typed accessors, equality, deep copy and configurable serialization."""

__version__ = "0.16.99"

__all__ = ["arraylist", "containers", "copy", "debug", "iterator", "serialize", "value", "version"]