"""
Box Equality - equality and hashing semantics for value types.

Two demonstrations of how a value type can be compared:
- Intrusive equality: the type overrides its own __eq__/__hash__
- Injected equality: an external comparer is handed to the container

Both run against the same four boxes and report how a dictionary,
a set and a distinct() pass treat them.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
