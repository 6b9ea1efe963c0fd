"""
Percent value object, numerical primitives and serialization contracts.

This package is independent of any display layer: consumers read the
``percent`` / ``decimal`` views and the string conversion only.
"""
