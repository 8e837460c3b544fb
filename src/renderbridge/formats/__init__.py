"""Text adapters for transports that move strings instead of objects.

Each format module provides to_<format> and from_<format> functions
that work on top of the Serializer's plain values.
"""

from renderbridge.formats.json import from_json, to_json

__all__ = ["from_json", "to_json"]
