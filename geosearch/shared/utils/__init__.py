"""Shared utilities (text index conversion, callback bridging)."""

from geosearch.shared.utils.callbacks import OneShotBridge
from geosearch.shared.utils.text import (
    index_to_utf16,
    is_character_boundary,
    utf16_length,
    utf16_to_index,
)

__all__ = [
    "OneShotBridge",
    "index_to_utf16",
    "is_character_boundary",
    "utf16_length",
    "utf16_to_index",
]
