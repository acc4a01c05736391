"""Compiler version model.

Architecture:
- number.py: VersionNumber parsing and display
- ranges.py: inferred version ranges and interval membership
"""

from .number import VersionNumber, get_version_number, parse
from .ranges import (
    InferralKind,
    VersionRange,
    ExactRange,
    MetadataPresentVersionAbsentRange,
    MetadataAbsentRange,
    is_included,
    format_range,
)

__all__ = [
    'VersionNumber', 'get_version_number', 'parse',
    'InferralKind', 'VersionRange', 'ExactRange',
    'MetadataPresentVersionAbsentRange', 'MetadataAbsentRange',
    'is_included', 'format_range',
]
