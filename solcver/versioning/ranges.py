"""Version ranges produced by bytecode inference.

Three closed variants, one per inferral kind:

- ExactRange: the metadata named the compiler version.
- MetadataPresentVersionAbsentRange: metadata decoded without a version, so
  the producer is one of the releases that emitted versionless metadata.
- MetadataAbsentRange: no metadata at all, so the producer predates metadata.

Historical bounds:
  solc 0.4.7 was the first release to append metadata to bytecode.
  solc 0.5.9 was the first release to embed its own version in that metadata
  (0.4.26, the last of the 0.4 series, still does not).
Both are configurable via SOLCVER_METADATA_FIRST_VERSION and
SOLCVER_VERSIONLESS_METADATA_LAST_VERSION.
"""

import enum
import os
from dataclasses import dataclass, field
from typing import Union

from ..exceptions import ConfigurationError, ParseError
from .number import VersionNumber, parse

DEFAULT_METADATA_FIRST_VERSION = '0.4.7'
DEFAULT_VERSIONLESS_METADATA_LAST_VERSION = '0.5.8'


class InferralKind(enum.Enum):
    EXACT = 'exact'
    METADATA_PRESENT_VERSION_ABSENT = 'metadata_present_version_absent'
    METADATA_ABSENT = 'metadata_absent'


def _bound_from_env(setting: str, default: str) -> VersionNumber:
    raw = os.environ.get(setting, default)
    try:
        return parse(raw)
    except ParseError as e:
        raise ConfigurationError(setting, e.message) from e


def metadata_first_version() -> VersionNumber:
    """First compiler release that appended a metadata block."""
    return _bound_from_env('SOLCVER_METADATA_FIRST_VERSION', DEFAULT_METADATA_FIRST_VERSION)


def versionless_metadata_last_version() -> VersionNumber:
    """Last compiler release whose metadata block omitted the compiler version."""
    return _bound_from_env('SOLCVER_VERSIONLESS_METADATA_LAST_VERSION', DEFAULT_VERSIONLESS_METADATA_LAST_VERSION)


@dataclass(frozen=True)
class ExactRange:
    version: VersionNumber
    inferral_kind: InferralKind = field(default=InferralKind.EXACT, init=False)

    def is_included(self, candidate: VersionNumber) -> bool:
        return is_included(self, candidate)

    def __str__(self) -> str:
        return format_range(self)


@dataclass(frozen=True)
class MetadataPresentVersionAbsentRange:
    """Inclusive interval ``[lower, upper]``."""
    lower: VersionNumber = field(default_factory=metadata_first_version)
    upper: VersionNumber = field(default_factory=versionless_metadata_last_version)
    inferral_kind: InferralKind = field(default=InferralKind.METADATA_PRESENT_VERSION_ABSENT, init=False)

    def is_included(self, candidate: VersionNumber) -> bool:
        return is_included(self, candidate)

    def __str__(self) -> str:
        return format_range(self)


@dataclass(frozen=True)
class MetadataAbsentRange:
    """Open interval below ``upper``."""
    upper: VersionNumber = field(default_factory=metadata_first_version)
    inferral_kind: InferralKind = field(default=InferralKind.METADATA_ABSENT, init=False)

    def is_included(self, candidate: VersionNumber) -> bool:
        return is_included(self, candidate)

    def __str__(self) -> str:
        return format_range(self)


VersionRange = Union[ExactRange, MetadataPresentVersionAbsentRange, MetadataAbsentRange]


def is_included(version_range: VersionRange, candidate: VersionNumber) -> bool:
    """Return True if ``candidate`` could have produced bytecode in ``version_range``."""
    c = candidate.as_tuple()
    if isinstance(version_range, ExactRange):
        return c == version_range.version.as_tuple()
    if isinstance(version_range, MetadataPresentVersionAbsentRange):
        return version_range.lower.as_tuple() <= c <= version_range.upper.as_tuple()
    if isinstance(version_range, MetadataAbsentRange):
        return c < version_range.upper.as_tuple()
    raise TypeError(f'Not a version range: {version_range!r}')


def format_range(version_range: VersionRange) -> str:
    """Canonical constraint text, e.g. ``0.8.4``, ``>=0.4.7 <=0.5.8`` or ``<0.4.7``."""
    if isinstance(version_range, ExactRange):
        return version_range.version.format()
    if isinstance(version_range, MetadataPresentVersionAbsentRange):
        return f'>={version_range.lower} <={version_range.upper}'
    if isinstance(version_range, MetadataAbsentRange):
        return f'<{version_range.upper}'
    raise TypeError(f'Not a version range: {version_range!r}')
