"""Compiler version numbers.

A solc release is identified by a plain major.minor.patch triple; pre-release
and build suffixes never take part in comparisons here.
"""

import re
from dataclasses import dataclass
from typing import Tuple

from ..exceptions import ParseError

_COMPONENT_RE = re.compile(r'[0-9]+')


@dataclass(frozen=True, order=True)
class VersionNumber:
    """Immutable (major, minor, patch) triple.

    Ordering is lexicographic over the three integers, so ``0.4.10 > 0.4.9``.
    """
    major: int
    minor: int
    patch: int

    def __post_init__(self):
        for name in ('major', 'minor', 'patch'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f'{name} must be an int, got {value!r}')
            if value < 0:
                raise ValueError(f'{name} must be non-negative, got {value}')

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def format(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        return self.format()

    def resolve_full_identifier(self) -> str:
        """Return the build identifier of this release from the release catalog.

        Raises VersionNotFound when the catalog has no build for this version.
        """
        from ..catalog import resolve_full_identifier
        return resolve_full_identifier(self.format())


def parse(text: str) -> VersionNumber:
    """Parse ``major.minor.patch`` text.

    Only the first three components are consumed; anything after a third dot
    is ignored (``0.8.4.1`` parses as ``0.8.4``).
    """
    if not isinstance(text, str):
        raise ParseError(repr(text), 'Version must be a string')
    parts = text.strip().split('.')
    if len(parts) < 3:
        raise ParseError(text)
    values = []
    for part in parts[:3]:
        if not _COMPONENT_RE.fullmatch(part):
            raise ParseError(text, f'Invalid version component {part!r}')
        values.append(int(part))
    return VersionNumber(*values)


def get_version_number(short_version: str) -> VersionNumber:
    return parse(short_version)
