"""Official solc release catalog (solc-bin ``list.json``).

The list is fetched fresh on every call unless the caller passes an already
fetched CompilersList in.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests

from .exceptions import CatalogFetchFailure, ParseError, VersionNotFound
from .versioning import VersionNumber, VersionRange, is_included, parse

logger = logging.getLogger('solcver.catalog')

COMPILERS_LIST_URL = 'https://raw.githubusercontent.com/ethereum/solc-bin/gh-pages/bin/list.json'

# soljson-v0.8.4+commit.c7e474f2.js -> v0.8.4+commit.c7e474f2
_BUILD_WRAPPER_RE = re.compile(r'^[^-]+-(?P<build>.+)\.[A-Za-z]+$')


@dataclass
class CompilersList:
    """Non-exhaustive view of the official compiler list."""
    releases: Dict[str, str] = field(default_factory=dict)
    latest_release: str = ''

    @classmethod
    def from_json(cls, data: Dict) -> 'CompilersList':
        releases = data.get('releases') or {}
        if not isinstance(releases, dict):
            releases = {}
        return cls(
            releases={str(k): str(v) for k, v in releases.items() if v is not None},
            latest_release=str(data.get('latestRelease') or ''),
        )


def _catalog_timeout() -> float:
    try:
        return float(os.environ.get('SOLCVER_CATALOG_TIMEOUT', '10'))
    except ValueError:
        return 10.0


def get_versions(url: Optional[str] = None, timeout: Optional[float] = None) -> CompilersList:
    """Fetch the release catalog.

    Every failure (transport error, non-2xx status, undecodable body) surfaces
    as CatalogFetchFailure.
    """
    if url is None:
        url = os.environ.get('SOLCVER_COMPILERS_LIST_URL') or COMPILERS_LIST_URL
    if timeout is None:
        timeout = _catalog_timeout()
    try:
        resp = requests.get(url, timeout=timeout, headers={'User-Agent': 'solcver/0.1'})
    except requests.RequestException as e:
        logger.warning('catalog fetch failed url=%s err=%s', url, e)
        raise CatalogFetchFailure(str(e), url=url) from e
    if not resp.ok:
        body = resp.text
        logger.warning('catalog fetch not ok url=%s status=%s', url, resp.status_code)
        raise CatalogFetchFailure(
            f'HTTP response is not ok. Status code: {resp.status_code} Response text: {body}',
            status_code=resp.status_code,
            body=body,
            url=url,
        )
    try:
        data = resp.json()
    except ValueError as e:
        logger.warning('catalog body is not JSON url=%s err=%s', url, e)
        raise CatalogFetchFailure(f'Invalid JSON in compiler list: {e}', status_code=resp.status_code, url=url) from e
    if not isinstance(data, dict):
        raise CatalogFetchFailure('Compiler list is not a JSON object', status_code=resp.status_code, url=url)
    catalog = CompilersList.from_json(data)
    logger.debug('catalog fetched releases=%d latest=%s', len(catalog.releases), catalog.latest_release)
    return catalog


def strip_build_wrapper(build: str) -> str:
    """Return the identifier embedded in a ``prefix-<id>.suffix`` file name.

    Values without that wrapper are returned unchanged.
    """
    m = _BUILD_WRAPPER_RE.match(build)
    if not m:
        return build
    return m.group('build')


def resolve_full_identifier(short_version: str, catalog: Optional[CompilersList] = None) -> str:
    """Map ``major.minor.patch`` to its full build identifier, e.g. ``v0.8.4+commit.c7e474f2``."""
    parse(short_version)
    if catalog is None:
        catalog = get_versions()
    build = catalog.releases.get(short_version)
    if not build:
        raise VersionNotFound(short_version)
    return strip_build_wrapper(build)


def latest_release(catalog: Optional[CompilersList] = None) -> VersionNumber:
    if catalog is None:
        catalog = get_versions()
    try:
        return parse(catalog.latest_release)
    except ParseError as e:
        raise CatalogFetchFailure(f'Compiler list has no usable latestRelease: {catalog.latest_release!r}') from e


def list_releases(catalog: Optional[CompilersList] = None) -> List[VersionNumber]:
    """All released versions that have a build, ascending."""
    if catalog is None:
        catalog = get_versions()
    versions: List[VersionNumber] = []
    for short, build in catalog.releases.items():
        if not build:
            continue
        try:
            versions.append(parse(short))
        except ParseError:
            logger.debug('skipping unparsable release key=%r', short)
    return sorted(versions)


def matching_releases(version_range: VersionRange, catalog: Optional[CompilersList] = None) -> List[VersionNumber]:
    """Released versions that could have produced bytecode in ``version_range``."""
    return [v for v in list_releases(catalog) if is_included(version_range, v)]
