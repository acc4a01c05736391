"""Infer the solc version range that could have produced a bytecode.

The metadata decoder is injected: any callable taking the bytecode and
returning a VersionNumber (or an awaitable resolving to one). It signals the
two undecodable cases with VersionFieldAbsent and MetadataBlockAbsent.
"""

import asyncio
import inspect
import logging
from typing import Awaitable, Callable, Union

from .exceptions import MetadataBlockAbsent, VersionFieldAbsent
from .versioning import (
    ExactRange,
    MetadataAbsentRange,
    MetadataPresentVersionAbsentRange,
    VersionNumber,
    VersionRange,
)

logger = logging.getLogger('solcver.inference')

MetadataDecoder = Callable[[bytes], Union[VersionNumber, Awaitable[VersionNumber]]]


async def infer(bytecode: bytes, decoder: MetadataDecoder) -> VersionRange:
    """Return the narrowest version range consistent with ``bytecode``.

    Anything the decoder raises besides the two metadata signals propagates
    unchanged.
    """
    try:
        decoded = decoder(bytecode)
        if inspect.isawaitable(decoded):
            decoded = await decoded
    except VersionFieldAbsent:
        version_range = MetadataPresentVersionAbsentRange()
        logger.debug('metadata without compiler version; range=%s', version_range)
        return version_range
    except MetadataBlockAbsent:
        version_range = MetadataAbsentRange()
        logger.debug('no metadata block; range=%s', version_range)
        return version_range
    logger.debug('metadata names compiler version=%s', decoded)
    return ExactRange(decoded)


def infer_sync(bytecode: bytes, decoder: MetadataDecoder) -> VersionRange:
    """Blocking wrapper around :func:`infer` for callers without an event loop."""
    return asyncio.run(infer(bytecode, decoder))
