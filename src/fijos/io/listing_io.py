"""Serialize fixture listings and replace listing files atomically."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from fijos.constants.reporting import LISTING_TEMP_PREFIX, LISTING_TEMP_SUFFIX
from fijos.types import FixtureListingPayload

logger = logging.getLogger(__name__)


def dump_listing(payload: FixtureListingPayload) -> str:
    """Return the listing as indented, key-sorted JSON with a trailing newline."""
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def write_listing(path: Path, payload: FixtureListingPayload) -> None:
    """Write the listing next to *path* under a temp name, then rename it into place.

    The payload is serialized before anything touches the disk, so a payload
    that cannot be encoded leaves an existing listing untouched.
    """
    text = dump_listing(payload)
    path.parent.mkdir(parents=True, exist_ok=True)

    handle, temp_name = tempfile.mkstemp(dir=path.parent, prefix=LISTING_TEMP_PREFIX, suffix=LISTING_TEMP_SUFFIX)
    try:
        with os.fdopen(handle, "w", encoding="utf-8") as stream:
            stream.write(text)
        os.replace(temp_name, path)
    except OSError:
        with suppress(FileNotFoundError):
            Path(temp_name).unlink()
        raise
    logger.debug("Wrote listing of %d fixtures to %s", payload["count"], path)
