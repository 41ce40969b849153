"""Resource scopes bracketing scoped fixture access."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path
from typing import TypeAlias

logger = logging.getLogger(__name__)

ResourceScope: TypeAlias = Callable[[Path], AbstractContextManager[object]]


@contextmanager
def null_resource_scope(path: Path) -> Iterator[Path]:
    """Scope for platforms without per-resource access grants."""
    logger.debug("Entering resource scope for %s", path)
    try:
        yield path
    finally:
        logger.debug("Leaving resource scope for %s", path)
