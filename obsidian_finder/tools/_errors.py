"""Translation of domain errors into MCP protocol errors."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_REQUEST, ErrorData

from obsidian_finder.errors import ObsidianError

logger = logging.getLogger(__name__)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise :class:`ObsidianError` as an ``INVALID_REQUEST`` :class:`McpError`.

    The domain message is passed through verbatim. Any other exception
    propagates unchanged.
    """
    try:
        yield
    except ObsidianError as exc:
        logger.info("Rejected request: %s: %s", type(exc).__name__, exc)
        raise McpError(ErrorData(code=INVALID_REQUEST, message=str(exc))) from exc
