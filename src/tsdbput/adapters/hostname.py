"""Local host name lookup for the fallback host tag."""

import logging
import socket

logger = logging.getLogger(__name__)


def resolve_hostname() -> str | None:
    """Return the local host name, or None if it cannot be determined.

    A failed lookup is not fatal; it only disables the fallback host tag.
    """
    try:
        hostname = socket.gethostname()
    except OSError as exc:
        logger.warning("Unable to resolve local hostname: %s", exc)
        return None
    return hostname or None
