"""Client runner module for AlfredChat.

Starts the terminal client and turns its outcome into a process exit status.
"""

import sys
from typing import Optional

from AlfredChat.core.logging import get_logger

from .curses_client import CursesClient
from .responder import Responder
from .utils import ERROR_PREFIX, TerminalSessionError

__all__ = ['run_client']

logger = get_logger(__name__)


def run_client(responder: Optional[Responder] = None) -> int:
    """Run the chat client until the user quits.

    Args:
        responder: Produces Alfred's replies; echoes by default

    Returns:
        0 on a user-initiated quit, 1 if the terminal session failed
    """
    logger.info("Starting Alfred chat client")
    client = CursesClient(responder)

    try:
        client.run()
    except TerminalSessionError as e:
        logger.error("Terminal session failed: %s", e, exc_info=True)
        print(f"{ERROR_PREFIX}{e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Client stopped by interrupt")

    return 0
