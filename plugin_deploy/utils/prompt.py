"""Interactive confirmation prompt."""

import asyncio
import sys

from rich.prompt import Confirm

from plugin_deploy.utils.logging import get_logger
from plugin_deploy.utils.prints import console

logger = get_logger(__name__)


async def confirm(message: str, default: bool = False) -> bool:
    """Ask a yes/no question and wait for the answer.

    Without a terminal on stdin nobody can answer, so the default is used.
    """
    if not sys.stdin.isatty():
        logger.info("prompt.non_interactive", message=message, default=default)
        return default

    return await asyncio.to_thread(Confirm.ask, message, default=default, console=console)
