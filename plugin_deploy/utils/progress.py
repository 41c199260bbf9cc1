"""Progress wrapper for long-running remote steps."""

from typing import Awaitable, Callable, TypeVar

from plugin_deploy.utils.logging import get_logger
from plugin_deploy.utils.prints import console

T = TypeVar("T")

logger = get_logger(__name__)


async def progress(title: str, operation: Callable[[], Awaitable[T]]) -> T:
    """Run an async operation behind a spinner labelled with ``title``.

    The spinner is replaced with a check mark on success or a cross on
    failure; failures are re-raised unchanged.
    """
    logger.debug("progress.started", title=title)

    with console.status(title):
        try:
            result = await operation()
        except Exception as e:
            console.print(f"[red]✖[/red] {title}")
            logger.debug("progress.failed", title=title, error=str(e))
            raise

    console.print(f"[green]✔[/green] {title}")
    logger.debug("progress.completed", title=title)
    return result
