"""User-facing notices printed to the terminal."""

from rich.console import Console
from rich.markup import escape

from plugin_deploy.models.runtime import Account

console = Console()


def newline() -> None:
    console.print()


def info(message: str) -> None:
    console.print(message, markup=False)


def warning(message: str) -> None:
    console.print(message, style="yellow", markup=False)


def error(message: str) -> None:
    console.print(message, style="bold red", markup=False)


def plugins_api_warning() -> None:
    """Advisory shown when deploying through the Plugins API preview."""
    newline()
    warning(
        "You are deploying through the Flex Plugins API, which is currently in Preview. "
        "Plugins deployed this way are not loaded by Flex until they are released."
    )
    newline()


def deploy_successful(url: str, is_public: bool, account: Account) -> None:
    """Summary shown after a successful deploy."""
    availability = "public" if is_public else "private"
    name = escape(account.friendly_name or account.sid)

    newline()
    console.print(
        f"[green]Your plugin has been successfully deployed to your Flex project[/green] "
        f"[bold]{name}[/bold] ({account.sid})."
    )
    console.print(f"It is hosted (as a {availability} Asset) on [cyan]{escape(url)}[/cyan]")
    newline()
