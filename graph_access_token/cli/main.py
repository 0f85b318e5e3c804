"""Main CLI entry point for graph-access-token."""

import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.markdown import Markdown

from ..config import ConfigError, ConfigSchema, Settings
from ..logging_config import configure_logging
from .commands import errors, pages, tokens

app = typer.Typer(
    name="graph-token",
    help="Exchange, debug and classify Facebook Graph API access tokens",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="app")(tokens.app_token)
app.command(name="user")(tokens.user_token)
app.command(name="page")(tokens.page_token)
app.command(name="search")(pages.search)
app.command(name="classify")(errors.classify)


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__

    console = Console()
    console.print(f"[bold cyan]graph-token[/bold cyan] version [green]{__version__}[/green]")


@app.command(name="env")
def env_docs() -> None:
    """List the environment variables graph-token reads."""
    console = Console()
    console.print(Markdown(ConfigSchema.generate_markdown_docs()))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    env_file: str = typer.Option(None, "--env-file", help="Load environment from this file"),
) -> None:
    """Graph access token CLI."""
    # Existing environment variables win over the file
    load_dotenv(env_file or find_dotenv(usecwd=True))

    if verbose:
        configure_logging("DEBUG")
        return

    try:
        configure_logging(Settings.load().log_level)
    except ConfigError:
        # Commands report configuration errors themselves
        configure_logging()


if __name__ == "__main__":
    app()
