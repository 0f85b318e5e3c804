"""Pages search command."""

import typer
from rich.console import Console

from ... import workflows
from ...exceptions import GraphTokenError
from ...workflows import Failure
from ..context import fail, http_client, load_settings
from ..presenters import ResultPresenter


def search(
    q: str = typer.Argument(..., help="Search query, e.g. 'Facebook'"),
    access_token: str = typer.Argument(
        ..., help="User access token with the pages_read_engagement permission"
    ),
    limit: int = typer.Option(None, "--limit", "-l", min=1, help="Results per page"),
    after: str = typer.Option(None, "--after", help="Cursor from a previous search"),
) -> None:
    """Search pages by name.

    Example:
        graph-token search Facebook EAAB... --limit 5
    """
    console = Console()
    settings = load_settings(console)
    presenter = ResultPresenter(console)

    try:
        with http_client(settings) as client:
            outcome = workflows.search_pages(
                client, q, access_token, limit=limit, after=after, version=settings.api_version
            )
    except GraphTokenError as e:
        fail(console, "Request Error", str(e))

    if isinstance(outcome, Failure):
        presenter.present_failure("pages/search", outcome)
        raise typer.Exit(1) from None

    response = outcome.value
    next_cursor = None if response.paging is None else response.paging.next_cursor()
    presenter.present_pages(response.data, next_cursor)
