"""Presenters for workflow results in the CLI."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...errors import GraphError, classify
from ...objects.debug_token import (
    DebugTokenAppTypeExtra,
    DebugTokenPageTypeExtra,
    DebugTokenResult,
    ExpiresNever,
)
from ...objects.page import PageForSearch
from ...tokens import AccessTokenExpiresIn
from ...workflows import Failure


class ResultPresenter:
    """Converts workflow results into Rich output.

    Contains no business logic - only presentation logic.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def present_token(
        self, label: str, token: object, expires_in: AccessTokenExpiresIn | None = None
    ) -> None:
        line = f"[cyan]{escape(label)}[/cyan] value:[green]{escape(str(token))}[/green]"
        if expires_in is not None:
            line += f" expires_in:{expires_in}"
        self.console.print(line)

    def present_debug_result(self, label: str, result: DebugTokenResult) -> None:
        table = Table(title=f"debug_token: {label}")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Valid", "[green]yes[/green]" if result.is_valid else "[red]no[/red]")
        table.add_row("Scopes", ", ".join(result.scopes) or "-")

        extra = result.type_extra
        if extra is not None:
            table.add_row("Type", extra.TYPE)
            table.add_row("App ID", str(extra.app_id))
            table.add_row("Application", extra.application)
            if not isinstance(extra, DebugTokenAppTypeExtra):
                table.add_row("User ID", str(extra.user_id))
                expires = extra.expires()
                table.add_row(
                    "Expires",
                    "never" if isinstance(expires, ExpiresNever) else expires.date.isoformat(),
                )
                table.add_row("Data Access Expires", extra.data_access_expires_at.isoformat())
            if isinstance(extra, DebugTokenPageTypeExtra):
                table.add_row("Profile ID", str(extra.profile_id))

        if result.error is not None:
            table.add_row("Error", f"[red]{escape(str(result.error))}[/red]")

        self.console.print(table)

    def present_failure(self, label: str, failure: Failure) -> None:
        self.console.print(
            Panel(
                self._describe_error(failure.error.error),
                title=f"{label}: HTTP {failure.status_code}",
                border_style="red",
            )
        )

    def present_error_classification(self, error: GraphError) -> None:
        table = Table(title="Graph error")
        table.add_column("Check", style="cyan")
        table.add_column("Result", style="green")

        case = classify(error)
        table.add_row("Code", str(error.code))
        table.add_row("Subcode", "-" if error.error_subcode is None else str(error.error_subcode))
        table.add_row("Known case", case.value if case else "[yellow]unclassified[/yellow]")
        table.add_row("Error validating access token", str(error.is_error_validating_access_token()))
        table.add_row(
            "Session has been invalidated", str(error.is_access_token_session_has_been_invalidated())
        )
        table.add_row("Session has expired", str(error.is_access_token_session_has_expired()))
        table.add_row(
            "Session key is malformed", str(error.is_access_token_session_key_is_malformed())
        )
        self.console.print(table)

    def present_pages(self, pages: list[PageForSearch], next_cursor: str | None) -> None:
        table = Table(title=f"Pages ({len(pages)})")
        table.add_column("ID", style="cyan")
        table.add_column("Name", style="green")
        table.add_column("Location")
        table.add_column("Link")

        for page in pages:
            location = ""
            if page.location is not None:
                location = ", ".join(
                    part for part in (page.location.city, page.location.country) if part
                )
            table.add_row(str(page.id), escape(page.name), escape(location), page.link)

        self.console.print(table)
        if next_cursor:
            self.console.print(f"Next page: [cyan]--after {next_cursor}[/cyan]")

    @staticmethod
    def _describe_error(error: GraphError) -> str:
        status_and_body = error.as_status_code_and_body()
        if status_and_body is not None:
            return f"[red]Unrecognized response body[/red]\n\n{escape(status_and_body[1])}"

        case = classify(error)
        lines = [f"[red]{escape(error.message)}[/red]", "", f"Code: {error.code}"]
        if error.error_subcode is not None:
            lines.append(f"Subcode: {error.error_subcode}")
        if error.fbtrace_id:
            lines.append(f"Trace: {error.fbtrace_id}")
        lines.append(f"Known case: {case.value if case else 'unclassified'}")
        return "\n".join(lines)
