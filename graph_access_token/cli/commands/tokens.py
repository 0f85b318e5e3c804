"""Token exchange and debug commands.

Each command walks one branch of the exchange graph against the live
Graph API and prints every intermediate token and debug_token result.
"""

import typer
from rich.console import Console

from ... import workflows
from ...exceptions import GraphTokenError
from ...tokens import AppAccessToken
from ...workflows import Failure, Outcome
from ..context import fail, http_client, load_settings, resolve_credentials
from ..presenters import ResultPresenter

APP_ID_OPTION = typer.Option(None, "--app-id", help="Facebook app id [env: FB_APP_ID]")
APP_SECRET_OPTION = typer.Option(
    None, "--app-secret", help="Facebook app secret [env: FB_APP_SECRET]"
)


class _Steps:
    """Presents each step and remembers whether any failed."""

    def __init__(self, presenter: ResultPresenter):
        self.presenter = presenter
        self.failed = False

    def require(self, label: str, outcome: Outcome):
        """Return the value of a successful exchange, or exit."""
        if isinstance(outcome, Failure):
            self.presenter.present_failure(label, outcome)
            raise typer.Exit(1) from None
        return outcome.value

    def debug(self, label: str, outcome: Outcome | None) -> None:
        if outcome is None:
            self.presenter.console.print(
                f"[dim]{label}: refused with 'Debug only access token', as expected[/dim]"
            )
        elif isinstance(outcome, Failure):
            self.failed = True
            self.presenter.present_failure(label, outcome)
        else:
            self.presenter.present_debug_result(label, outcome.value)

    def finish(self) -> None:
        if self.failed:
            raise typer.Exit(1) from None


def app_token(
    app_id: int = APP_ID_OPTION,
    app_secret: str = APP_SECRET_OPTION,
) -> None:
    """Generate and debug an app access token.

    Also debugs the locally built "{app_id}|{app_secret}" token, which
    the Graph API accepts in place of a generated one.

    Example:
        graph-token app --app-id 123 --app-secret abc
    """
    console = Console()
    settings = load_settings(console)
    app_id, app_secret = resolve_credentials(console, settings, app_id, app_secret)
    version = settings.api_version
    steps = _Steps(ResultPresenter(console))

    try:
        with http_client(settings) as client:
            token = steps.require(
                "gen_app_access_token",
                workflows.gen_app_access_token(client, app_id, app_secret, version=version),
            )
            steps.presenter.present_token("app_access_token", token)
            steps.debug(
                "app_access_token",
                workflows.debug_app_access_token(client, token, version=version),
            )

            local_token = AppAccessToken.with_app_secret(app_id, app_secret)
            steps.debug(
                "app_access_token (local)",
                workflows.debug_app_access_token(client, local_token, version=version),
            )
    except GraphTokenError as e:
        fail(console, "Request Error", str(e))

    steps.finish()


def user_token(
    short_lived_user_access_token: str = typer.Argument(
        ..., help="Short-lived user access token, e.g. from the Graph API Explorer"
    ),
    app_id: int = APP_ID_OPTION,
    app_secret: str = APP_SECRET_OPTION,
) -> None:
    """Walk the user token chain.

    short-lived -> long-lived -> session info, debugging each token on
    the way. The session info token debugging itself is expected to be
    refused by the Graph API.

    Example:
        graph-token user EAAB... --app-id 123 --app-secret abc
    """
    console = Console()
    settings = load_settings(console)
    app_id, app_secret = resolve_credentials(console, settings, app_id, app_secret)
    version = settings.api_version
    steps = _Steps(ResultPresenter(console))

    try:
        with http_client(settings) as client:
            app_access_token = steps.require(
                "gen_app_access_token",
                workflows.gen_app_access_token(client, app_id, app_secret, version=version),
            )

            steps.debug(
                "short_lived_user_access_token",
                workflows.debug_user_access_token(
                    client, short_lived_user_access_token, version=version
                ),
            )

            long_lived, expires_in = steps.require(
                "get_long_lived_user_access_token",
                workflows.get_long_lived_user_access_token(
                    client, app_id, app_secret, short_lived_user_access_token, version=version
                ),
            )
            steps.presenter.present_token("long_lived_user_access_token", long_lived, expires_in)
            steps.debug(
                "long_lived_user_access_token",
                workflows.debug_user_access_token(client, long_lived, version=version),
            )

            session_info, expires_in = steps.require(
                "gen_user_session_info_access_token",
                workflows.gen_user_session_info_access_token(
                    client, app_id, long_lived, version=version
                ),
            )
            steps.presenter.present_token(
                "user_session_info_access_token", session_info, expires_in
            )
            steps.debug(
                "user_session_info_access_token (self)",
                workflows.debug_session_info_access_token_self(
                    client, session_info, version=version
                ),
            )
            steps.debug(
                "user_session_info_access_token (via long-lived user token)",
                workflows.debug_user_session_info_access_token_via_long_lived_user_access_token(
                    client, session_info, long_lived, version=version
                ),
            )
            steps.debug(
                "user_session_info_access_token (via app token)",
                workflows.debug_user_session_info_access_token_via_app_access_token(
                    client, session_info, app_access_token, version=version
                ),
            )
    except GraphTokenError as e:
        fail(console, "Request Error", str(e))

    steps.finish()


def page_token(
    page_access_token: str = typer.Argument(..., help="Page access token"),
    app_id: int = APP_ID_OPTION,
    app_secret: str = APP_SECRET_OPTION,
) -> None:
    """Debug a page access token and walk its session info chain.

    Example:
        graph-token page EAAB... --app-id 123 --app-secret abc
    """
    console = Console()
    settings = load_settings(console)
    app_id, app_secret = resolve_credentials(console, settings, app_id, app_secret)
    version = settings.api_version
    steps = _Steps(ResultPresenter(console))

    try:
        with http_client(settings) as client:
            app_access_token = steps.require(
                "gen_app_access_token",
                workflows.gen_app_access_token(client, app_id, app_secret, version=version),
            )

            steps.debug(
                "page_access_token",
                workflows.debug_page_access_token(client, page_access_token, version=version),
            )

            session_info, expires_in = steps.require(
                "gen_page_session_info_access_token",
                workflows.gen_page_session_info_access_token(
                    client, app_id, page_access_token, version=version
                ),
            )
            steps.presenter.present_token(
                "page_session_info_access_token", session_info, expires_in
            )
            steps.debug(
                "page_session_info_access_token (self)",
                workflows.debug_session_info_access_token_self(
                    client, session_info, version=version
                ),
            )
            steps.debug(
                "page_session_info_access_token (via page token)",
                workflows.debug_page_session_info_access_token_via_page_access_token(
                    client, session_info, page_access_token, version=version
                ),
            )
            steps.debug(
                "page_session_info_access_token (via app token)",
                workflows.debug_page_session_info_access_token_via_app_access_token(
                    client, session_info, app_access_token, version=version
                ),
            )
    except GraphTokenError as e:
        fail(console, "Request Error", str(e))

    steps.finish()
