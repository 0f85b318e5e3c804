"""Error classification command."""

import json

import typer
from rich.console import Console

from ...errors import ErrorResponse, GraphError
from ...exceptions import ValidationError
from ..context import fail
from ..presenters import ResultPresenter


def classify(
    body: str = typer.Argument(
        ..., help='Graph API error body, either {"error": {...}} or the inner object'
    ),
) -> None:
    """Classify a Graph API error body into a known error case.

    Example:
        graph-token classify '{"error": {"message": "...", "code": 190, "error_subcode": 463}}'
    """
    console = Console()

    try:
        data = json.loads(body)
    except ValueError as e:
        fail(console, "Invalid JSON", str(e))

    try:
        if isinstance(data, dict) and "error" in data:
            error = ErrorResponse.from_dict(data).error
        else:
            error = GraphError.from_dict(data)
    except ValidationError as e:
        fail(console, "Not a Graph API error", str(e))

    ResultPresenter(console).present_error_classification(error)
