from .results import ResultPresenter

__all__ = ["ResultPresenter"]
