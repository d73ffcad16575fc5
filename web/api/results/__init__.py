"""Results API."""

from web.api.results.views import get_result, list_results, submit_result

__all__ = [
    "get_result",
    "list_results",
    "submit_result",
]
