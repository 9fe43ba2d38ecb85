"""
mdblist.py – MDBList watchlist API client.

Provides a single public function for adding an IMDb title to the user's
MDBList watchlist and turning the API response into a one-line message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)

MDBLIST_API_BASE: str = "https://api.mdblist.com"
WATCHLIST_ADD_URL: str = f"{MDBLIST_API_BASE}/watchlist/items/add"

# ---------------------------------------------------------------------------
# User-facing messages
# ---------------------------------------------------------------------------

MSG_ADDED_BOTH = "✅ Added Movie & Show to Watchlist"
MSG_ADDED_MOVIE = "✅ Added Movie to Watchlist"
MSG_ADDED_SHOW = "✅ Added Show to Watchlist"
MSG_EXISTING_BOTH = "ℹ️ Movie & Show were already in your Watchlist"
MSG_EXISTING_MOVIE = "ℹ️ Movie was already in your Watchlist"
MSG_EXISTING_SHOW = "ℹ️ Show was already in your Watchlist"
MSG_ALREADY_PRESENT = "ℹ️ Already in MDBList"
MSG_FAILURE = "❌ Check your API"


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of one watchlist submission."""

    message: str
    success: bool
    status_code: int | None = None
    added_movies: int = 0
    added_shows: int = 0
    existing_movies: int = 0
    existing_shows: int = 0


def build_payload(imdb_id: str) -> dict[str, list[dict[str, str]]]:
    """Return the request body for *imdb_id*.

    The ID is sent as both a movie and a show; MDBList works out which one
    it actually is.
    """
    return {
        "movies": [{"imdb": imdb_id}],
        "shows": [{"imdb": imdb_id}],
    }


def select_message(
    added_movies: int,
    added_shows: int,
    existing_movies: int,
    existing_shows: int,
) -> str:
    """Pick the outcome message for a successful response's counters."""
    if added_movies > 0 and added_shows > 0:
        return MSG_ADDED_BOTH
    if added_movies > 0:
        return MSG_ADDED_MOVIE
    if added_shows > 0:
        return MSG_ADDED_SHOW

    # Nothing was added, so it was already on the watchlist
    if existing_movies > 0 and existing_shows > 0:
        return MSG_EXISTING_BOTH
    if existing_movies > 0:
        return MSG_EXISTING_MOVIE
    if existing_shows > 0:
        return MSG_EXISTING_SHOW
    return MSG_ALREADY_PRESENT


def _count(data: dict[str, Any], section: str, field: str) -> int:
    block = data.get(section)
    if not isinstance(block, dict):
        return 0
    value = block.get(field, 0)
    # bool is an int subclass but never a valid counter
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return 0
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        return 0


def interpret_response(status_code: int, data: Any) -> SubmissionOutcome:
    """Build a :class:`SubmissionOutcome` from a decoded API response.

    Any status other than 200 yields the generic failure outcome regardless
    of the body, as does a 200 whose body is not a JSON object.

    Args:
        status_code: HTTP status code of the response.
        data: Decoded JSON body (only read when *status_code* is 200).

    Returns:
        The interpreted outcome.
    """
    if status_code != 200:
        return SubmissionOutcome(message=MSG_FAILURE, success=False, status_code=status_code)

    if not isinstance(data, dict):
        return SubmissionOutcome(message=MSG_FAILURE, success=False, status_code=status_code)

    counters = {
        "added_movies": _count(data, "added", "movies"),
        "added_shows": _count(data, "added", "shows"),
        "existing_movies": _count(data, "existing", "movies"),
        "existing_shows": _count(data, "existing", "shows"),
    }
    return SubmissionOutcome(
        message=select_message(**counters),
        success=True,
        status_code=status_code,
        **counters,
    )


def submit_to_watchlist(
    imdb_id: str,
    api_key: str,
    *,
    timeout: float | None = None,
) -> SubmissionOutcome:
    """Add *imdb_id* to the MDBList watchlist belonging to *api_key*.

    Issues exactly one POST request.  Nothing is retried: transport errors,
    undecodable bodies and non-200 statuses all produce the same failure
    outcome.

    Args:
        imdb_id: IMDb title ID, e.g. ``"tt0111161"``.
        api_key: MDBList API key, sent as the ``apikey`` query parameter.
        timeout: Optional request timeout in seconds.  ``None`` leaves the
            ``requests`` default in place.

    Returns:
        The :class:`SubmissionOutcome` for this request.
    """
    try:
        resp = requests.post(
            WATCHLIST_ADD_URL,
            params={"apikey": api_key},
            json=build_payload(imdb_id),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.exceptions.RequestException as exc:
        logger.warning("MDBList request for %s failed: %s", imdb_id, type(exc).__name__)
        return SubmissionOutcome(message=MSG_FAILURE, success=False)

    if resp.status_code != 200:
        logger.warning("MDBList returned status %s for %s", resp.status_code, imdb_id)
        return interpret_response(resp.status_code, None)

    try:
        data = resp.json()
    except ValueError:
        logger.warning("MDBList returned an undecodable body for %s", imdb_id)
        return SubmissionOutcome(message=MSG_FAILURE, success=False, status_code=resp.status_code)

    if not isinstance(data, dict):
        logger.warning("MDBList returned a non-object body for %s", imdb_id)

    outcome = interpret_response(resp.status_code, data)
    logger.info("MDBList submission for %s: %s", imdb_id, outcome.message)
    return outcome
