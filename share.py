"""
share.py – Handling of shared IMDb links.

Ties the credential store, the IMDb ID extractor and the MDBList client
together.  The network call runs on a background worker; the thread that
called :func:`handle_share` waits for it and is the only place the result is
consumed.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

from config import CredentialStore
from imdb import extract_imdb_id
from mdblist import MSG_FAILURE, SubmissionOutcome, submit_to_watchlist

logger = logging.getLogger(__name__)

MSG_INVALID_URL = "❌ Invalid IMDb URL"


@dataclass(frozen=True)
class ShareResult:
    """What the caller should show after handling a share."""

    message: str = ""
    success: bool = False
    needs_settings: bool = False
    imdb_id: str | None = None


def submit_async(
    imdb_id: str,
    api_key: str,
    executor: ThreadPoolExecutor | None = None,
) -> Future[SubmissionOutcome]:
    """Run :func:`mdblist.submit_to_watchlist` on a background worker.

    Without an *executor* each call gets its own single-worker pool, so a
    stalled request never holds up another share.  The returned future is
    meant to be resolved by the calling thread; the worker never touches
    anything user-visible.
    """
    if executor is not None:
        return executor.submit(submit_to_watchlist, imdb_id, api_key)

    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="mdblist")
    try:
        return pool.submit(submit_to_watchlist, imdb_id, api_key)
    finally:
        # Worker exits once the submitted call finishes
        pool.shutdown(wait=False)


def handle_share(
    text: str | None,
    store: CredentialStore,
    *,
    executor: ThreadPoolExecutor | None = None,
) -> ShareResult:
    """Handle one piece of shared text.

    Args:
        text: The shared text, usually an IMDb title URL.
        store: Where the MDBList API key is read from.
        executor: Optional executor for the network call.  Defaults to a
            fresh single-worker pool for this share.

    Returns:
        A :class:`ShareResult`.  ``needs_settings`` is set when no API key is
        stored or nothing was shared; in that case no request is made.
    """
    api_key = store.get()
    if not api_key or not api_key.strip():
        logger.info("No MDBList API key stored, showing settings")
        return ShareResult(needs_settings=True)

    if not text or not text.strip():
        return ShareResult(needs_settings=True)

    imdb_id = extract_imdb_id(text)
    if imdb_id is None:
        logger.info("No IMDb ID found in shared text")
        return ShareResult(message=MSG_INVALID_URL)

    future = submit_async(imdb_id, api_key, executor)
    try:
        outcome = future.result()
    except Exception:
        logger.exception("Unexpected error submitting %s to MDBList", imdb_id)
        return ShareResult(message=MSG_FAILURE, imdb_id=imdb_id)
    return ShareResult(message=outcome.message, success=outcome.success, imdb_id=imdb_id)
