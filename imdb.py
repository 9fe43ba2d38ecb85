"""
imdb.py – IMDb identifier helpers.

Provides a single public function for pulling an IMDb title ID out of
arbitrary shared text, typically an ``https://www.imdb.com/title/tt.../`` URL.
"""

from __future__ import annotations

import re

_TITLE_ID_RE: re.Pattern[str] = re.compile(r"tt[0-9]+")


def extract_imdb_id(text: str | None) -> str | None:
    """Return the first IMDb title ID found in *text*.

    Only the leftmost ``tt[0-9]+`` match is returned; any further IDs in the
    same text are ignored.

    Args:
        text: Shared text, e.g. ``"Check this out https://m.imdb.com/title/tt0111161/"``.

    Returns:
        The matched ID verbatim (e.g. ``"tt0111161"``), or ``None`` if *text*
        is empty or contains no title ID.
    """
    if not text:
        return None
    match = _TITLE_ID_RE.search(text)
    return match.group(0) if match else None
