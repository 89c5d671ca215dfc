"""Turn pasted YouTube and X/Twitter links into canonical embed references.

Every ``extract_*`` function is idempotent: feeding its own output back in
returns the same value. Input that matches no pattern is returned unchanged
rather than rejected.
"""

from __future__ import annotations

import re
from typing import NamedTuple

_YOUTUBE_ID = r"([A-Za-z0-9_-]{11})"

_YOUTUBE_URL_PATTERNS = (
    re.compile(r"youtube\.com/watch\?(?:[^#]*&)?v=" + _YOUTUBE_ID),
    re.compile(r"youtu\.be/" + _YOUTUBE_ID),
    re.compile(r"youtube\.com/embed/" + _YOUTUBE_ID),
)
_YOUTUBE_BARE_ID = re.compile(_YOUTUBE_ID)

_TWEET_URL = re.compile(r"(?:twitter\.com|x\.com)/(\w+)/status/(\d+)")
_NUMERIC = re.compile(r"\d+")

YOUTUBE_THUMBNAIL_QUALITIES = ("maxresdefault", "hqdefault")


class TweetRef(NamedTuple):
    tweet_id: str
    author_handle: str | None


def parse_youtube_id(text: str) -> str | None:
    """Return the 11-character video ID in ``text``, or None."""
    for pattern in _YOUTUBE_URL_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    match = _YOUTUBE_BARE_ID.fullmatch(text)
    return match.group(1) if match else None


def extract_youtube_id(text: str) -> str:
    """Return the canonical video ID, or ``text`` itself when none is found."""
    video_id = parse_youtube_id(text)
    return video_id if video_id is not None else text


def parse_tweet(text: str) -> TweetRef | None:
    """Return the tweet ID and author handle from a status URL, or None."""
    match = _TWEET_URL.search(text)
    if match is None:
        return None
    return TweetRef(tweet_id=match.group(2), author_handle=match.group(1))


def extract_tweet(text: str, previous_handle: str | None = None) -> TweetRef:
    """Normalize tweet input.

    A status URL yields its numeric ID and handle. Anything else, including a
    bare numeric ID, becomes the ID as-is and keeps ``previous_handle``.
    """
    ref = parse_tweet(text)
    if ref is not None:
        return ref
    return TweetRef(tweet_id=text, author_handle=previous_handle)


def is_tweet_id(text: str) -> bool:
    return _NUMERIC.fullmatch(text) is not None


def youtube_thumbnail_url(video_id: str, quality: str = "hqdefault") -> str:
    return f"https://img.youtube.com/vi/{video_id}/{quality}.jpg"


def youtube_thumbnail_candidates(video_id: str) -> list[str]:
    """Thumbnail URLs best-first; later entries are display fallbacks."""
    return [youtube_thumbnail_url(video_id, q) for q in YOUTUBE_THUMBNAIL_QUALITIES]


def youtube_embed_url(video_id: str) -> str:
    return f"https://www.youtube.com/embed/{video_id}"


def tweet_url(tweet_id: str, author_handle: str | None = None) -> str:
    return f"https://twitter.com/{author_handle or 'i'}/status/{tweet_id}"
