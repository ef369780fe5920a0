"""
Pick a tutorial video for a problem out of a curated playlist.

Playlist titles name problems by number in a handful of ways ("#1", "LeetCode 1",
"LC#1", "Problem 1", "Q1", or "1. Two Sum" at the start). The number is taken
from the problem title ("1. Two Sum") and matched against those formats.
"""
import re
from typing import Iterable, List, Optional, Tuple

from dsagenie.models.services.base import PlaylistItem
from .types import VideoLookupError

_TITLE_NUMBER = re.compile(r"^\s*#?\s*(\d+)\s*(?:[.:)\-]|\s|$)")


def extract_problem_number(title: Optional[str]) -> Optional[str]:
    if not title:
        return None
    match = _TITLE_NUMBER.match(title)
    if not match:
        return None
    return str(int(match.group(1)))


def _number_patterns(number: str) -> List[re.Pattern]:
    n = rf"0*{re.escape(number)}(?!\d)"
    return [
        re.compile(rf"#\s*{n}"),
        re.compile(rf"\b(?:leetcode|lc)\s*[-#:]?\s*#?\s*{n}", re.IGNORECASE),
        re.compile(rf"\bproblem\s*#?\s*{n}", re.IGNORECASE),
        re.compile(rf"\bq{n}", re.IGNORECASE),
        re.compile(rf"^\s*{n}\s*(?:[.:)|]|-)"),
    ]


def title_mentions_number(video_title: str, number: str) -> bool:
    if not video_title or not number:
        return False
    return any(pattern.search(video_title) for pattern in _number_patterns(number))


def select_video(items: Iterable[PlaylistItem], title: Optional[str]) -> Tuple[PlaylistItem, bool]:
    """Return the chosen item and whether it matched by number."""
    items = list(items)
    if not items:
        raise VideoLookupError("No videos found in playlist")

    number = extract_problem_number(title)
    if number is not None:
        for item in items:
            if title_mentions_number(item.title, number):
                return item, True
    return items[0], False
