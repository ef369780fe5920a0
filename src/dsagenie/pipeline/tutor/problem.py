"""
Helpers that turn loosely filled request fields into a ProblemReference.
"""
import re
from typing import Any, Optional

from .types import ProblemReference

PROBLEM_URL_MARKER = "leetcode.com/problems/"
_SLUG_PATTERN = re.compile(r"leetcode\.com/problems/([^/?#]+)")

UNKNOWN_SLUG = "unknown"

# order matters: the first entry is the fallback
LANGUAGES = {
    "cpp": "C++",
    "java": "Java",
    "python": "Python",
}
DEFAULT_LANGUAGE = next(iter(LANGUAGES))


def parse_slug_from_url(url: Optional[str]) -> Optional[str]:
    if not url or PROBLEM_URL_MARKER not in url:
        return None
    match = _SLUG_PATTERN.search(url)
    return match.group(1) if match else None


def resolve_problem(
    problem_slug: Optional[str] = None,
    title: Optional[str] = None,
    url: Optional[str] = None,
    description: Optional[str] = None,
) -> ProblemReference:
    slug = problem_slug or parse_slug_from_url(url) or UNKNOWN_SLUG
    return ProblemReference(slug=slug, title=title, url=url, description=description)


def resolve_language(language: Any) -> str:
    return language if isinstance(language, str) and language in LANGUAGES else DEFAULT_LANGUAGE


def language_name(language: str) -> str:
    return LANGUAGES.get(language, LANGUAGES[DEFAULT_LANGUAGE])
