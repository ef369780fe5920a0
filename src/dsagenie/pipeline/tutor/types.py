from dataclasses import dataclass
from typing import Optional, Dict, Any

MAX_DESCRIPTION_CHARS = 6000

# Input types
@dataclass(frozen=True)
class ProblemReference:
    slug: str
    title: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.title if self.title else self.slug

    @property
    def statement(self) -> str:
        """Trimmed, bounded description or a one-line stand-in when there is none."""
        if self.description and self.description.strip():
            return self.description.strip()[:MAX_DESCRIPTION_CHARS]
        return f"LeetCode problem: {self.display_name}"

# Output types
@dataclass
class TutorOutput:
    artifact: str  # explanation | pseudocode | code
    content: str
    language: Optional[str] = None
    processing_metadata: Optional[Dict[str, Any]] = None
