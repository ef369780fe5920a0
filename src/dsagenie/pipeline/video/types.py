from dataclasses import dataclass
from typing import Optional

from dsagenie.models.services.base import ServiceError

class VideoLookupError(ServiceError): ...

@dataclass(frozen=True)
class VideoMatch:
    video_id: str
    video_title: str
    problem_number: Optional[str]
    fallback: bool  # True when no title matched and the first item was used
