from __future__ import annotations
from dataclasses import dataclass

class ServiceError(RuntimeError): ...

@dataclass(frozen=True)
class PlaylistItem:
    video_id: str
    title: str
    position: int
