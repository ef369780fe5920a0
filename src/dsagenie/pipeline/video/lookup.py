import logging
from typing import Optional

from dsagenie.models.services.youtube import YouTubeService
from .matcher import extract_problem_number, select_video
from .types import VideoMatch

logger = logging.getLogger(__name__)


class VideoLookup:
    def __init__(self, service: YouTubeService):
        self.service = service

    def find(self, title: Optional[str] = None, problem_slug: Optional[str] = None) -> VideoMatch:
        items = self.service.playlist_items()
        item, matched = select_video(items, title)

        if not matched:
            logger.info(f"No playlist video matched '{title or problem_slug}', using first item {item.video_id}")

        return VideoMatch(
            video_id=item.video_id,
            video_title=item.title,
            problem_number=extract_problem_number(title),
            fallback=not matched,
        )
