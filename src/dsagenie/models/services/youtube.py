from __future__ import annotations
import logging
from os import getenv
from typing import Any, Dict, List, Optional

import httpx

from .base import PlaylistItem, ServiceError

logger = logging.getLogger(__name__)

YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"
MAX_PAGE_SIZE = 50 # hard limit of the playlistItems endpoint


class YouTubeService:
    def __init__(self, api_key: Optional[str] = None, api_key_env: str = "YOUTUBE_API_KEY", playlist_id: Optional[str] = None, playlist_id_env: str = "YOUTUBE_PLAYLIST_ID", max_results: int = MAX_PAGE_SIZE, timeout: float = 10.0, base_url: str = YOUTUBE_API_BASE, transport: Optional[httpx.BaseTransport] = None):
        """
        Reads one page of a curated playlist through the YouTube Data API v3.

        Credentials and the playlist id fall back to the environment variables
        named by `api_key_env` and `playlist_id_env`.
        """
        self.api_key_env = api_key_env
        self.playlist_id_env = playlist_id_env
        self.api_key = api_key or getenv(api_key_env)
        self.playlist_id = playlist_id or getenv(playlist_id_env)
        self.max_results = max(1, min(int(max_results), MAX_PAGE_SIZE))
        self.client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def missing_settings(self) -> List[str]:
        missing = []
        if not self.api_key:
            missing.append(self.api_key_env)
        if not self.playlist_id:
            missing.append(self.playlist_id_env)
        return missing

    def playlist_items(self) -> List[PlaylistItem]:
        if not self.api_key:
            raise ServiceError(f"{self.api_key_env} not set. Add it to the backend .env file or the deployment environment.")
        if not self.playlist_id:
            raise ServiceError(f"{self.playlist_id_env} not set. Add it to the backend .env file or the deployment environment.")

        params = {
            "part": "snippet",
            "playlistId": self.playlist_id,
            "maxResults": self.max_results,
            "key": self.api_key,
        }
        try:
            response = self.client.get("/playlistItems", params=params)
        except httpx.HTTPError as e:
            raise ServiceError(f"YouTube request failed: {e}") from e

        if response.status_code != 200:
            raise ServiceError(f"YouTube API error ({response.status_code}): {self._error_message(response)}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ServiceError(f"Invalid response from YouTube API: {e}") from e

        items = [self._to_item(raw, index) for index, raw in enumerate(payload.get("items") or [])]
        items = [item for item in items if item is not None]
        logger.debug(f"Fetched {len(items)} items from playlist {self.playlist_id}")
        return items

    @staticmethod
    def _to_item(raw: Dict[str, Any], index: int) -> Optional[PlaylistItem]:
        snippet = raw.get("snippet") or {}
        resource = snippet.get("resourceId") or {}
        video_id = resource.get("videoId") or (raw.get("contentDetails") or {}).get("videoId")
        if not video_id:
            return None
        return PlaylistItem(
            video_id=video_id,
            title=snippet.get("title") or "",
            position=snippet.get("position", index),
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text[:200] or response.reason_phrase
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        return response.reason_phrase

    def health_check(self) -> bool:
        return not self.missing_settings()

    def close(self):
        self.client.close()
