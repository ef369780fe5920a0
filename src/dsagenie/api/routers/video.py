"""
Tutorial video lookup in the curated playlist.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from ..errors import error_response
from ..models.common import APIError
from ..models.video import VideoRequest, VideoResponse, VideoData
from ..dependencies.managers import get_video_lookup
from dsagenie.pipeline.video.lookup import VideoLookup

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/youtube", response_model=VideoResponse, responses={500: {"model": APIError}})
async def youtube(
    request: Optional[VideoRequest] = None,
    lookup: VideoLookup = Depends(get_video_lookup)
):
    """
    Find the playlist video for a problem.

    The first video whose title carries the problem number wins; when nothing
    matches, the first video of the playlist is returned.
    """
    request = request or VideoRequest()
    try:
        match = await run_in_threadpool(lookup.find, request.title, request.problem_slug)
        return VideoResponse(success=True, data=VideoData(video_id=match.video_id))
    except Exception as e:
        logger.error(f"Video lookup failed: {e}")
        return error_response(e)
