"""
API models for the tutorial video lookup endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from .common import APIResponse, loose_text


class VideoRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"title": "1. Two Sum", "problemSlug": "two-sum"}},
    )

    title: Optional[str] = Field(None, description="Problem title; a leading number is used for matching")
    problem_slug: Optional[str] = Field(None, alias="problemSlug")

    @field_validator("title", "problem_slug", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return loose_text(value)


class VideoData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(..., alias="videoId")


class VideoResponse(APIResponse):
    data: Optional[VideoData] = None
