"""
API models for the explanation, pseudocode and code endpoints.

All request fields are optional: the slug falls back to the one in `url`, and
then to "unknown". Fields are read leniently, so a numeric slug is used as
text and values of any other type count as absent.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional

from .common import APIResponse, loose_text

# API Request Models
class ProblemRequest(BaseModel):
    """Reference to a coding problem, as scraped from the problem page."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "problemSlug": "two-sum",
                "title": "1. Two Sum",
                "url": "https://leetcode.com/problems/two-sum/description/",
                "problemDescription": "Given an array of integers nums and an integer target..."
            }
        },
    )

    problem_slug: Optional[str] = Field(None, alias="problemSlug", description="Problem slug, e.g. two-sum")
    title: Optional[str] = Field(None, description="Problem title as displayed")
    url: Optional[str] = Field(None, description="Problem page URL")
    problem_description: Optional[str] = Field(None, alias="problemDescription", description="Problem statement text")

    @field_validator("problem_slug", "title", "url", "problem_description", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return loose_text(value)


class CodeRequest(ProblemRequest):
    """Problem reference plus the target language. Unknown languages fall back to cpp."""
    # any JSON value is accepted; resolve_language does the membership check
    language: Optional[Any] = Field(None, description="One of cpp, java, python")


# API Response Models
class ExplanationData(BaseModel):
    explanation: str

class ExplanationResponse(APIResponse):
    data: Optional[ExplanationData] = None

class PseudocodeData(BaseModel):
    pseudocode: str

class PseudocodeResponse(APIResponse):
    data: Optional[PseudocodeData] = None

class CodeData(BaseModel):
    code: str
    language: str

class CodeResponse(APIResponse):
    data: Optional[CodeData] = None
