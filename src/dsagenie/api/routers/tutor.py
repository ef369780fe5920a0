"""
Explanation, pseudocode and solution endpoints.

Each request renders one prompt and makes one completion call. Failures of any
kind are returned as HTTP 500 with the raw error message.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from ..errors import error_response
from ..models.common import APIError
from ..models.tutor import (
    ProblemRequest, CodeRequest,
    ExplanationResponse, ExplanationData,
    PseudocodeResponse, PseudocodeData,
    CodeResponse, CodeData,
)
from ..dependencies.managers import get_tutor_pipeline
from dsagenie.pipeline.tutor.problem import resolve_problem
from dsagenie.pipeline.tutor.tutor import TutorPipeline
from dsagenie.pipeline.tutor.types import ProblemReference

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {500: {"model": APIError}}


def _problem_from(request: Optional[ProblemRequest]) -> ProblemReference:
    request = request or ProblemRequest()
    return resolve_problem(
        problem_slug=request.problem_slug,
        title=request.title,
        url=request.url,
        description=request.problem_description,
    )


@router.post("/explanation", response_model=ExplanationResponse, responses=ERROR_RESPONSES)
async def explanation(
    request: Optional[ProblemRequest] = None,
    pipeline: TutorPipeline = Depends(get_tutor_pipeline)
):
    """Short explanation: what the problem asks, key insight, steps, complexity."""
    try:
        output = await run_in_threadpool(pipeline.explain, _problem_from(request))
        return ExplanationResponse(success=True, data=ExplanationData(explanation=output.content))
    except Exception as e:
        logger.error(f"Explanation failed: {e}")
        return error_response(e)


@router.post("/pseudocode", response_model=PseudocodeResponse, responses=ERROR_RESPONSES)
async def pseudocode(
    request: Optional[ProblemRequest] = None,
    pipeline: TutorPipeline = Depends(get_tutor_pipeline)
):
    """Minimal pseudocode for the algorithm."""
    try:
        output = await run_in_threadpool(pipeline.pseudocode, _problem_from(request))
        return PseudocodeResponse(success=True, data=PseudocodeData(pseudocode=output.content))
    except Exception as e:
        logger.error(f"Pseudocode failed: {e}")
        return error_response(e)


@router.post("/code", response_model=CodeResponse, responses=ERROR_RESPONSES)
async def code(
    request: Optional[CodeRequest] = None,
    pipeline: TutorPipeline = Depends(get_tutor_pipeline)
):
    """
    Complete solution in the requested language.

    `language` must be cpp, java or python; anything else is answered in cpp.
    """
    try:
        request = request or CodeRequest()
        output = await run_in_threadpool(pipeline.code, _problem_from(request), request.language)
        return CodeResponse(success=True, data=CodeData(code=output.content, language=output.language))
    except Exception as e:
        logger.error(f"Code generation failed: {e}")
        return error_response(e)
