"""
Access to the objects built once at startup.
"""

from fastapi import Depends

from dsagenie.models.manager import ModelManager
from dsagenie.pipeline.tutor.tutor import TutorPipeline
from dsagenie.pipeline.video.lookup import VideoLookup


def get_model_manager() -> ModelManager:
    """FastAPI dependency to get the model manager from app state."""
    from ..main import app_state
    return app_state["model_manager"]


def get_tutor_pipeline(model_manager: ModelManager = Depends(get_model_manager)) -> TutorPipeline:
    return TutorPipeline(model_manager)


def get_video_lookup(model_manager: ModelManager = Depends(get_model_manager)) -> VideoLookup:
    return VideoLookup(model_manager.youtube)
