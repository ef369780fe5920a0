import logging
from typing import Dict, Any

from dsagenie.models.manager import ModelManager
from dsagenie.models.providers.base import EmptyResponseError
from .problem import resolve_language, language_name
from .types import ProblemReference, TutorOutput

logger = logging.getLogger(__name__)

PROMPT_VERSION = "v1"


class TutorPipeline:
    """One prompt, one completion per artifact. Nothing is cached between calls."""

    def __init__(self, manager: ModelManager):
        self.model_manager = manager

    def explain(self, problem: ProblemReference) -> TutorOutput:
        return self._generate("explanation", problem)

    def pseudocode(self, problem: ProblemReference) -> TutorOutput:
        return self._generate("pseudocode", problem)

    def code(self, problem: ProblemReference, language: Any = None) -> TutorOutput:
        language = resolve_language(language)
        return self._generate(
            "code",
            problem,
            language=language,
            extra_variables={"language_name": language_name(language)},
        )

    def _generate(self, artifact: str, problem: ProblemReference, language: str = None, extra_variables: Dict[str, Any] = None) -> TutorOutput:
        prompt_ref = f"tutor/{artifact}@{PROMPT_VERSION}"
        variables = {
            "problem_name": problem.display_name,
            "problem_statement": problem.statement,
            **(extra_variables or {}),
        }

        logger.info(f"Generating {artifact} for '{problem.slug}'")
        response = self.model_manager.call(task=artifact, prompt_ref=prompt_ref, variables=variables)

        content = (response.content or "").strip()
        if not content:
            label = self.model_manager.provider_for(artifact).label
            raise EmptyResponseError(f"Empty response from {label}")

        return TutorOutput(
            artifact=artifact,
            content=content,
            language=language,
            processing_metadata={
                "prompt_version": prompt_ref,
                "model_used": response.meta.get("model"),
                "latency": response.meta.get("latency"),
            },
        )
