# studypath/agents/workflow.py
import logging
from datetime import datetime, timezone
from typing import List

from studypath.agents.llm.base import LLMClient, LLMError
from studypath.agents.llm.client import get_llm_client
from studypath.agents.parsing import parse_questions, parse_steps
from studypath.agents.prompts import build_question_prompt, build_step_prompt
from studypath.roadmaps.models import MCQQuestion, Roadmap, RoadmapDraft, RoadmapStep
from studypath.roadmaps.store import RoadmapStore

logger = logging.getLogger(__name__)

STEPS_TRANSPORT_MESSAGE = "Failed to generate roadmap. Make sure Ollama is running and accessible."
STEPS_PARSE_MESSAGE = "Failed to parse the response. Please try again."
QUESTIONS_TRANSPORT_MESSAGE = "Failed to generate questions. Please try again."
QUESTIONS_PARSE_MESSAGE = "Failed to parse questions. Please try again."


class GenerationError(Exception):
    """Base class; ``str(err)`` is the message to show the user."""


class GenerationFailed(GenerationError):
    """The model endpoint could not be reached or answered with an error."""


class UnparseableOutput(GenerationError):
    """The model answered but nothing in the text matched the expected format."""

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text


def _call_model(llm: LLMClient, prompt: str, failure_message: str) -> str:
    try:
        return llm.generate_text(prompt=prompt)
    except LLMError as e:
        logger.error("Model call failed: %s", e)
        raise GenerationFailed(failure_message) from e


def generate_steps(topic: str, llm: LLMClient | None = None) -> List[RoadmapStep]:
    llm = llm or get_llm_client()

    raw_text = _call_model(llm, build_step_prompt(topic), STEPS_TRANSPORT_MESSAGE)
    steps = parse_steps(raw_text)
    logger.info("Parsed %d step(s) for topic %r", len(steps), topic)

    if not steps:
        raise UnparseableOutput(STEPS_PARSE_MESSAGE, raw_text)
    return steps


def generate_questions(steps: List[RoadmapStep], llm: LLMClient | None = None) -> List[MCQQuestion]:
    llm = llm or get_llm_client()

    raw_text = _call_model(llm, build_question_prompt(steps), QUESTIONS_TRANSPORT_MESSAGE)
    questions = parse_questions(raw_text)
    logger.info("Parsed %d question(s) from %d step(s)", len(questions), len(steps))

    if not questions:
        raise UnparseableOutput(QUESTIONS_PARSE_MESSAGE, raw_text)
    return questions


def generate_roadmap_draft(topic: str, llm: LLMClient | None = None) -> RoadmapDraft:
    """Generate steps, then questions for them.

    Step failures raise GenerationFailed / UnparseableOutput. A question
    failure keeps the steps and is reported on ``draft.question_error``.
    """
    llm = llm or get_llm_client()

    steps = generate_steps(topic, llm)
    draft = RoadmapDraft(topic=topic, steps=steps)

    try:
        draft.questions = generate_questions(steps, llm)
    except GenerationError as e:
        draft.question_error = str(e)

    return draft


def save_draft(store: RoadmapStore, draft: RoadmapDraft, title: str) -> Roadmap:
    """Stamp the draft with the current time and append it to the store.

    Raises ValueError for a blank title or a draft without steps, and
    StorageWriteError when the store cannot persist it.
    """
    title = title.strip()
    if not title:
        raise ValueError("Roadmap title is required")
    if not draft.steps:
        raise ValueError("Cannot save a roadmap without steps")

    roadmap = Roadmap(
        title=title,
        steps=draft.steps,
        questions=draft.questions,
        created_at=datetime.now(timezone.utc),
    )
    return store.save(roadmap)
