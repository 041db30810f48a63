## Pydantic models for roadmaps and their persisted JSON form
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from studypath.roadmaps.slug import encode_slug

OPTION_LETTERS = ("A", "B", "C", "D")

# Records without a usable createdAt sort as the oldest ones
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class RoadmapStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""


class MCQQuestion(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str = ""
    options: List[str] = Field(default_factory=list)
    correct_answer: str = Field(default="", alias="correctAnswer")

    @property
    def correct_index(self) -> int | None:
        if self.correct_answer in OPTION_LETTERS:
            return OPTION_LETTERS.index(self.correct_answer)
        return None

    def labelled_options(self) -> list[tuple[str, str]]:
        return list(zip(OPTION_LETTERS, self.options))


class Roadmap(BaseModel):
    """A saved roadmap.

    Field names follow the stored JSON (``createdAt``, ``correctAnswer``).
    Older records missing fields read back as empty instead of failing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = ""
    steps: List[RoadmapStep] = Field(default_factory=list)
    questions: List[MCQQuestion] = Field(default_factory=list)
    created_at: datetime = Field(default=EPOCH, alias="createdAt")

    @field_validator("created_at", mode="wrap")
    @classmethod
    def _lenient_created_at(cls, value, handler):
        try:
            parsed = handler(value)
        except ValidationError:
            return EPOCH
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    @property
    def slug(self) -> str:
        return encode_slug(self.title)

    def to_record(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class RoadmapDraft(BaseModel):
    """Generated steps/questions not yet saved under a title."""

    model_config = ConfigDict(populate_by_name=True)

    topic: str
    steps: List[RoadmapStep] = Field(default_factory=list)
    questions: List[MCQQuestion] = Field(default_factory=list)
    question_error: str | None = None
