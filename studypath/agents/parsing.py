# studypath/agents/parsing.py
"""
Line-oriented extraction of steps and questions from raw model text.

The model is only asked (not forced) to follow the templates in
``studypath.agents.prompts``, so both parsers:
- ignore anything outside a well-formed record,
- emit a record only when every line of it matched (no partial records),
- keep textual order and ignore the ``Step N`` / ``Qn`` numbers.

Neither parser raises; an empty list is the caller's signal that nothing
usable came back.
"""
import re
from typing import Iterator, List

from studypath.roadmaps.models import OPTION_LETTERS, MCQQuestion, RoadmapStep

_STEP_LINE = re.compile(r"^Step\s+\d+:(.*)$")
_DESCRIPTION_LINE = re.compile(r"^Description:(.*)$")
_QUESTION_LINE = re.compile(r"^Q\d+:(.*)$")
_OPTION_LINE = re.compile(r"^([A-D])\)(.*)$")
# "Correct: B" and "Correct: B) option text" both count, "Correct: Both" does not
_CORRECT_LINE = re.compile(r"^Correct:\s*([ABCD])(?![A-Za-z])")


def _lines(text: str) -> Iterator[str]:
    for raw in text.splitlines():
        yield raw.strip()


def iter_steps(text: str) -> Iterator[RoadmapStep]:
    pending_title: str | None = None

    for line in _lines(text):
        step = _STEP_LINE.match(line)
        if step:
            # A newer Step line replaces one still waiting for its description
            pending_title = step.group(1).strip() or None
            continue

        if pending_title is None or not line:
            continue

        description = _DESCRIPTION_LINE.match(line)
        if description and description.group(1).strip():
            yield RoadmapStep(title=pending_title, description=description.group(1).strip())
        pending_title = None


def iter_questions(text: str) -> Iterator[MCQQuestion]:
    # block holds the question text followed by the options captured so far
    block: list[str] | None = None

    for line in _lines(text):
        question = _QUESTION_LINE.match(line)
        if question:
            text_value = question.group(1).strip()
            block = [text_value] if text_value else None
            continue

        if block is None:
            continue

        captured = len(block) - 1
        if captured < len(OPTION_LETTERS):
            option = _OPTION_LINE.match(line)
            if (
                option
                and option.group(1) == OPTION_LETTERS[captured]
                and option.group(2).strip()
            ):
                block.append(option.group(2).strip())
            else:
                block = None
            continue

        correct = _CORRECT_LINE.match(line)
        if correct:
            yield MCQQuestion(
                question=block[0],
                options=block[1:],
                correct_answer=correct.group(1),
            )
        block = None


def parse_steps(text: str) -> List[RoadmapStep]:
    return list(iter_steps(text))


def parse_questions(text: str) -> List[MCQQuestion]:
    return list(iter_questions(text))
