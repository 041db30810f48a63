# studypath/agents/prompts.py
from typing import Sequence

from studypath.roadmaps.models import RoadmapStep

STEP_COUNT = 5
QUESTION_COUNT = 5


def build_step_prompt(topic: str) -> str:
    step_lines = "\n".join(
        f"Step {n}: [title]\nDescription: [description]"
        for n in range(1, STEP_COUNT + 1)
    )
    return f"""Create a learning roadmap for {topic} with exactly {STEP_COUNT} steps. Each step should have a title and description. Format the response exactly like this, with no additional text:

{step_lines}"""


def render_steps(steps: Sequence[RoadmapStep]) -> str:
    return "\n".join(
        f"{i + 1}. {step.title}: {step.description}" for i, step in enumerate(steps)
    )


def build_question_prompt(steps: Sequence[RoadmapStep]) -> str:
    return f"""Generate {QUESTION_COUNT} multiple choice questions based on these learning steps:
{render_steps(steps)}

Format each question exactly like this, with no additional text:

Q1: [question]
A) [option1]
B) [option2]
C) [option3]
D) [option4]
Correct: [A/B/C/D]

Q2: [question]
...and so on for all {QUESTION_COUNT} questions."""
