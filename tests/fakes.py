from studypath.agents.llm.base import LLMClient, LLMError

STEPS_TEXT = """Here is your roadmap:

Step 1: Basics
Description: Learn the fundamentals
Step 2: Advanced
Description: Go deeper
"""

QUESTIONS_TEXT = """Q1: What comes first?
A) Basics
B) Advanced
C) Nothing
D) Everything
Correct: A

Q2: What comes second?
A) Basics
B) Advanced
C) Nothing
D) Everything
Correct: B
"""


class ScriptedLLM(LLMClient):
    """Returns queued replies in order; an exception in the queue is raised."""

    model = "scripted"

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts = []

    def generate_text(self, *, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def down() -> LLMError:
    return LLMError("connection refused")
