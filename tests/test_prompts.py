import unittest

from studypath.agents.prompts import build_question_prompt, build_step_prompt, render_steps
from studypath.roadmaps.models import RoadmapStep


class PromptTests(unittest.TestCase):
    def test_step_prompt_embeds_topic_and_format(self) -> None:
        prompt = build_step_prompt("Rust")
        self.assertIn("Create a learning roadmap for Rust with exactly 5 steps.", prompt)
        for n in range(1, 6):
            self.assertIn(f"Step {n}: [title]\nDescription: [description]", prompt)
        self.assertNotIn("Step 6:", prompt)

    def test_step_prompt_is_deterministic(self) -> None:
        self.assertEqual(build_step_prompt("Go"), build_step_prompt("Go"))

    def test_question_prompt_numbers_steps(self) -> None:
        steps = [
            RoadmapStep(title="Basics", description="Learn the fundamentals"),
            RoadmapStep(title="Advanced", description="Go deeper"),
        ]
        self.assertEqual(
            render_steps(steps),
            "1. Basics: Learn the fundamentals\n2. Advanced: Go deeper",
        )
        prompt = build_question_prompt(steps)
        self.assertIn("1. Basics: Learn the fundamentals\n2. Advanced: Go deeper", prompt)
        self.assertIn("Q1: [question]\nA) [option1]\nB) [option2]\nC) [option3]\nD) [option4]\nCorrect: [A/B/C/D]", prompt)
        self.assertIn("Generate 5 multiple choice questions", prompt)

    def test_question_prompt_with_no_steps(self) -> None:
        prompt = build_question_prompt([])
        self.assertIn("learning steps:\n\n", prompt)


if __name__ == "__main__":
    unittest.main()
