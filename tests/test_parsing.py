import unittest

from studypath.agents.parsing import iter_steps, parse_questions, parse_steps
from studypath.roadmaps.models import MCQQuestion, RoadmapStep


def render_step_block(n: int, title: str, description: str) -> str:
    return f"Step {n}: {title}\nDescription: {description}"


def render_question_block(n: int, question: str, options: list[str], correct: str) -> str:
    lines = [f"Q{n}: {question}"]
    lines += [f"{letter}) {option}" for letter, option in zip("ABCD", options)]
    lines.append(f"Correct: {correct}")
    return "\n".join(lines)


QUESTIONS = [
    ("What is a variable?", ["A name", "A loop", "A file", "A bug"], "A"),
    ("Which keyword defines a function?", ["var", "def", "fun", "fn"], "B"),
    ("What does len() return?", ["Type", "Id", "Length", "Hash"], "C"),
]


class StepParserTests(unittest.TestCase):
    def test_basic_example(self) -> None:
        text = (
            "Step 1: Basics\n"
            "Description: Learn the fundamentals\n"
            "Step 2: Advanced\n"
            "Description: Go deeper\n"
        )
        self.assertEqual(
            parse_steps(text),
            [
                RoadmapStep(title="Basics", description="Learn the fundamentals"),
                RoadmapStep(title="Advanced", description="Go deeper"),
            ],
        )

    def test_recovers_rendered_steps_in_order(self) -> None:
        pairs = [(f"Title {i}", f"Description number {i}") for i in range(1, 8)]
        text = "\n".join(render_step_block(i, t, d) for i, (t, d) in enumerate(pairs, 1))
        steps = parse_steps(text)
        self.assertEqual([(s.title, s.description) for s in steps], pairs)

    def test_trims_values(self) -> None:
        steps = parse_steps("  Step 3:    Spaced title   \r\nDescription:\tTabbed  \r\n")
        self.assertEqual(steps, [RoadmapStep(title="Spaced title", description="Tabbed")])

    def test_ignores_leading_and_trailing_noise(self) -> None:
        text = "Sure! Here is your roadmap:\n\n" + render_step_block(1, "A", "a") + "\n\nGood luck!"
        self.assertEqual(parse_steps(text), [RoadmapStep(title="A", description="a")])

    def test_step_without_description_yields_nothing(self) -> None:
        text = (
            render_step_block(1, "First", "one") + "\n"
            "Step 2: Orphan\n"
            "This line is stray prose\n"
            + render_step_block(3, "Third", "three")
        )
        self.assertEqual(
            [s.title for s in parse_steps(text)],
            ["First", "Third"],
        )

    def test_newer_step_line_replaces_pending_one(self) -> None:
        text = "Step 1: Dropped\nStep 2: Kept\nDescription: yes"
        self.assertEqual(parse_steps(text), [RoadmapStep(title="Kept", description="yes")])

    def test_blank_lines_between_step_and_description(self) -> None:
        text = "Step 1: Spread out\n\n   \nDescription: still counts"
        self.assertEqual(len(parse_steps(text)), 1)

    def test_numbers_are_not_used_for_ordering(self) -> None:
        text = "\n".join([
            render_step_block(5, "Five", "5"),
            render_step_block(1, "One", "1"),
            render_step_block(1, "One again", "1 again"),
        ])
        self.assertEqual([s.title for s in parse_steps(text)], ["Five", "One", "One again"])

    def test_empty_title_or_description_yields_nothing(self) -> None:
        text = "Step 1:\nDescription: no title\nStep 2: No description\nDescription:   "
        self.assertEqual(parse_steps(text), [])

    def test_description_without_step_is_ignored(self) -> None:
        self.assertEqual(parse_steps("Description: floating\n"), [])

    def test_unmatched_text_returns_empty_list(self) -> None:
        self.assertEqual(parse_steps(""), [])
        self.assertEqual(parse_steps("I cannot help with that."), [])

    def test_iter_steps_is_lazy(self) -> None:
        it = iter_steps(render_step_block(1, "A", "a"))
        self.assertEqual(next(it).title, "A")
        with self.assertRaises(StopIteration):
            next(it)


class QuestionParserTests(unittest.TestCase):
    def test_recovers_rendered_questions_in_order(self) -> None:
        text = "\n\n".join(
            render_question_block(i, q, opts, c) for i, (q, opts, c) in enumerate(QUESTIONS, 1)
        )
        parsed = parse_questions(text)
        self.assertEqual(
            [(q.question, q.options, q.correct_answer) for q in parsed],
            [(q, opts, c) for q, opts, c in QUESTIONS],
        )

    def test_missing_correct_line_skips_only_that_block(self) -> None:
        blocks = [render_question_block(i, q, o, c) for i, (q, o, c) in enumerate(QUESTIONS[:2], 1)]
        broken = blocks[0].rsplit("\n", 1)[0]
        parsed = parse_questions(broken + "\n\n" + blocks[1])
        self.assertEqual(len(parsed), 1)
        self.assertEqual(parsed[0].question, QUESTIONS[1][0])

    def test_missing_any_line_drops_block_without_shifting_neighbours(self) -> None:
        first, middle, last = (
            render_question_block(i, q, o, c) for i, (q, o, c) in enumerate(QUESTIONS, 1)
        )
        middle_lines = middle.split("\n")
        for missing in range(1, 6):
            damaged = "\n".join(middle_lines[:missing] + middle_lines[missing + 1:])
            parsed = parse_questions("\n".join([first, damaged, last]))
            self.assertEqual(
                [q.question for q in parsed],
                [QUESTIONS[0][0], QUESTIONS[2][0]],
                f"removed line {missing}",
            )
            self.assertEqual(parsed[1].options, QUESTIONS[2][1])

    def test_block_missing_question_line_is_skipped(self) -> None:
        lines = render_question_block(1, *QUESTIONS[0]).split("\n")[1:]
        self.assertEqual(parse_questions("\n".join(lines)), [])

    def test_blank_line_inside_block_breaks_it(self) -> None:
        text = "Q1: Split?\nA) a\nB) b\n\nC) c\nD) d\nCorrect: A"
        self.assertEqual(parse_questions(text), [])

    def test_options_out_of_order_break_block(self) -> None:
        text = "Q1: Order?\nB) b\nA) a\nC) c\nD) d\nCorrect: A"
        self.assertEqual(parse_questions(text), [])

    def test_correct_letter_must_be_uppercase_a_to_d(self) -> None:
        base = "Q1: Pick\nA) a\nB) b\nC) c\nD) d\nCorrect: {}"
        for bad in ["a", "E", "", "Both"]:
            self.assertEqual(parse_questions(base.format(bad)), [], bad)
        self.assertEqual(parse_questions(base.format("D"))[0].correct_answer, "D")

    def test_correct_line_may_repeat_option_text(self) -> None:
        text = "Q1: Pick\nA) a\nB) b\nC) c\nD) d\nCorrect: B) b"
        self.assertEqual(parse_questions(text)[0].correct_answer, "B")

    def test_new_question_line_restarts_block(self) -> None:
        text = "Q1: Abandoned\nA) a\n" + render_question_block(2, *QUESTIONS[1])
        parsed = parse_questions(text)
        self.assertEqual([q.question for q in parsed], [QUESTIONS[1][0]])

    def test_values_are_trimmed(self) -> None:
        text = "Q1:   Padded?  \nA)  one \nB) two\nC) three\nD) four  \nCorrect:   C  "
        self.assertEqual(
            parse_questions(text),
            [MCQQuestion(question="Padded?", options=["one", "two", "three", "four"], correct_answer="C")],
        )

    def test_numbers_are_decorative(self) -> None:
        text = "\n".join([
            render_question_block(3, *QUESTIONS[0]),
            render_question_block(3, *QUESTIONS[1]),
        ])
        self.assertEqual([q.question for q in parse_questions(text)], [QUESTIONS[0][0], QUESTIONS[1][0]])

    def test_correct_index(self) -> None:
        question = parse_questions(render_question_block(1, *QUESTIONS[2]))[0]
        self.assertEqual(question.correct_index, 2)
        self.assertEqual(question.options[question.correct_index], "Length")

    def test_noise_only_returns_empty_list(self) -> None:
        self.assertEqual(parse_questions("Here are some questions you might like."), [])


if __name__ == "__main__":
    unittest.main()
