"""
Tests for lesson_generator/pipelines/quiz_generation.py

Run with: python -m pytest lesson_generator/tests/test_quiz_generation.py -v
"""
import json
import unittest
from unittest.mock import patch, MagicMock, AsyncMock

from lesson_generator.exceptions import GenerationError
from lesson_generator.pipelines.quiz_generation import generate_quiz, parse_quiz_reply
from lesson_generator.prompts import QUIZ_SYSTEM_INSTRUCTION
from lesson_generator.schemas import QUIZ_SCHEMA
from lesson_generator.types import LessonData, QuizQuestion, Section

SERVICE_PATH = 'lesson_generator.pipelines.quiz_generation.get_gemini_service'


def make_volcano_lesson() -> LessonData:
    return LessonData(
        title="Volcanoes",
        emoji="🌋",
        introduction="Volcanoes are mountains that erupt",
        sections=[Section(heading="Lava", content="Lava is hot melted rock", visual_description="lava")],
        language="en",
    )


def make_questions():
    return [
        {
            "question": "What comes out of a volcano?",
            "options": ["Lava", "Snow", "Milk"],
            "correctAnswerIndex": 0,
            "explanation": "Great job! Lava is melted rock.",
        },
        {
            "question": "Is lava hot or cold?",
            "options": ["Cold", "Hot", "Frozen", "Wet"],
            "correctAnswerIndex": 1,
            "explanation": "Yes! Lava is very hot.",
        },
        {
            "question": "What is a volcano?",
            "options": ["A river", "A cloud", "A mountain that erupts"],
            "correctAnswerIndex": 2,
            "explanation": "Right, volcanoes are mountains that erupt.",
        },
    ]


def make_service(reply=None, error=None) -> MagicMock:
    service = MagicMock()
    service.generate_json = AsyncMock(return_value=reply, side_effect=error)
    return service


class TestGenerateQuiz(unittest.IsolatedAsyncioTestCase):

    async def test_questions_have_valid_options_and_index(self):
        service = make_service(json.dumps(make_questions()))

        with patch(SERVICE_PATH, return_value=service):
            questions = await generate_quiz(make_volcano_lesson(), 'en')

        self.assertEqual(len(questions), 3)
        for q in questions:
            self.assertIsInstance(q, QuizQuestion)
            self.assertGreaterEqual(len(q.options), 3)
            self.assertTrue(0 <= q.correct_answer_index < len(q.options))

    async def test_prompt_summarises_lesson(self):
        service = make_service(json.dumps(make_questions()))

        with patch(SERVICE_PATH, return_value=service):
            await generate_quiz(make_volcano_lesson(), 'en')

        kwargs = service.generate_json.await_args.kwargs
        self.assertIn("Lesson Title: Volcanoes", kwargs['contents'])
        self.assertIn("Volcanoes are mountains that erupt Lava is hot melted rock", kwargs['contents'])
        self.assertIn("create 3 fun multiple-choice questions", kwargs['contents'])
        self.assertIn("Language: English", kwargs['contents'])
        self.assertIs(kwargs['schema'], QUIZ_SCHEMA)
        self.assertEqual(kwargs['system_instruction'], QUIZ_SYSTEM_INSTRUCTION)

    async def test_arabic_register(self):
        service = make_service(json.dumps(make_questions()))

        with patch(SERVICE_PATH, return_value=service):
            await generate_quiz(make_volcano_lesson(), 'ar')

        self.assertIn("Modern Standard Arabic (Fusha)", service.generate_json.await_args.kwargs['contents'])

    async def test_question_count_is_not_enforced(self):
        service = make_service(json.dumps(make_questions()[:2]))

        with patch(SERVICE_PATH, return_value=service):
            questions = await generate_quiz(make_volcano_lesson(), 'en')

        self.assertEqual(len(questions), 2)

    async def test_no_text_is_fatal(self):
        service = make_service(error=GenerationError("No response from Gemini"))

        with patch(SERVICE_PATH, return_value=service):
            with self.assertRaises(GenerationError):
                await generate_quiz(make_volcano_lesson(), 'en')


class TestParseQuizReply(unittest.TestCase):

    def test_out_of_range_index_rejected(self):
        questions = make_questions()
        questions[0]["correctAnswerIndex"] = 3

        with self.assertRaises(GenerationError):
            parse_quiz_reply(json.dumps(questions))

    def test_negative_index_rejected(self):
        questions = make_questions()
        questions[1]["correctAnswerIndex"] = -1

        with self.assertRaises(GenerationError):
            parse_quiz_reply(json.dumps(questions))

    def test_too_few_options_rejected(self):
        questions = make_questions()
        questions[0]["options"] = ["Lava", "Snow"]

        with self.assertRaises(GenerationError):
            parse_quiz_reply(json.dumps(questions))

    def test_object_reply_rejected(self):
        with self.assertRaises(GenerationError):
            parse_quiz_reply(json.dumps({"questions": make_questions()}))

    def test_invalid_json_rejected(self):
        with self.assertRaises(GenerationError):
            parse_quiz_reply("[{")

    def test_maps_camel_case_fields(self):
        questions = parse_quiz_reply(json.dumps(make_questions()))

        self.assertEqual(questions[1].correct_answer_index, 1)
        self.assertEqual(questions[1].options, ["Cold", "Hot", "Frozen", "Wet"])


if __name__ == "__main__":
    unittest.main()
