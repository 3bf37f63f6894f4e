"""
Quiz generation pipeline.

Turns a lesson into a short multiple-choice quiz.
"""
import json
import logging
from typing import List

from lesson_generator.config import config
from lesson_generator.exceptions import GenerationError
from lesson_generator.prompts import QUIZ_SYSTEM_INSTRUCTION, build_quiz_prompt
from lesson_generator.schemas import QUIZ_SCHEMA
from lesson_generator.serializers import QuizQuestionSerializer
from lesson_generator.services.gemini_client import get_gemini_service
from lesson_generator.types import LessonData, QuizQuestion, quiz_question_from_dict

logger = logging.getLogger(__name__)


def parse_quiz_reply(text: str) -> List[QuizQuestion]:
    """
    Parse and validate a structured quiz reply.

    The number of questions is left to the prompt; each question must have
    3-4 options and an answer index inside them.

    Raises:
        GenerationError: if the text is not a JSON list of valid questions
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise GenerationError(f"Gemini returned invalid JSON: {e}") from e

    if not isinstance(payload, list):
        raise GenerationError("Gemini returned a quiz that is not a list")

    serializer = QuizQuestionSerializer(data=payload, many=True)
    if not serializer.is_valid():
        raise GenerationError(f"Gemini returned malformed quiz questions: {serializer.errors}")

    return [quiz_question_from_dict(item) for item in serializer.validated_data]


async def generate_quiz(lesson: LessonData, language: str) -> List[QuizQuestion]:
    """
    Generate multiple-choice questions for a lesson.

    Raises:
        GenerationError: if Gemini returns no text or unusable questions
    """
    logger.info(f"Generating quiz for lesson '{lesson.title}' ({language})")

    service = get_gemini_service()
    text = await service.generate_json(
        contents=build_quiz_prompt(lesson, language, config.quiz_question_count),
        schema=QUIZ_SCHEMA,
        system_instruction=QUIZ_SYSTEM_INSTRUCTION,
    )

    questions = parse_quiz_reply(text)
    logger.info(f"Generated {len(questions)} quiz questions")
    return questions
