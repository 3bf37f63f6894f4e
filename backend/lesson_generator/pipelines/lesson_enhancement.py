"""
Lesson enhancement pipeline.

Sends an existing lesson back through Gemini for grammar and flow polishing.
Enhancement is best-effort: any failure hands back the original lesson.
"""
import logging
from dataclasses import replace

from lesson_generator.config import config
from lesson_generator.pipelines.lesson_generation import parse_lesson_reply
from lesson_generator.prompts import build_enhance_prompt
from lesson_generator.schemas import LESSON_SCHEMA
from lesson_generator.services.gemini_client import get_gemini_service
from lesson_generator.types import EnhancementResult, LessonData

logger = logging.getLogger(__name__)


def restore_preserved_fields(improved: LessonData, original: LessonData) -> LessonData:
    """
    Put back everything the model must not change.

    Teacher, class, language and approval come from the original lesson;
    section images are re-attached by position.
    """
    sections = [
        replace(
            section,
            image_url=original.sections[i].image_url if i < len(original.sections) else None,
        )
        for i, section in enumerate(improved.sections)
    ]
    return replace(
        improved,
        sections=sections,
        teacher_name=original.teacher_name,
        class_name=original.class_name,
        language=original.language,
        is_approved=original.is_approved,
    )


async def enhance_lesson(lesson: LessonData, language: str) -> EnhancementResult:
    """
    Polish a lesson's language and report whether it worked.

    Args:
        lesson: Lesson to polish
        language: 'ar' or 'en'

    Returns:
        EnhancementResult holding the revised lesson, or the original
        lesson with enhanced=False when anything went wrong
    """
    logger.info(f"Enhancing lesson '{lesson.title}' ({language})")

    try:
        service = get_gemini_service()
        text = await service.generate_json(
            contents=build_enhance_prompt(lesson, language, config.enhance_audience),
            schema=LESSON_SCHEMA,
        )
        improved = parse_lesson_reply(text)
    except Exception as e:
        logger.error(f"Enhancement error: {e}")
        return EnhancementResult(lesson=lesson, enhanced=False, error=str(e))

    logger.info(f"Enhanced lesson '{improved.title}'")
    return EnhancementResult(lesson=restore_preserved_fields(improved, lesson), enhanced=True)


async def enhance_lesson_language(lesson: LessonData, language: str) -> LessonData:
    """Polish a lesson; returns the original object unchanged on failure."""
    result = await enhance_lesson(lesson, language)
    return result.lesson
