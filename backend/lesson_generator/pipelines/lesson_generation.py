"""
Lesson generation pipeline.

Coordinates prompt assembly, the structured lesson request and the
per-section illustration fan-out.
"""
import asyncio
import json
import logging
from dataclasses import replace
from typing import List

from google.genai import types

from lesson_generator.config import config
from lesson_generator.exceptions import GenerationError
from lesson_generator.prompts import (
    REFERENCE_IMAGE_INSTRUCTION,
    build_image_prompt,
    build_lesson_prompt,
    build_lesson_system_instruction,
)
from lesson_generator.schemas import LESSON_SCHEMA
from lesson_generator.serializers import GeneratedLessonSerializer
from lesson_generator.services.content_policy import build_refusal_lesson, is_religious_topic
from lesson_generator.services.gemini_client import get_gemini_service
from lesson_generator.types import LessonData, LessonRequest, Section, lesson_data_from_dict
from lesson_generator.utils.data_uri import decode_image

logger = logging.getLogger(__name__)


def parse_lesson_reply(text: str) -> LessonData:
    """
    Parse and validate a structured lesson reply.

    Raises:
        GenerationError: if the text is not JSON or misses required fields
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise GenerationError(f"Gemini returned invalid JSON: {e}") from e

    serializer = GeneratedLessonSerializer(data=payload)
    if not serializer.is_valid():
        raise GenerationError(f"Gemini returned a malformed lesson: {serializer.errors}")

    return lesson_data_from_dict(serializer.validated_data)


def build_lesson_contents(request: LessonRequest) -> List[types.Part]:
    """Prompt parts, with the reference image first when one is attached"""
    parts = [types.Part.from_text(text=build_lesson_prompt(request))]

    if request.image:
        try:
            mime_type, data = decode_image(request.image, config.reference_image_mime_type)
        except ValueError as e:
            logger.warning(f"Ignoring reference image: {e}")
        else:
            parts.insert(0, types.Part.from_bytes(data=data, mime_type=mime_type))
            parts.append(types.Part.from_text(text=REFERENCE_IMAGE_INSTRUCTION))

    return parts


async def _illustrate_section(section: Section) -> Section:
    if not section.visual_description:
        return section
    service = get_gemini_service()
    image_url = await service.generate_image(build_image_prompt(section.visual_description))
    return replace(section, image_url=image_url)


async def attach_section_images(lesson: LessonData) -> LessonData:
    """
    Illustrate every section that has a visual description.

    Requests run concurrently; a failed illustration leaves that section's
    image empty and never fails the lesson.
    """
    try:
        results = await asyncio.gather(
            *(_illustrate_section(section) for section in lesson.sections),
            return_exceptions=True,
        )
    except Exception as e:
        logger.error(f"Error generating section images: {e}")
        return lesson

    sections: List[Section] = []
    for index, (original, result) in enumerate(zip(lesson.sections, results)):
        if isinstance(result, BaseException):
            logger.error(f"Image generation failed for section {index}: {result}")
            sections.append(original)
        else:
            sections.append(result)

    illustrated = sum(1 for s in sections if s.image_url)
    logger.info(f"Illustrated {illustrated}/{len(sections)} sections")
    return replace(lesson, sections=sections)


async def generate_lesson(request: LessonRequest) -> LessonData:
    """
    Generate a complete lesson with illustrations.

    Args:
        request: Teacher's lesson request

    Returns:
        LessonData with teacher/class/language injected and is_approved False

    Raises:
        GenerationError: if Gemini returns no text or an unusable lesson
    """
    logger.info(f"=== Starting lesson generation for: {request.topic} ({request.subject}, {request.language}) ===")

    if config.local_policy_check and is_religious_topic(request.topic):
        logger.warning(f"Topic refused by local content policy: {request.topic}")
        return build_refusal_lesson(request)

    service = get_gemini_service()
    text = await service.generate_json(
        contents=build_lesson_contents(request),
        schema=LESSON_SCHEMA,
        system_instruction=build_lesson_system_instruction(request, config.default_teacher_name),
    )

    generated = parse_lesson_reply(text)
    logger.info(f"Generated lesson '{generated.title}' with {len(generated.sections)} sections")

    # Inject teacher and class info provided by the request
    lesson = replace(
        generated,
        teacher_name=request.teacher_name,
        class_name=request.class_name,
        language=request.language,
        is_approved=False,
    )

    lesson = await attach_section_images(lesson)

    logger.info("=== Lesson generation complete ===")
    return lesson

