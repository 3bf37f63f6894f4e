"""
API views for the lesson generator.
"""
import logging

from asgiref.sync import async_to_sync
from google.genai import errors as genai_errors
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from lesson_generator.config import config
from lesson_generator.exceptions import ConfigurationError, GenerationError
from lesson_generator.pipelines.lesson_enhancement import enhance_lesson
from lesson_generator.pipelines.lesson_generation import generate_lesson
from lesson_generator.pipelines.quiz_generation import generate_quiz
from lesson_generator.serializers import LessonLanguageSerializer, LessonRequestSerializer
from lesson_generator.types import (
    lesson_data_from_dict,
    lesson_data_to_dict,
    lesson_request_from_dict,
    quiz_question_to_dict,
)

logger = logging.getLogger(__name__)


def _error_response(e: Exception) -> Response:
    if isinstance(e, ConfigurationError):
        return Response({'ok': False, 'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    return Response({'ok': False, 'error': str(e)}, status=status.HTTP_502_BAD_GATEWAY)


@api_view(['POST'])
def generate_lesson_view(request):
    """
    POST /api/lesson-generator/generate/

    Request:
    {
        "topic": "Volcanoes",
        "subject": "science",     // 'math' | 'reading' | anything else
        "tone": "fun",
        "ageGroup": "6-8",
        "language": "en",         // 'ar' | 'en'
        "teacherName": "Ms. Noor",
        "className": "Grade 2A",
        "image": "data:image/jpeg;base64,..."  // optional
    }

    Response:
    {
        "ok": true,
        "lesson": {"title": "...", "sections": [...], "isApproved": false, ...}
    }
    """
    serializer = LessonRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({'ok': False, 'errors': serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

    lesson_request = lesson_request_from_dict(serializer.validated_data)
    logger.info(f"Generating lesson: topic='{lesson_request.topic}', subject='{lesson_request.subject}'")

    try:
        lesson = async_to_sync(generate_lesson)(lesson_request)
    except (GenerationError, ConfigurationError, genai_errors.APIError) as e:
        logger.error(f"Lesson generation failed: {e}", exc_info=True)
        return _error_response(e)

    return Response({'ok': True, 'lesson': lesson_data_to_dict(lesson)})


@api_view(['POST'])
def enhance_lesson_view(request):
    """
    POST /api/lesson-generator/enhance/

    Request: {"lesson": {...}, "language": "ar" | "en"}

    Response: {"ok": true, "enhanced": true, "lesson": {...}}
    "enhanced" is false when the original lesson came back unchanged.
    """
    serializer = LessonLanguageSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({'ok': False, 'errors': serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

    lesson = lesson_data_from_dict(serializer.validated_data['lesson'])
    result = async_to_sync(enhance_lesson)(lesson, serializer.validated_data['language'])

    body = {'ok': True, 'enhanced': result.enhanced, 'lesson': lesson_data_to_dict(result.lesson)}
    if result.error:
        body['error'] = result.error
    return Response(body)


@api_view(['POST'])
def generate_quiz_view(request):
    """
    POST /api/lesson-generator/quiz/

    Request: {"lesson": {...}, "language": "ar" | "en"}

    Response: {"ok": true, "questions": [{"question": "...", "options": [...], ...}]}
    """
    serializer = LessonLanguageSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({'ok': False, 'errors': serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

    lesson = lesson_data_from_dict(serializer.validated_data['lesson'])

    try:
        questions = async_to_sync(generate_quiz)(lesson, serializer.validated_data['language'])
    except (GenerationError, ConfigurationError, genai_errors.APIError) as e:
        logger.error(f"Quiz generation failed: {e}", exc_info=True)
        return _error_response(e)

    return Response({'ok': True, 'questions': [quiz_question_to_dict(q) for q in questions]})


@api_view(['GET'])
def health_check(request):
    """
    GET /api/lesson-generator/health/

    Reports whether Gemini credentials are configured.
    """
    configured = bool(config.api_key)
    health = {
        'ok': configured,
        'services': {
            'gemini': {
                'configured': configured,
                'text_model': config.text_model,
                'image_model': config.image_model,
            },
        },
        'local_policy_check': config.local_policy_check,
    }
    status_code = 200 if configured else 503
    return Response(health, status=status_code)
