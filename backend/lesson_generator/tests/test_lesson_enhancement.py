"""
Tests for lesson_generator/pipelines/lesson_enhancement.py

Run with: python -m pytest lesson_generator/tests/test_lesson_enhancement.py -v
"""
import json
import unittest
from unittest.mock import patch, MagicMock, AsyncMock

from lesson_generator.exceptions import ConfigurationError, GenerationError
from lesson_generator.pipelines.lesson_enhancement import enhance_lesson, enhance_lesson_language
from lesson_generator.types import LessonData, Section

SERVICE_PATH = 'lesson_generator.pipelines.lesson_enhancement.get_gemini_service'


def make_lesson() -> LessonData:
    return LessonData(
        title="البراكين",
        emoji="🌋",
        introduction="البركان جبل يثور",
        sections=[
            Section(heading="ما هو", content="محتوى ١", visual_description="بركان", image_url="data:image/png;base64,AAA1"),
            Section(heading="كيف", content="محتوى ٢", visual_description="حمم", image_url=None),
            Section(heading="لماذا", content="محتوى ٣", visual_description="جزيرة", image_url="data:image/png;base64,AAA3"),
        ],
        fun_fact="حقيقة",
        objectives="أهداف",
        teacher_name="أ. نور",
        class_name="الصف الثاني",
        language="ar",
        is_approved=True,
    )


def make_improved_reply(num_sections: int = 3) -> str:
    return json.dumps({
        "title": "البراكين المدهشة",
        "emoji": "🌋",
        "introduction": "البركانُ جبلٌ يثور.",
        "sections": [
            {"heading": f"قسم {i}", "content": f"نص محسن {i}", "visualDescription": f"وصف {i}"}
            for i in range(num_sections)
        ],
        "funFact": "حقيقة ممتعة",
        "objectives": "أهداف محسنة",
        "teacherName": "Gemini",
        "className": "Other",
        "language": "en",
        "isApproved": False,
    }, ensure_ascii=False)


def make_service(reply=None, error=None) -> MagicMock:
    service = MagicMock()
    service.generate_json = AsyncMock(return_value=reply, side_effect=error)
    return service


class TestEnhanceLessonLanguage(unittest.IsolatedAsyncioTestCase):

    async def test_returns_polished_content(self):
        lesson = make_lesson()

        with patch(SERVICE_PATH, return_value=make_service(make_improved_reply())):
            result = await enhance_lesson_language(lesson, 'ar')

        self.assertEqual(result.title, "البراكين المدهشة")
        self.assertEqual(result.sections[0].content, "نص محسن 0")

    async def test_restores_preserved_fields_from_original(self):
        lesson = make_lesson()

        with patch(SERVICE_PATH, return_value=make_service(make_improved_reply())):
            result = await enhance_lesson_language(lesson, 'ar')

        self.assertEqual(result.teacher_name, lesson.teacher_name)
        self.assertEqual(result.class_name, lesson.class_name)
        self.assertEqual(result.language, lesson.language)
        self.assertTrue(result.is_approved)

    async def test_images_realigned_by_index(self):
        lesson = make_lesson()

        with patch(SERVICE_PATH, return_value=make_service(make_improved_reply())):
            result = await enhance_lesson_language(lesson, 'ar')

        for i in range(len(lesson.sections)):
            self.assertEqual(result.sections[i].image_url, lesson.sections[i].image_url)

    async def test_extra_sections_have_no_image(self):
        lesson = make_lesson()

        with patch(SERVICE_PATH, return_value=make_service(make_improved_reply(num_sections=4))):
            result = await enhance_lesson_language(lesson, 'ar')

        self.assertEqual(len(result.sections), 4)
        self.assertIsNone(result.sections[3].image_url)

    async def test_no_text_returns_original_object(self):
        lesson = make_lesson()
        service = make_service(error=GenerationError("No response from Gemini"))

        with patch(SERVICE_PATH, return_value=service):
            result = await enhance_lesson_language(lesson, 'ar')

        self.assertIs(result, lesson)

    async def test_invalid_json_returns_original_object(self):
        lesson = make_lesson()

        with patch(SERVICE_PATH, return_value=make_service("Sorry, I can't help")):
            result = await enhance_lesson_language(lesson, 'en')

        self.assertIs(result, lesson)

    async def test_missing_credentials_return_original_object(self):
        lesson = make_lesson()

        with patch(SERVICE_PATH, side_effect=ConfigurationError("GEMINI_API_KEY not set")):
            result = await enhance_lesson_language(lesson, 'en')

        self.assertIs(result, lesson)

    async def test_prompt_carries_lesson_without_image_data(self):
        lesson = make_lesson()
        service = make_service(make_improved_reply())

        with patch(SERVICE_PATH, return_value=service):
            await enhance_lesson_language(lesson, 'ar')

        prompt = service.generate_json.await_args.kwargs['contents']
        self.assertIn("Educational Arabic (Fusha)", prompt)
        self.assertIn("البركان جبل يثور", prompt)
        self.assertIn("Keep the same JSON structure", prompt)
        self.assertNotIn("base64", prompt)

    async def test_english_register(self):
        service = make_service(make_improved_reply())

        with patch(SERVICE_PATH, return_value=service):
            await enhance_lesson_language(make_lesson(), 'en')

        prompt = service.generate_json.await_args.kwargs['contents']
        self.assertIn("Simple Educational English", prompt)


class TestEnhanceLesson(unittest.IsolatedAsyncioTestCase):

    async def test_reports_success(self):
        with patch(SERVICE_PATH, return_value=make_service(make_improved_reply())):
            result = await enhance_lesson(make_lesson(), 'ar')

        self.assertTrue(result.enhanced)
        self.assertIsNone(result.error)

    async def test_reports_silent_fallback(self):
        lesson = make_lesson()

        with patch(SERVICE_PATH, return_value=make_service(error=GenerationError("No response from Gemini"))):
            result = await enhance_lesson(lesson, 'ar')

        self.assertFalse(result.enhanced)
        self.assertIs(result.lesson, lesson)
        self.assertIn("No response", result.error)


if __name__ == "__main__":
    unittest.main()
