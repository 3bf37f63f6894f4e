"""Prompts for Gemini-based lesson, enhancement and quiz generation"""
import json

from lesson_generator.types import LessonData, LessonRequest, is_arabic, lesson_data_to_dict

# Fixed refusal lesson, shared by the model instruction and the local policy check
REFUSAL_EMOJI = "🚫"
REFUSAL_TITLE = {
    'ar': "عذراً - موضوع غير متاح",
    'en': "Topic Not Available",
}
REFUSAL_INTRODUCTION = {
    'ar': (
        "نعتذر منك، ولكن منصة ديم التعليمية مخصصة للمواضيع العلمية، الثقافية، "
        "والقصص الخيالية العامة، ولا تدعم المواضيع الدينية."
    ),
    'en': (
        "We're sorry, but the Deem learning platform is dedicated to scientific and cultural "
        "topics and general imaginative stories, and does not support religious topics."
    ),
}
REFUSAL_NOTICE_HEADING = {
    'ar': "تنبيه",
    'en': "Notice",
}
REFUSAL_NOTICE_CONTENT = {
    'ar': "يرجى اختيار موضوع آخر مثل الفضاء، أو الحيوانات، أو الرياضيات، أو القيم.",
    'en': "Please choose a different topic, such as Space, Animals, Math, or Values.",
}


MATH_INSTRUCTION = """
SUBJECT: MATHEMATICS (Arithmetic, Shapes, Logic).
STYLE GUIDE:
1. Use Emojis to visualize numbers (e.g., "3 Apples: 🍎🍎🍎").
2. Explain concepts step-by-step with simple examples.
3. For 'sections', create:
   - Section 1: The Concept (What is it?)
   - Section 2: Visual Example (Real world usage)
   - Section 3: Let's Practice (A guided problem)
4. Avoid complex formulas. Use friendly text-based math.
"""

READING_INSTRUCTION = """
SUBJECT: LITERACY & READING (Phonics, Vocabulary, Story).
STYLE GUIDE:
1. If Arabic: Use Tashkeel (Diacritics/Harakat) extensively to help with pronunciation.
2. Focus on the target letter or word.
3. For 'sections', create:
   - Section 1: The Sound/Letter (Pronunciation)
   - Section 2: Words list (Vocabulary with images descriptions)
   - Section 3: A short 3-sentence story using these words.
4. Highlight key words in the content.
"""

GENERAL_INSTRUCTION = """
SUBJECT: GENERAL KNOWLEDGE (Science, History, Story).
STYLE: {tone}.
Break down the topic into:
- Section 1: Definition / Intro
- Section 2: How it works / Details
- Section 3: Why it matters / Conclusion
"""

CONTENT_POLICY = f"""
CRITICAL CONTENT POLICY - STRICTLY ENFORCED:
1. This platform is strictly for GENERAL EDUCATIONAL, SCIENTIFIC, HISTORICAL, and IMAGINATIVE topics.
2. DO NOT generate content related to RELIGIOUS TOPICS, THEOLOGY, RELIGIOUS FIGURES (Prophets, Sahaba, Saints), or RELIGIOUS RITUALS (Prayer, Fasting, Worship) of ANY religion (Islam, Christianity, etc.).
3. IF the requested Topic is Religious:
   - You MUST REFUSE to generate the lesson content.
   - Instead, return a valid JSON structure representing an apology.
   - Title: "{REFUSAL_TITLE['ar']}" (or "{REFUSAL_TITLE['en']}" if English).
   - Introduction: "{REFUSAL_INTRODUCTION['ar']}"
     (or "{REFUSAL_INTRODUCTION['en']}" if English).
   - Sections: Create one section titled "{REFUSAL_NOTICE_HEADING['ar']}" (Notice) asking the user to choose a different topic like Space, Animals, Math, or Values.
   - Emoji: {REFUSAL_EMOJI}
"""

LESSON_SYSTEM_INSTRUCTION = (
    "You are '{teacher_name}'. Write in clear, educational language suitable for children. "
    "STRICTLY NO RELIGIOUS CONTENT."
)

QUIZ_SYSTEM_INSTRUCTION = "Create supportive, non-tricky questions suitable for children."

REFERENCE_IMAGE_INSTRUCTION = (
    "Please incorporate the content of the attached image into the lesson explanation if relevant."
)


def subject_instruction(subject: str, tone: str) -> str:
    """Pick the section layout and style guide for a subject category"""
    if subject == 'math':
        return MATH_INSTRUCTION
    if subject == 'reading':
        return READING_INSTRUCTION
    return GENERAL_INSTRUCTION.format(tone=tone)


def build_lesson_prompt(request: LessonRequest) -> str:
    """Build the user prompt for lesson generation"""
    arabic = is_arabic(request.language)
    register = (
        'Modern Standard Arabic (Fusha) suitable for primary education'
        if arabic else 'English suitable for primary education'
    )

    return f"""
You are an expert elementary school teacher who creates magical, engaging lessons for children.
{CONTENT_POLICY}
If the topic is NOT religious, proceed to create a lesson for a child aged {request.age_group} years old.

Topic: {request.topic}
Subject Category: {request.subject}
Language: {register}.
{subject_instruction(request.subject, request.tone)}
General Instructions:
1. Use simple, clear, and educational vocabulary.
2. Make it visually descriptive.
3. Ensure the content is accurate and educational.
4. Include 3 specific learning objectives.

The content MUST be in {'Arabic' if arabic else 'English'}.
"""


def build_lesson_system_instruction(request: LessonRequest, default_name: str = "Teacher") -> str:
    return LESSON_SYSTEM_INSTRUCTION.format(teacher_name=request.teacher_name or default_name)


def build_image_prompt(description: str) -> str:
    """Build the illustration prompt for one lesson section"""
    return f"""Create a cheerful, bright, 3D cartoon style illustration for children based on this description: {description}.
IMPORTANT RULES:
1. Do NOT include any text, letters, words, numbers, or labels inside the image.
2. The image must be purely visual.
3. No speech bubbles."""


def build_enhance_prompt(lesson: LessonData, language: str, audience: str = "Children (6-11 years)") -> str:
    """
    Build the polishing prompt.

    Unlike a full dump of the lesson, the JSON payload leaves out section
    images; the enhancement pipeline puts them back by section index.
    """
    register = 'Educational Arabic (Fusha)' if is_arabic(language) else 'Simple Educational English'
    lesson_json = json.dumps(lesson_data_to_dict(lesson, include_images=False), ensure_ascii=False)

    return f"""
Review and improve the following educational lesson content.
Target Audience: {audience}.
Language: {register}.

Tasks:
1. Correct any grammar or spelling mistakes.
2. Improve flow and clarity.
3. Ensure tone is engaging and age-appropriate.
4. Keep the same JSON structure.

Lesson JSON:
{lesson_json}
"""


def build_lesson_summary(lesson: LessonData) -> str:
    """Introduction followed by every section body"""
    return ' '.join([lesson.introduction] + [s.content for s in lesson.sections])


def build_quiz_prompt(lesson: LessonData, language: str, question_count: int = 3) -> str:
    """Build the user prompt for quiz generation"""
    register = 'Modern Standard Arabic (Fusha)' if is_arabic(language) else 'English'

    return f"""
Based on the following lesson, create {question_count} fun multiple-choice questions to check understanding.
Language: {register}.

Lesson Title: {lesson.title}
Lesson Content Summary: {build_lesson_summary(lesson)}
"""
