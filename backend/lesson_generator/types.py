"""
Shared types for the lesson generator.
"""
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LessonRequest:
    """Teacher's input for lesson generation"""
    topic: str
    subject: str = "general"  # 'math', 'reading', anything else is general knowledge
    tone: str = "fun"
    age_group: str = "6-8"
    language: str = "ar"  # 'ar' | 'en'
    teacher_name: str = ""
    class_name: str = ""
    image: Optional[str] = None  # base64 payload or data URI


@dataclass
class Section:
    """One titled block of lesson content with its illustration"""
    heading: str
    content: str
    visual_description: str = ""
    image_url: Optional[str] = None  # data URI, None when absent or failed


@dataclass
class LessonData:
    """Generated lesson plus the fields the application injects"""
    title: str
    emoji: str
    introduction: str
    sections: List[Section] = field(default_factory=list)
    fun_fact: str = ""
    objectives: str = ""
    teacher_name: str = ""
    class_name: str = ""
    language: str = "ar"
    is_approved: bool = False


@dataclass
class QuizQuestion:
    """Multiple-choice question checking a lesson"""
    question: str
    options: List[str]
    correct_answer_index: int
    explanation: str = ""


@dataclass
class EnhancementResult:
    """Outcome of a language-polishing round trip"""
    lesson: LessonData
    enhanced: bool
    error: Optional[str] = None


def is_arabic(language: Optional[str]) -> bool:
    """Everything except an explicit 'en' is written in Arabic."""
    return language != 'en'


# Helper functions for type conversions
def section_to_dict(section: Section, include_image: bool = True) -> Dict[str, Any]:
    """Convert Section to dict for serialization"""
    data = {
        'heading': section.heading,
        'content': section.content,
        'visualDescription': section.visual_description,
    }
    if include_image:
        data['imageUrl'] = section.image_url
    return data


def section_from_dict(data: Dict[str, Any]) -> Section:
    """Build a Section from its JSON form"""
    return Section(
        heading=data.get('heading', ''),
        content=data.get('content', ''),
        visual_description=data.get('visualDescription') or '',
        image_url=data.get('imageUrl'),
    )


def lesson_data_to_dict(lesson: LessonData, include_images: bool = True) -> Dict[str, Any]:
    """Convert LessonData to dict for serialization"""
    return {
        'title': lesson.title,
        'emoji': lesson.emoji,
        'introduction': lesson.introduction,
        'sections': [section_to_dict(s, include_image=include_images) for s in lesson.sections],
        'funFact': lesson.fun_fact,
        'objectives': lesson.objectives,
        'teacherName': lesson.teacher_name,
        'className': lesson.class_name,
        'language': lesson.language,
        'isApproved': lesson.is_approved,
    }


def lesson_data_from_dict(data: Dict[str, Any]) -> LessonData:
    """Build LessonData from its JSON form (generated or stored)"""
    return LessonData(
        title=data.get('title', ''),
        emoji=data.get('emoji', ''),
        introduction=data.get('introduction', ''),
        sections=[section_from_dict(s) for s in data.get('sections') or []],
        fun_fact=data.get('funFact', ''),
        objectives=data.get('objectives', ''),
        teacher_name=data.get('teacherName') or '',
        class_name=data.get('className') or '',
        language=data.get('language') or 'ar',
        is_approved=bool(data.get('isApproved', False)),
    )


def lesson_request_from_dict(data: Dict[str, Any]) -> LessonRequest:
    """Build a LessonRequest from its JSON form"""
    return LessonRequest(
        topic=data.get('topic', ''),
        subject=data.get('subject') or 'general',
        tone=data.get('tone') or 'fun',
        age_group=str(data.get('ageGroup') or '6-8'),
        language=data.get('language') or 'ar',
        teacher_name=data.get('teacherName') or '',
        class_name=data.get('className') or '',
        image=data.get('image') or None,
    )


def quiz_question_to_dict(question: QuizQuestion) -> Dict[str, Any]:
    """Convert QuizQuestion to dict for serialization"""
    return {
        'question': question.question,
        'options': list(question.options),
        'correctAnswerIndex': question.correct_answer_index,
        'explanation': question.explanation,
    }


def quiz_question_from_dict(data: Dict[str, Any]) -> QuizQuestion:
    """Build a QuizQuestion from its JSON form"""
    return QuizQuestion(
        question=data.get('question', ''),
        options=list(data.get('options') or []),
        correct_answer_index=int(data.get('correctAnswerIndex', 0)),
        explanation=data.get('explanation', ''),
    )
