"""
Local content-policy check for lesson topics.

The lesson prompt already instructs the model to refuse religious topics.
This module catches the obvious cases before any request is sent, using a
keyword list for English and Arabic topics.
"""
import logging
import re
from typing import Set

from lesson_generator.prompts import (
    REFUSAL_EMOJI,
    REFUSAL_INTRODUCTION,
    REFUSAL_NOTICE_CONTENT,
    REFUSAL_NOTICE_HEADING,
    REFUSAL_TITLE,
)
from lesson_generator.types import LessonData, LessonRequest, Section, is_arabic

logger = logging.getLogger(__name__)

RELIGIOUS_TERMS_EN = {
    'religion', 'religions', 'religious', 'theology', 'theological',
    'god', 'allah', 'prophet', 'prophets', 'sahaba',
    'apostle', 'apostles', 'pope', 'imam', 'jesus', 'muhammad',
    'prayer', 'prayers', 'ramadan', 'worship',
    'hajj', 'zakat', 'baptism', 'sermon',
    'mosque', 'mosques', 'synagogue',
    'bible', 'quran', 'koran', 'torah', 'gospel', 'hadith', 'sunnah', 'scripture', 'scriptures',
    'islam', 'islamic', 'christianity', 'judaism', 'jewish', 'hinduism', 'buddhism',
}

# Normalized forms (no diacritics, folded alef, taa marbuta as haa)
RELIGIOUS_TERMS_AR = {
    'دين', 'ديني', 'دينيه', 'اديان', 'الله',
    'اسلام', 'اسلامي', 'اسلاميه', 'مسيحيه', 'مسيحي', 'يهوديه', 'يهودي',
    'نبي', 'انبياء', 'نبويه', 'صحابه', 'صحابي', 'قديس', 'قديسين', 'لاهوت', 'عقيده',
    'صلاه', 'صوم', 'صيام', 'رمضان', 'عباده', 'عبادات', 'حج', 'زكاه', 'وضوء',
    'قران', 'مصحف', 'انجيل', 'توراه', 'مسجد', 'مساجد', 'كنيسه', 'كنائس',
}

RELIGIOUS_PHRASES_AR = ('رسول الله', 'سيره نبويه', 'السيره النبويه')

# Words with common secular uses; a single one is not enough to refuse
AMBIGUOUS_TERMS_EN = {
    'pray', 'praying', 'saint', 'saints', 'st', 'christ', 'christian',
    'church', 'churches', 'fasting', 'faith',
}

# Names and species removed before matching
SECULAR_PHRASES_EN = (
    'praying mantis', 'saint bernard', 'st bernard', 'saint petersburg',
    'st petersburg', 'saint lucia', 'st lucia', 'hans christian', 'christian andersen',
)

_ARABIC_DIACRITICS = re.compile(r"[\u0610-\u061A\u064B-\u065F\u0670\u0640]")
_ARABIC_PREFIXES = ('وال', 'بال', 'فال', 'كال', 'لل', 'ال', 'و', 'ب', 'ف', 'ل')
_WORD = re.compile(r'\w+')


def normalize_text(text: str) -> str:
    """Lowercase, strip Arabic diacritics and fold letter variants"""
    text = _ARABIC_DIACRITICS.sub('', text.lower())
    text = re.sub(r'[آأإٱ]', 'ا', text)
    return text.replace('ة', 'ه').replace('ى', 'ي')


def _arabic_forms(token: str) -> Set[str]:
    forms = {token}
    for prefix in _ARABIC_PREFIXES:
        if token.startswith(prefix) and len(token) - len(prefix) >= 2:
            forms.add(token[len(prefix):])
    return forms


def is_religious_topic(topic: str) -> bool:
    """True when the topic names a religious subject, figure or ritual."""
    if not topic:
        return False

    normalized = normalize_text(topic)
    if any(phrase in normalized for phrase in RELIGIOUS_PHRASES_AR):
        return True

    words = f" {' '.join(_WORD.findall(normalized))} "
    for phrase in SECULAR_PHRASES_EN:
        words = words.replace(f" {phrase} ", ' ')

    tokens = words.split()
    for token in tokens:
        if token in RELIGIOUS_TERMS_EN:
            return True
        if _arabic_forms(token) & RELIGIOUS_TERMS_AR:
            return True

    ambiguous = sum(1 for token in tokens if token in AMBIGUOUS_TERMS_EN)
    return ambiguous >= 2


def build_refusal_lesson(request: LessonRequest) -> LessonData:
    """The fixed 'topic not available' lesson in the requested language"""
    lang = 'ar' if is_arabic(request.language) else 'en'
    return LessonData(
        title=REFUSAL_TITLE[lang],
        emoji=REFUSAL_EMOJI,
        introduction=REFUSAL_INTRODUCTION[lang],
        sections=[
            Section(
                heading=REFUSAL_NOTICE_HEADING[lang],
                content=REFUSAL_NOTICE_CONTENT[lang],
                visual_description="",
            )
        ],
        fun_fact="",
        objectives="",
        teacher_name=request.teacher_name,
        class_name=request.class_name,
        language=request.language,
        is_approved=False,
    )
