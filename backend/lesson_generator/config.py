"""
Configuration for the lesson generator.
"""
import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = '1') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class GeneratorConfig:
    """Generator configuration loaded from environment variables"""

    # Gemini
    api_key: str
    text_model: str = "gemini-2.5-flash"
    image_model: str = "gemini-2.5-flash-image"

    # Prompting
    quiz_question_count: int = 3
    enhance_audience: str = "Children (6-11 years)"
    default_teacher_name: str = "Teacher"
    reference_image_mime_type: str = "image/jpeg"

    # Content policy
    local_policy_check: bool = True

    # Logging
    log_level: str = "INFO"


def load_config() -> GeneratorConfig:
    """Load configuration from environment variables"""
    return GeneratorConfig(
        # Same key names as the rest of the backend
        api_key=os.getenv('GEMINI_API_KEY') or os.getenv('GOOGLE_AI_API_KEY', ''),
        text_model=os.getenv('LESSON_TEXT_MODEL', 'gemini-2.5-flash'),
        image_model=os.getenv('LESSON_IMAGE_MODEL', 'gemini-2.5-flash-image'),

        quiz_question_count=int(os.getenv('QUIZ_QUESTION_COUNT', '3')),
        enhance_audience=os.getenv('ENHANCE_AUDIENCE', 'Children (6-11 years)'),
        default_teacher_name=os.getenv('DEFAULT_TEACHER_NAME', 'Teacher'),
        reference_image_mime_type=os.getenv('REFERENCE_IMAGE_MIME_TYPE', 'image/jpeg'),

        local_policy_check=_env_flag('CONTENT_POLICY_LOCAL_CHECK'),

        log_level=os.getenv('LOG_LEVEL', 'INFO'),
    )


# Global config instance
config = load_config()
