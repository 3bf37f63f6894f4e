"""Errors raised by the lesson generator."""


class LessonGeneratorError(Exception):
    """Base class for lesson generator failures."""


class ConfigurationError(LessonGeneratorError):
    """Gemini credentials are missing or unusable."""


class GenerationError(LessonGeneratorError):
    """The model returned no text, or text that does not match the expected shape."""
