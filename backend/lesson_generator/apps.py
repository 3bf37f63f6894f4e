from django.apps import AppConfig


class LessonGeneratorConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'lesson_generator'
    verbose_name = 'Lesson Generator'
