from django.urls import path
from . import views

urlpatterns = [
    path('generate/', views.generate_lesson_view, name='lesson_generator_generate'),
    path('enhance/', views.enhance_lesson_view, name='lesson_generator_enhance'),
    path('quiz/', views.generate_quiz_view, name='lesson_generator_quiz'),
    path('health/', views.health_check, name='lesson_generator_health'),
]
