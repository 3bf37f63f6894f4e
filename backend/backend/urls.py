"""
URL configuration for backend project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.1/topics/http/urls/
"""
from django.urls import path, include

urlpatterns = [
    path('api/lesson-generator/', include('lesson_generator.urls')),
]
