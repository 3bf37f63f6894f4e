"""
Lesson generation for young learners, backed by Gemini structured output.

This package provides:
1. Lesson generation with per-section illustrations
2. Language polishing of existing lessons
3. Multiple-choice quiz generation from a lesson
"""
