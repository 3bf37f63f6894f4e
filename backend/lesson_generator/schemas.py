"""
Structured-output schemas sent to Gemini with each JSON request.
"""
from google.genai import types

SECTION_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        'heading': types.Schema(
            type=types.Type.STRING,
            description="Subheading for this section in the requested language",
        ),
        'content': types.Schema(
            type=types.Type.STRING,
            description="The educational content, written in simple language",
        ),
        'visualDescription': types.Schema(
            type=types.Type.STRING,
            description=(
                "A detailed description for a visual illustration of this section. "
                "Style: cheerful, colorful, 3D cartoon. Do NOT describe text or labels."
            ),
        ),
    },
    required=['heading', 'content', 'visualDescription'],
)

LESSON_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        'title': types.Schema(
            type=types.Type.STRING,
            description="A catchy, fun title for the lesson in the requested language",
        ),
        'emoji': types.Schema(
            type=types.Type.STRING,
            description="A single emoji representing the topic",
        ),
        'introduction': types.Schema(
            type=types.Type.STRING,
            description="A warm, engaging introduction suitable for a child in the requested language",
        ),
        'sections': types.Schema(
            type=types.Type.ARRAY,
            items=SECTION_SCHEMA,
        ),
        'funFact': types.Schema(
            type=types.Type.STRING,
            description="A surprising or funny fact related to the topic in the requested language",
        ),
        'objectives': types.Schema(
            type=types.Type.STRING,
            description="A brief summary of learning objectives (3 bullet points) in the requested language",
        ),
    },
    required=['title', 'emoji', 'introduction', 'sections', 'funFact', 'objectives'],
)

QUIZ_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            'question': types.Schema(
                type=types.Type.STRING,
                description="The question text",
            ),
            'options': types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(type=types.Type.STRING),
                description="List of 3 or 4 possible answers",
            ),
            'correctAnswerIndex': types.Schema(
                type=types.Type.INTEGER,
                description="The index of the correct answer in the options array (0-based)",
            ),
            'explanation': types.Schema(
                type=types.Type.STRING,
                description="A brief positive explanation of why this answer is correct",
            ),
        },
        required=['question', 'options', 'correctAnswerIndex', 'explanation'],
    ),
)
