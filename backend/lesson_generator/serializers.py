"""DRF serializers that define the lesson and quiz contracts."""
from rest_framework import serializers


class SectionSerializer(serializers.Serializer):
    """One lesson section as produced by the model."""
    heading = serializers.CharField(allow_blank=True)
    content = serializers.CharField(allow_blank=True)
    visualDescription = serializers.CharField(allow_blank=True, required=False, default='')
    imageUrl = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class GeneratedLessonSerializer(serializers.Serializer):
    """Lesson fields the model is responsible for."""
    title = serializers.CharField()
    emoji = serializers.CharField(allow_blank=True)
    introduction = serializers.CharField(allow_blank=True)
    sections = SectionSerializer(many=True, allow_empty=False)
    funFact = serializers.CharField(allow_blank=True)
    objectives = serializers.CharField(allow_blank=True)


class LessonDataSerializer(GeneratedLessonSerializer):
    """Full lesson including the application-injected fields."""
    teacherName = serializers.CharField(required=False, allow_blank=True, default='')
    className = serializers.CharField(required=False, allow_blank=True, default='')
    language = serializers.ChoiceField(choices=['ar', 'en'], required=False, default='ar')
    isApproved = serializers.BooleanField(required=False, default=False)


class QuizQuestionSerializer(serializers.Serializer):
    """Multiple-choice question with a bounded answer index."""
    question = serializers.CharField()
    options = serializers.ListField(
        child=serializers.CharField(allow_blank=True),
        min_length=3,
        max_length=4,
    )
    correctAnswerIndex = serializers.IntegerField(min_value=0)
    explanation = serializers.CharField(allow_blank=True)

    def validate(self, attrs):
        if attrs['correctAnswerIndex'] >= len(attrs['options']):
            raise serializers.ValidationError(
                {'correctAnswerIndex': 'Must be a valid index into options.'}
            )
        return attrs


class LessonRequestSerializer(serializers.Serializer):
    """Teacher's lesson request as posted by the frontend."""
    topic = serializers.CharField()
    subject = serializers.CharField(required=False, default='general')
    tone = serializers.CharField(required=False, allow_blank=True, default='fun')
    ageGroup = serializers.CharField(required=False, default='6-8')
    language = serializers.ChoiceField(choices=['ar', 'en'], required=False, default='ar')
    teacherName = serializers.CharField(required=False, allow_blank=True, default='')
    className = serializers.CharField(required=False, allow_blank=True, default='')
    image = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=True)


class LessonLanguageSerializer(serializers.Serializer):
    """Body shared by the enhance and quiz endpoints."""
    lesson = LessonDataSerializer()
    language = serializers.ChoiceField(choices=['ar', 'en'])
