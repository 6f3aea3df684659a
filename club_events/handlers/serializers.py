"""Serializers for request forms and domain model responses."""

from rest_framework import serializers


def _text_field() -> serializers.CharField:
    return serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )


class EventFormSerializer(serializers.Serializer):
    """Multipart form for creating or updating an event.

    Every field is optional here; which ones are required is decided by the
    service. Keys outside this form are dropped, including a `poster` sent
    as text; the poster file is read from the uploaded files only.
    """

    title = _text_field()
    description = _text_field()
    date = _text_field()
    time = _text_field()
    location = _text_field()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateField()
    time = serializers.TimeField()
    location = serializers.CharField()
    poster = serializers.CharField(allow_null=True)
    created_by = serializers.IntegerField()
    club_name = serializers.CharField(allow_null=True)


class RegistrantSerializer(serializers.Serializer):
    """Serializer for Registrant domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()
