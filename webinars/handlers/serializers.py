"""Serializers for parsing request bodies into use case input."""

from rest_framework import serializers


class ChangeSeatsSerializer(serializers.Serializer):
    """Request body for POST /webinars/{webinar_id}/seats.

    Seats may arrive as a string; it is coerced to an integer here.
    """

    seats = serializers.IntegerField(min_value=0)
