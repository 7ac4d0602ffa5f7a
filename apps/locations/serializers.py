from rest_framework import serializers

from .selection import LocationField


class SelectionChangeSerializer(serializers.Serializer):
    """Current selection plus the field-change event to apply to it."""

    state = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    district = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    mandal = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    field = serializers.ChoiceField(choices=[field.value for field in LocationField])
    value = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)


class SelectionSerializer(serializers.Serializer):
    state = serializers.CharField(allow_null=True)
    district = serializers.CharField(allow_null=True)
    mandal = serializers.CharField(allow_null=True)
    district_options = serializers.ListField(child=serializers.CharField())
    mandal_options = serializers.ListField(child=serializers.CharField())
    district_enabled = serializers.BooleanField()
    mandal_enabled = serializers.BooleanField()
