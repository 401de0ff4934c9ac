import html

import bleach
from rest_framework import serializers

from hotels.models import Hotel

NAME_MAX_LENGTH = 255


def _messages(field: str) -> dict:
    return {
        'required': f'{field} is required',
        'blank': f'{field} is required',
        'null': f'{field} is required',
        'invalid': f'{field} must be a string',
    }


def clean_text(v: str) -> str:
    """Strip markup from ``v``, including markup hidden behind entities.

    Entities are decoded before every pass and bleach runs until the value
    stops changing, so the result is plain text with no tags left in it.
    """
    v = (v or '').strip()
    for _ in range(5):
        cleaned = html.unescape(bleach.clean(html.unescape(v), tags=set(), strip=True))
        if cleaned == v:
            break
        v = cleaned
    return v.strip()


class HotelWriteSerializer(serializers.Serializer):
    """Payload accepted by store and update: both fields, every time."""
    name = serializers.CharField(error_messages=_messages('name'))
    address = serializers.CharField(error_messages=_messages('address'))

    def validate_name(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('name is required')
        if len(v) > NAME_MAX_LENGTH:
            raise serializers.ValidationError(f'name must be at most {NAME_MAX_LENGTH} characters')
        return v

    def validate_address(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('address is required')
        return v


class HotelSerializer(serializers.ModelSerializer):
    class Meta:
        model = Hotel
        fields = ['id', 'name', 'address', 'created_at', 'updated_at']
        read_only_fields = fields


def first_error(errors) -> str:
    """Return the first message found in a DRF ``errors`` structure."""
    if isinstance(errors, dict):
        for value in errors.values():
            msg = first_error(value)
            if msg:
                return msg
        return ''
    if isinstance(errors, (list, tuple)):
        for value in errors:
            msg = first_error(value)
            if msg:
                return msg
        return ''
    return str(errors)
