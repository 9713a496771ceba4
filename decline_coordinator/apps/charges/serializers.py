"""
Serializers for the charges app.
"""
from decline_coordinator.apps.charges.constants import BASE_LOCALE, DeclineCategory
from decline_coordinator.apps.core import serializers


class DeclineCodeQuerySerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Query params for the decline code detail view.

    locale is free text, an unknown locale just finds no message.
    """
    locale = serializers.CharField(max_length=16, default=BASE_LOCALE.value)


class TranslationSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    description = serializers.CharField()
    next_user_action = serializers.CharField()


class DeclineCodeInfoSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    description = serializers.CharField()
    next_steps = serializers.CharField()
    next_user_action = serializers.CharField()
    category = serializers.ChoiceField(choices=[category.value for category in DeclineCategory])
    translations = serializers.DictField(child=TranslationSerializer())


class DeclineCodeListSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    doc_version = serializers.CharField()
    decline_codes = serializers.ListField(child=serializers.CharField())
