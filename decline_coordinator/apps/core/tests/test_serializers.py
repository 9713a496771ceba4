"""Test core.serializers."""

from django.test import SimpleTestCase

from decline_coordinator.apps.core import serializers


class CoordinatorSerializerTests(SimpleTestCase):
    """Tests of the CoordinatorSerializer class."""

    class MockSerializer(serializers.CoordinatorSerializer):
        page_size = serializers.IntegerField(min_value=1, max_value=100)

    def test_create_exception(self):
        with self.assertRaises(TypeError):
            serializers.CoordinatorSerializer().create({})

    def test_update_exception(self):
        with self.assertRaises(TypeError):
            serializers.CoordinatorSerializer().update({}, {})

    def test_valid_data(self):
        self.assertTrue(self.MockSerializer(data={'page_size': 100}).is_valid(raise_exception=True))

    def test_invalid_data_without_raise(self):
        self.assertFalse(self.MockSerializer(data={'page_size': 101}).is_valid())

    def test_invalid_data_raises_wrapped_exception(self):
        with self.assertRaises(serializers.CoordinatorValidationException) as context:
            self.MockSerializer(data={'page_size': 0}).is_valid(raise_exception=True)

        self.assertIsInstance(context.exception.innerException, serializers.ValidationError)
        self.assertIn('page_size', context.exception.innerException.detail)
