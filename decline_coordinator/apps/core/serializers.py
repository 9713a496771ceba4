"""
Serializers shared between apps.
"""
from rest_framework.serializers import *  # pylint: disable=wildcard-import; this module extends DRF serializers


class CoordinatorValidationException(Exception):
    """
    Wraps a DRF ValidationError raised outside of a view, so callers such as API clients can tell input
    validation failures apart from errors returned by a payment gateway.
    """

    innerException: Exception = None

    def __init__(self, inner: Exception) -> None:
        """
        Args:
            inner: Exception, the ValidationError being wrapped.
        """
        super().__init__(*inner.args)
        self.innerException = inner


class CoordinatorSerializer(Serializer):
    """
    Serializer for model-less validation of arguments and query params.

    - create() and update() raise, there is nothing to save.
    - With raise_exception, ValidationErrors come back as CoordinatorValidationException.
    """

    type_error = TypeError(
        'CoordinatorSerializer is for model-less validation only.'
    )

    def create(self, validated_data):
        raise self.type_error

    def update(self, instance, validated_data):
        raise self.type_error

    def is_valid(self, *, raise_exception=False):
        try:
            return super().is_valid(raise_exception=raise_exception)
        except ValidationError as inner:
            raise CoordinatorValidationException(inner)
