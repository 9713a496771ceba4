"""
App configuration for the charges app.
"""
import logging

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class ChargesConfig(AppConfig):
    """
    Django AppConfig object for the charges app
    """
    name = 'decline_coordinator.apps.charges'

    def ready(self):
        """
        On Django startup, confirm the decline code table has a record for every DeclineCode and nothing else.
        """
        from decline_coordinator.apps.charges.constants import DeclineCode  # pylint: disable=import-outside-toplevel
        from decline_coordinator.apps.charges.decline_codes import (  # pylint: disable=import-outside-toplevel
            DECLINE_CODES,
            DOC_VERSION
        )

        known = {code.value for code in DeclineCode}
        loaded = set(DECLINE_CODES)

        if known - loaded:
            raise ImproperlyConfigured(f'Decline codes {sorted(known - loaded)} have no record in DECLINE_CODES.')

        if loaded - known:
            raise ImproperlyConfigured(f'DECLINE_CODES has records for unknown decline codes {sorted(loaded - known)}.')

        logger.info(f'Loaded {len(loaded)} decline codes from Stripe docs version {DOC_VERSION}.')
