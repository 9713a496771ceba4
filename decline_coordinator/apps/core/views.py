""" Core views. """
import logging

from django.http import JsonResponse
from edx_django_utils.monitoring import ignore_transaction

from decline_coordinator.apps.charges.api import get_all_decline_codes
from decline_coordinator.apps.charges.constants import DeclineCode
from decline_coordinator.apps.core.constants import Status

logger = logging.getLogger(__name__)


def health(_):
    """Allows a load balancer to verify this service is up.

    Checks that the decline code table is loaded and covers every known decline code.

    Returns:
        Response: 200 if the service is available, with JSON data indicating the health of each required component
        Response: 503 if the service is unavailable, with JSON data indicating the health of each required component

    Example:
        >>> response = requests.get('http://localhost:8000/health')
        >>> response.status_code
        200
        >>> response.content
        '{"overall_status": "OK", "detailed_status": {"decline_codes_status": "OK"}}'
    """

    # Ignores health check in performance monitoring so as to not artifically inflate our response time metrics
    ignore_transaction()

    if set(get_all_decline_codes()) == {code.value for code in DeclineCode}:
        decline_codes_status = Status.OK
    else:
        logger.error('Health check found the decline code table out of step with DeclineCode.')
        decline_codes_status = Status.UNAVAILABLE

    data = {
        'overall_status': decline_codes_status,
        'detailed_status': {
            'decline_codes_status': decline_codes_status,
        },
    }

    if decline_codes_status == Status.OK:
        return JsonResponse(data)
    else:
        return JsonResponse(data, status=503)
