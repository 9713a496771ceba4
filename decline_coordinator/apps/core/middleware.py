"""
Middleware for Decline Coordinator.
"""
import logging

from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def log_drf_exceptions(exc, context):
    """
    Log Django REST Framework exceptions before handing back DRF's own response.

    Configured as REST_FRAMEWORK['EXCEPTION_HANDLER'].
    """
    response = exception_handler(exc, context)
    status_code = response.status_code if response else None

    view_name = None
    if context and 'view' in context:
        view_type = type(context['view'])
        view_name = f'{view_type.__module__}.{view_type.__qualname__}'

    exception_type = f'{type(exc).__module__}.{type(exc).__qualname__}' if exc else None

    method = path = query_params = None
    if context and 'request' in context:
        request = context['request']
        method = request.method
        path = request.get_full_path_info()
        query_params = request.query_params

    logger.warning(
        'DRF Exception in APIView: status code: [%s] on view: [%s] of '
        'type: [%s], via [%s] on path: [%s] with exception: [%s].',
        status_code, view_name, exception_type, method, path, exc,
    )
    # The API is read-only, so the query string is all the request carries.
    logger.debug(
        'Query params for DRF Exception on view: [%s]: [%s].',
        view_name, query_params,
    )

    return response
