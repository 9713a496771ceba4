"""
Views for the charges app
"""
import logging

from rest_framework.response import Response
from rest_framework.views import APIView

from decline_coordinator.apps.charges.api import (
    get_all_decline_codes,
    get_decline_category,
    get_decline_description,
    get_decline_message,
    get_doc_version
)
from decline_coordinator.apps.charges.serializers import (
    DeclineCodeInfoSerializer,
    DeclineCodeListSerializer,
    DeclineCodeQuerySerializer
)

logger = logging.getLogger(__name__)


class DeclineCodeListView(APIView):
    """
    List every known decline code along with the Stripe documentation version of the table.
    """
    http_method_names = ['get']

    def get(self, request):
        """Return the decline codes."""
        output = DeclineCodeListSerializer({
            'doc_version': get_doc_version(),
            'decline_codes': sorted(get_all_decline_codes()),
        })
        return Response(output.data)


class DeclineCodeDetailView(APIView):
    """
    Guidance for one decline code.

    Unknown decline codes are not an error: the response carries the doc version with an empty code, and null
    category and message, the same answers the lookup functions give.
    """
    http_method_names = ['get']

    def get(self, request, decline_code):
        """Return the decline code info, its category and the end user message in the requested locale."""
        params = DeclineCodeQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        locale = params.validated_data['locale']

        result = get_decline_description(decline_code)
        if result.is_empty:
            logger.info('[DeclineCodeDetailView] unknown decline code [%s] requested.', decline_code)
            code = {}
        else:
            code = DeclineCodeInfoSerializer(result.code.to_dict()).data

        category = get_decline_category(decline_code)

        return Response({
            'doc_version': result.doc_version,
            'code': code,
            'category': category.value if category else None,
            'message': get_decline_message(decline_code, locale),
        })
