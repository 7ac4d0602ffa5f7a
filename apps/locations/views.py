"""
Read-only location endpoints backing the cascading dropdowns.

Every list endpoint answers {"results": [...]}; an unknown or missing
ancestor yields an empty list rather than an error.
"""

import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .registry import get_registry
from .selection import FieldChange, LocationSelection
from .serializers import SelectionChangeSerializer, SelectionSerializer

logger = logging.getLogger(__name__)


class RegistryAPIView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    registry = None

    def get_registry(self):
        return self.registry if self.registry is not None else get_registry()

    def results(self, names):
        return Response({'results': list(names)})


class StateListView(RegistryAPIView):

    def get(self, request):
        return self.results(self.get_registry().list_states())


class DistrictListView(RegistryAPIView):

    def get(self, request):
        state = request.query_params.get('state')
        return self.results(self.get_registry().list_districts(state))


class MandalListView(RegistryAPIView):

    def get(self, request):
        state = request.query_params.get('state')
        district = request.query_params.get('district')
        return self.results(self.get_registry().list_mandals(state, district))


class AllDistrictListView(RegistryAPIView):
    """Flattened district list across states (names colliding across states appear once)."""

    def get(self, request):
        return self.results(self.get_registry().list_all_districts())


class MandalByDistrictView(RegistryAPIView):
    """Mandals for a district without state context. First matching state wins."""

    def get(self, request):
        district = request.query_params.get('district')
        return self.results(self.get_registry().list_mandals_by_district_only(district))


class SelectionTransitionView(RegistryAPIView):
    """
    Apply one field change to a selection and return the result.

    POST {"state": ..., "district": ..., "mandal": ..., "field": "state", "value": "Goa"}
    """

    def post(self, request):
        serializer = SelectionChangeSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        selection = LocationSelection(
            self.get_registry(),
            state=data.get('state'),
            district=data.get('district'),
            mandal=data.get('mandal'),
        )
        change = FieldChange.from_raw(data['field'], data.get('value'))
        selection.apply(change)

        logger.debug(f"Applied {change.field.value}={change.value!r}: {selection}")
        return Response(SelectionSerializer(selection).data)
