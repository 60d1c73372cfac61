import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from .serializers import PositionSerializer
from .services import PositionCatalog

logger = logging.getLogger(__name__)


class PositionViewSet(viewsets.ViewSet):
    """
    Hotel positions

    list: Get all available positions
    search: Search positions by name or description (?q=)
    """
    permission_classes = [IsAuthenticated]
    catalog = PositionCatalog()

    def list(self, request):
        logger.debug("Fetching all positions")
        serializer = PositionSerializer(self.catalog.list_all(), many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'])
    def search(self, request):
        query = request.query_params.get('q')
        logger.debug("Searching positions with query: %s", query)
        serializer = PositionSerializer(self.catalog.search(query), many=True)
        return Response(serializer.data)
