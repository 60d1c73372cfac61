import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from rest_framework.filters import SearchFilter, OrderingFilter
from django_filters.rest_framework import DjangoFilterBackend

from .models import Department
from .serializers import (
    DepartmentSerializer,
    DepartmentListSerializer,
    SeedResultSerializer,
)
from .services import DepartmentSeeder

logger = logging.getLogger(__name__)


class DepartmentViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Department management

    list: Get all departments
    retrieve: Get single department details
    create: Create new department (Admin only)
    update: Update department (Admin only)
    destroy: Delete department (Admin only)
    seed: Create the missing common departments (Admin only)
    """
    queryset = Department.objects.all()
    permission_classes = [IsAuthenticated]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['is_active']
    search_fields = ['name', 'code', 'description']
    ordering_fields = ['name', 'code', 'created_at']
    ordering = ['name']

    def get_permissions(self):
        """Set permissions based on action"""
        if self.action in ['create', 'update', 'partial_update', 'destroy', 'seed']:
            return [IsAuthenticated(), IsAdminUser()]
        return [IsAuthenticated()]

    def get_serializer_class(self):
        """Use different serializers for list and detail"""
        if self.action == 'list':
            return DepartmentListSerializer
        return DepartmentSerializer

    def get_queryset(self):
        """Filter queryset based on user permissions"""
        queryset = super().get_queryset()
        # Show only active departments for non-admin users
        if not self.request.user.is_staff:
            queryset = queryset.filter(is_active=True)
        return queryset

    def perform_create(self, serializer):
        department = serializer.save()
        logger.info(f"Department created: {department.name} (ID: {department.id})")

    def perform_update(self, serializer):
        department = serializer.save()
        logger.info(f"Department updated: {department.name} (ID: {department.id})")

    def perform_destroy(self, instance):
        logger.info(f"Department deleted: {instance.name} (ID: {instance.id})")
        instance.delete()

    @action(detail=False, methods=['post'])
    def seed(self, request):
        """Create the common departments that do not exist yet"""
        result = DepartmentSeeder().seed_all()
        serializer = SeedResultSerializer({
            'created': result.created,
            'skipped': result.skipped,
            'error': result.error,
            'ok': result.ok,
        })
        if not result.ok:
            return Response(serializer.data, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(serializer.data)
