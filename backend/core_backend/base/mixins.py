from rest_framework.viewsets import ViewSetMixin
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework import status
from .permissions import CanArchiveRecords


class PartialUpdateMixin:
    """
    Treat PUT like PATCH: only the supplied fields change.

    A request that carries none of the serializer's updatable fields is
    rejected with 400 instead of silently succeeding.
    """

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        serializer_class = self.get_serializer_class()
        if hasattr(serializer_class, 'get_updatable_fields'):
            updatable = serializer_class.get_updatable_fields()
            if not any(field in request.data for field in updatable):
                return Response(
                    {'error': 'No fields to update'},
                    status=status.HTTP_400_BAD_REQUEST,
                )
        return super().update(request, *args, **kwargs)


class ArchivingViewSetMixin(ViewSetMixin):
    """
    A ViewSet mixin that provides archiving functionality for models using SoftDeleteMixin.

    Features:
    - Automatically filters out archived records by default
    - Supports ?include_archived=true|only query parameter
    - Provides archive/unarchive actions
    """

    def get_queryset(self):
        queryset = super().get_queryset()

        if not hasattr(queryset.model, 'is_active'):
            return queryset

        manager = queryset.model._default_manager
        include_archived = self.request.query_params.get('include_archived', '').lower()

        if self.action == 'unarchive' or include_archived in ['true', '1', 'yes']:
            if hasattr(manager, 'with_archived'):
                queryset = manager.with_archived()
        elif include_archived == 'only':
            if hasattr(manager, 'archived_only'):
                queryset = manager.archived_only()

        return queryset

    @action(detail=True, methods=['post', 'patch'], permission_classes=[CanArchiveRecords])
    def archive(self, request, pk=None):
        obj = self.get_object()

        if not obj.is_active:
            return Response(
                {'error': 'Record is already archived.'},
                status=status.HTTP_400_BAD_REQUEST
            )

        obj.archive()

        return Response(
            {'message': f'{obj._meta.verbose_name} archived successfully.'},
            status=status.HTTP_200_OK
        )

    @action(detail=True, methods=['post', 'patch'], permission_classes=[CanArchiveRecords])
    def unarchive(self, request, pk=None):
        obj = self.get_object()

        if obj.is_active:
            return Response(
                {'error': 'Record is not archived.'},
                status=status.HTTP_400_BAD_REQUEST
            )

        obj.unarchive()

        return Response(
            {'message': f'{obj._meta.verbose_name} unarchived successfully.'},
            status=status.HTTP_200_OK
        )
