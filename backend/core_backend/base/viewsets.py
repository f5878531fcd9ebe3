from rest_framework import viewsets, filters
from django_filters.rest_framework import DjangoFilterBackend
from .mixins import ArchivingViewSetMixin, PartialUpdateMixin
from ..pagination import StandardPagination


class BaseViewSet(PartialUpdateMixin, ArchivingViewSetMixin, viewsets.ModelViewSet):
    """
    Base ViewSet that provides standard configuration for all ModelViewSets.

    Features:
    - Archiving support via ArchivingViewSetMixin
    - PUT behaves as a partial update and rejects empty bodies
    - Standard pagination, filtering, and search

    Usage:
        class MenuItemViewSet(BaseViewSet):
            queryset = MenuItem.objects.all()
            serializer_class = MenuItemSerializer
    """

    pagination_class = StandardPagination

    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]

    # Default ordering (can be overridden)
    ordering = ['id']

