"""
Core backend base components.

Foundational viewsets, serializers and mixins shared by the apps so that
list endpoints, archiving and partial updates behave the same everywhere.
"""

from .viewsets import BaseViewSet
from .serializers import BaseModelSerializer
from .mixins import ArchivingViewSetMixin, PartialUpdateMixin

__all__ = [
    # ViewSets
    'BaseViewSet',

    # Serializers
    'BaseModelSerializer',

    # Mixins
    'ArchivingViewSetMixin',
    'PartialUpdateMixin',
]
