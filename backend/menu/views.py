from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from core_backend.base.viewsets import BaseViewSet
from users.permissions import ReadOnlyForCashiers
from .models import MenuItem
from .serializers import (
    MenuBoardSectionSerializer,
    MenuItemSerializer,
    PublicMenuItemSerializer,
)
from .services import MenuService


class MenuItemViewSet(BaseViewSet):
    """
    Menu item management. Lists every item, available or not; deleting an
    item takes it off sale rather than removing it from order history.
    """

    queryset = MenuItem.objects.with_archived()
    serializer_class = MenuItemSerializer
    permission_classes = [ReadOnlyForCashiers]
    filterset_fields = ["item_type", "is_active"]
    search_fields = ["name"]
    ordering_fields = ["id", "name", "price", "item_type"]


class MenuView(APIView):
    """Active menu for the kiosk, the cashier terminal and menu boards."""

    permission_classes = [permissions.AllowAny]

    def get(self, request):
        items = MenuService.active_items()
        category = request.query_params.get("category")
        if category:
            items = items.filter(item_type=category)
        return Response(PublicMenuItemSerializer(items, many=True).data)


class MenuBoardView(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        sections = MenuService.board()
        return Response(MenuBoardSectionSerializer(sections, many=True).data)
