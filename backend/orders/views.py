import logging

from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from payments.models import Payment
from users.models import User
from users.permissions import IsPOSStaff
from .filters import OrderFilter
from .models import Order
from .serializers import OrderCreateSerializer, OrderItemsSerializer, OrderSerializer
from .services import OrderService, OrderServiceError

logger = logging.getLogger(__name__)


class OrderListCreateView(generics.ListCreateAPIView):
    """
    GET: order history, oldest first, optionally narrowed by year/month/day.
    POST {total, staffId, paymentId}: record an order; staffId 0 or null
    means a self-service kiosk order.
    """

    serializer_class = OrderSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = OrderFilter

    def get_queryset(self):
        return (
            Order.objects.select_related("staff", "payment")
            .prefetch_related("items")
            .order_by("time", "id")
        )

    def get_permissions(self):
        if self.request.method == "POST":
            return [permissions.AllowAny()]
        return [IsPOSStaff()]

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        return Response({"orders": OrderSerializer(queryset, many=True).data})

    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        staff = None
        if data.get("staffId"):
            staff = User.objects.with_archived().filter(pk=data["staffId"]).first()
            if staff is None:
                return Response({"error": "Unknown staff member"}, status=status.HTTP_400_BAD_REQUEST)

        payment = None
        if data.get("paymentId"):
            payment = Payment.objects.filter(pk=data["paymentId"]).first()
            if payment is None:
                return Response({"error": "Unknown payment"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            order = OrderService.create_order(data["total"], staff=staff, payment=payment)
        except OrderServiceError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({"success": True, "orderId": order.id}, status=status.HTTP_201_CREATED)


class OrderItemsView(APIView):
    """POST {menuItemIds}: attach menu items to an existing order."""

    permission_classes = [permissions.AllowAny]

    def post(self, request, pk, *args, **kwargs):
        order = get_object_or_404(Order, pk=pk)
        serializer = OrderItemsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            items = OrderService.add_items(order, serializer.validated_data["menuItemIds"])
        except OrderServiceError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {
                "success": True,
                "orderId": order.id,
                "menuItemIds": [item.menu_item_id for item in items],
            },
            status=status.HTTP_201_CREATED,
        )
