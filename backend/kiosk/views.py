import logging

from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from users.models import User
from .policies import RejectionReason
from .serializers import (
    AddItemSerializer,
    CheckoutSerializer,
    OrderStateSerializer,
    RemoveItemSerializer,
)
from .services import KioskError, KioskService, KioskSessionStore

logger = logging.getLogger(__name__)


def mutation_response(state, result):
    """
    Constraint rejections are ordinary outcomes (200, accepted false); an
    out-of-range position is a client error (400). Both return the order
    unchanged.
    """
    body = {
        "accepted": result.accepted,
        "reason": result.reason.value if result.reason else None,
        "order": OrderStateSerializer(state).data,
    }
    if result.reason is RejectionReason.OUT_OF_RANGE:
        return Response(body, status=status.HTTP_400_BAD_REQUEST)
    return Response(body)


class KioskView(APIView):
    """
    Self-service kiosk and cashier terminal endpoints. Anyone may order; a
    signed-in cashier's orders are attributed to them.
    """

    permission_classes = [permissions.AllowAny]


class KioskOrderView(KioskView):
    def get(self, request):
        state = KioskSessionStore.load(request.session)
        return Response(OrderStateSerializer(state).data)

    def delete(self, request):
        state = KioskService.clear(request.session)
        return Response(OrderStateSerializer(state).data)


class KioskOrderItemsView(KioskView):
    def post(self, request):
        serializer = AddItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            state, result = KioskService.add_item(
                request.session,
                serializer.validated_data["menu_item_id"],
                serializer.validated_data.get("category"),
            )
        except KioskError as e:
            return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)

        return mutation_response(state, result)


class KioskOrderItemDetailView(KioskView):
    def delete(self, request, position):
        serializer = RemoveItemSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        state, result = KioskService.remove_item(
            request.session, position, serializer.validated_data.get("category")
        )
        return mutation_response(state, result)


class KioskCheckoutView(KioskView):
    def post(self, request):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        staff = None
        if request.user.is_authenticated and request.user.role in (User.Role.MANAGER, User.Role.CASHIER):
            staff = request.user

        try:
            order = KioskService.checkout(
                request.session, serializer.validated_data["payment_type"], staff=staff
            )
        except KioskError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {
                "success": True,
                "orderId": order.id,
                "total": str(order.total),
                "paymentId": order.payment_id,
                "order": OrderStateSerializer(KioskSessionStore.load(request.session)).data,
            },
            status=status.HTTP_201_CREATED,
        )
