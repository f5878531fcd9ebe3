from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import PaymentCreateSerializer
from .services import PaymentService


class PaymentCreateView(APIView):
    """
    POST {paymentType, paymentAmount} -> {success, paymentId}.

    Open to the self-service kiosk, which pays before an order exists.
    """

    permission_classes = [permissions.AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = PaymentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payment = PaymentService.record_payment(
            serializer.validated_data["paymentType"],
            serializer.validated_data["paymentAmount"],
        )
        return Response(
            {"success": True, "paymentId": payment.id},
            status=status.HTTP_201_CREATED,
        )
