from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from .engine import ChatbotEngine
from .serializers import ChatMessageSerializer


class ChatbotView(APIView):
    """POST {message}: the assistant's answer plus suggested follow-up questions."""

    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = ChatMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reply = ChatbotEngine.reply(serializer.validated_data["message"])
        return Response(reply.to_dict())
