# assistant/views.py

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from assistant.serializers import AskInputSerializer, AskResponseSerializer
from assistant.services import ask_assistant
from backend.throttling import AssistantThrottle


class AskAssistantView(APIView):
    """
    POST /api/assistant/ask/ {message}

    Always 200 with a reply; upstream failures come back as fixed text.
    """

    permission_classes = [AllowAny]
    throttle_classes = [AssistantThrottle]

    @extend_schema(request=AskInputSerializer, responses={200: AskResponseSerializer})
    def post(self, request):
        ser = AskInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        reply = ask_assistant(ser.validated_data["message"])
        return Response(AskResponseSerializer({"reply": reply}).data)
