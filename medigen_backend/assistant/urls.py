# assistant/urls.py

from django.urls import path

from assistant.views import AskAssistantView

app_name = "assistant"

urlpatterns = [
    path("ask/", AskAssistantView.as_view(), name="ask"),
]
