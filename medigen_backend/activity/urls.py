# activity/urls.py

from django.urls import path

from activity.views import ActivityLogListView, ActivityLogMarkReadView

app_name = "activity"

urlpatterns = [
    path("", ActivityLogListView.as_view(), name="activity-list"),
    path("<int:pk>/read/", ActivityLogMarkReadView.as_view(), name="activity-mark-read"),
]
