# orders/admin_urls.py

from django.urls import path

from orders.views import AdminOrderListView, AdminOrderStatsView, AdminOrderStatusView

app_name = "orders-admin"

urlpatterns = [
    path("", AdminOrderListView.as_view(), name="list"),
    path("stats/", AdminOrderStatsView.as_view(), name="stats"),
    path("<str:order_no>/status/", AdminOrderStatusView.as_view(), name="status"),
]
