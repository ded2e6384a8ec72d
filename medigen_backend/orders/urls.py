# orders/urls.py

from django.urls import path

from orders.views import CheckoutView, MyOrdersView, OrderTrackingView

app_name = "orders"

urlpatterns = [
    path("checkout/", CheckoutView.as_view(), name="checkout"),
    path("mine/", MyOrdersView.as_view(), name="my-orders"),
    path("<str:order_no>/", OrderTrackingView.as_view(), name="tracking"),
]
