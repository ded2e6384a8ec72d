from .admin import AdminOrderListView, AdminOrderStatsView, AdminOrderStatusView
from .public import CheckoutView, MyOrdersView, OrderTrackingView

__all__ = [
    "AdminOrderListView",
    "AdminOrderStatsView",
    "AdminOrderStatusView",
    "CheckoutView",
    "MyOrdersView",
    "OrderTrackingView",
]
