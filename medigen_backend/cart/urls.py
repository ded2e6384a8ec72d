# cart/urls.py

from django.urls import path

from cart.views import (
    BookmarkDetailView,
    BookmarkListView,
    CartItemDetailView,
    CartItemsView,
    CartSummaryView,
    CartView,
    ClearCartView,
)

app_name = "cart"

urlpatterns = [
    path("cart/", CartView.as_view(), name="cart"),
    path("cart/items/", CartItemsView.as_view(), name="cart-items"),
    path("cart/items/<str:medicine_id>/", CartItemDetailView.as_view(), name="cart-item"),
    path("cart/clear/", ClearCartView.as_view(), name="cart-clear"),
    path("cart/summary/", CartSummaryView.as_view(), name="cart-summary"),

    path("bookmarks/", BookmarkListView.as_view(), name="bookmarks"),
    path("bookmarks/<str:medicine_id>/", BookmarkDetailView.as_view(), name="bookmark"),
]
