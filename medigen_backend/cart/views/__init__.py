from .bookmarks import BookmarkDetailView, BookmarkListView
from .cart import (
    CartItemDetailView,
    CartItemsView,
    CartSummaryView,
    CartView,
    ClearCartView,
)

__all__ = [
    "BookmarkDetailView",
    "BookmarkListView",
    "CartItemDetailView",
    "CartItemsView",
    "CartSummaryView",
    "CartView",
    "ClearCartView",
]
