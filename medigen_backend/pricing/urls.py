# pricing/urls.py

from django.urls import path

from pricing.views import DiscountTiersView, PriceQuoteView

app_name = "pricing"

urlpatterns = [
    path("quote/", PriceQuoteView.as_view(), name="quote"),
    path("tiers/", DiscountTiersView.as_view(), name="tiers"),
]
