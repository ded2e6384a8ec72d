# catalog/urls.py

"""
CATALOG URLS

- /api/catalog/medicines/                 (list: AllowAny, write: admin)
- /api/catalog/medicines/<id>/
- /api/catalog/medicines/expiring-soon/   (admin)
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from catalog.views import MedicineViewSet

router = DefaultRouter()
router.register(r"medicines", MedicineViewSet, basename="medicines")

urlpatterns = [
    path("", include(router.urls)),
]
