# cart/views/bookmarks.py

"""
BOOKMARKS API ("Saved" medicines)

- GET    /api/bookmarks/
- POST   /api/bookmarks/        {medicine_id}
- DELETE /api/bookmarks/<id>/
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from cart.serializers import AddBookmarkInputSerializer, BookmarkListSerializer
from cart.services import BookmarkService
from cart.views.cart import CartAPIView
from users.identity import resolve_cart_identity


class BookmarkAPIView(CartAPIView):
    def get_bookmark_service(self) -> BookmarkService:
        return BookmarkService(resolve_cart_identity(self.request))

    def bookmarks_response(self, service, http_status=status.HTTP_200_OK):
        return Response(
            BookmarkListSerializer({"medicine_ids": service.list()}).data,
            status=http_status,
        )


class BookmarkListView(BookmarkAPIView):
    @extend_schema(responses={200: BookmarkListSerializer})
    def get(self, request):
        return self.bookmarks_response(self.get_bookmark_service())

    @extend_schema(request=AddBookmarkInputSerializer, responses={201: BookmarkListSerializer})
    def post(self, request):
        ser = AddBookmarkInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        service = self.get_bookmark_service()
        service.add(ser.validated_data["medicine_id"])
        return self.bookmarks_response(service, status.HTTP_201_CREATED)


class BookmarkDetailView(BookmarkAPIView):
    @extend_schema(responses={200: BookmarkListSerializer})
    def delete(self, request, medicine_id: str):
        service = self.get_bookmark_service()
        service.remove(medicine_id)
        return self.bookmarks_response(service)
