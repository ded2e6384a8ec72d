# backend/errors.py

"""
API ERROR NORMALIZATION

Domain failures are returned as:
    {"error": {"code": "<machine_code>", "message": "<human text>"}}
"""

from rest_framework.response import Response


def error_response(*, code: str, message: str, http_status: int):
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )
