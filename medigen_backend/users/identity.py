# users/identity.py

"""
IDENTITY RESOLUTION

Carts and bookmarks are scoped to an explicit Identity value, never to
ambient request state. Views resolve the identity once and pass it down.

Rules:
- Authenticated users -> "user:<uuid>"
- Guests -> "guest:<token>" (X-Guest-Id header, else the session key)
- Guest and user stores are distinct; switching identity swaps stores,
  nothing is merged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from users.models import ROLE_ADMIN, ROLE_USER

GUEST_HEADER = "HTTP_X_GUEST_ID"
_GUEST_TOKEN_RE = re.compile(r"^[A-Za-z0-9_-]{8,64}$")


class IdentityError(Exception):
    pass


@dataclass(frozen=True)
class Identity:
    id: str
    email: str = ""
    name: str = ""
    role: str = ROLE_USER
    is_guest: bool = False

    @property
    def key(self) -> str:
        prefix = "guest" if self.is_guest else "user"
        return f"{prefix}:{self.id}"

    @property
    def is_admin(self) -> bool:
        return not self.is_guest and self.role == ROLE_ADMIN

    @classmethod
    def for_user(cls, user) -> "Identity":
        return cls(
            id=str(user.id),
            email=user.email,
            name=getattr(user, "name", "") or "",
            role=getattr(user, "role", ROLE_USER) or ROLE_USER,
        )

    @classmethod
    def guest(cls, token: str) -> "Identity":
        token = (token or "").strip()
        if not _GUEST_TOKEN_RE.match(token):
            raise IdentityError("Invalid guest token")
        return cls(id=token, is_guest=True)


def get_current_identity(request) -> Identity | None:
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return Identity.for_user(user)
    return None


def resolve_cart_identity(request) -> Identity:
    """
    Identity that owns the cart / bookmarks for this request.
    """
    identity = get_current_identity(request)
    if identity is not None:
        return identity

    token = (request.META.get(GUEST_HEADER) or "").strip()
    if token:
        return Identity.guest(token)

    session = getattr(request, "session", None)
    if session is None:
        raise IdentityError("No guest token and no session available")

    if not session.session_key:
        session.save()
    return Identity.guest(session.session_key)
