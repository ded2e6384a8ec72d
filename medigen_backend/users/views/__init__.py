# users/views/__init__.py
"""
Shopper / admin account endpoints mounted under /api/auth/.

Registration and login hand back a JWT pair; /me/ echoes the token owner.
"""

from .auth import LoginView, RegisterView
from .me import MeView

__all__ = ["LoginView", "MeView", "RegisterView"]
