from .user import ROLE_ADMIN, ROLE_USER, User, UserManager

__all__ = ["User", "UserManager", "ROLE_ADMIN", "ROLE_USER"]
