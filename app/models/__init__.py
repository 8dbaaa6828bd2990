from .user_profile import UserProfile, UserType

__all__ = [
    "UserProfile",
    "UserType",
]
