from .avatar_repository import AvatarRepository, collect_user_records

__all__ = [
    "AvatarRepository",
    "collect_user_records",
]
