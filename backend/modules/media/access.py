"""
Access rules for media records.

A user may read a record if they own it or appear in its allow-list.
Only the owner may delete it or change the allow-list. The owner is never
listed; owner access is implicit.
"""

from .models import Media, PermissionAction


def is_owner(media: Media, user_id: str) -> bool:
    return media.owner_id == user_id


def can_read(media: Media, user_id: str) -> bool:
    """True iff the user owns the record or is allow-listed on it."""
    return is_owner(media, user_id) or user_id in media.allowed_user_ids


def apply_permission(media: Media, target_user_id: str, action: PermissionAction) -> list[str]:
    """
    Compute the allow-list after an add or remove.

    Both actions are idempotent: adding a listed user or removing an
    unlisted one returns the list unchanged. Adding the owner is a no-op.
    """
    allowed = list(media.allowed_user_ids)

    if action == PermissionAction.ADD:
        if target_user_id not in allowed and not is_owner(media, target_user_id):
            allowed.append(target_user_id)
        return allowed

    return [user_id for user_id in allowed if user_id != target_user_id]
