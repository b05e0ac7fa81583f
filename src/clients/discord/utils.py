"""Shared utilities for Discord views."""

from typing import Any


def get_user_info(user: dict[str, Any] | None) -> tuple[str, int, str | None]:
    """Get username, user ID, and avatar from a user dict.

    Args:
        user: Dict with name, id, and pfp keys, or None.

    Returns:
        Tuple of (username, user_id, avatar_url). The avatar is None for
        system-owned carousels.
    """
    if user:
        return user["name"], user["id"], user["pfp"]
    return "System", 0, None

