"""Discord client package."""

from src.clients.discord.utils import get_user_info
from src.clients.discord.views import CircularCarouselView

__all__ = [
    "CircularCarouselView",
    "get_user_info",
]
