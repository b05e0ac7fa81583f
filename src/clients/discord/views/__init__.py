"""Discord UI views."""

from src.clients.discord.views.carousel import CircularCarouselView

__all__ = [
    "CircularCarouselView",
]
