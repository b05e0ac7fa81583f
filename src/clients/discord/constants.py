"""Shared constants for Discord client components."""

from os import getenv

# Embed colors (Discord color values)
EMBED_COLOR_ERROR = 0xE91515
EMBED_COLOR_INFO = 0x3498DB

# Timeout constants (seconds)
# How long a carousel accepts button presses before freezing
CAROUSEL_VIEW_TIMEOUT = float(getenv("CAROUSEL_VIEW_TIMEOUT", "600"))

# Discord caps embed descriptions at 4096 characters
MAX_EMBED_DESCRIPTION = 4096
