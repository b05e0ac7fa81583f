"""Discord UI components for circular carousels."""

from collections.abc import Callable, Sequence
from typing import Any

import discord

from src.adapters.memory_pager import MemoryPager
from src.clients.discord.constants import (
    CAROUSEL_VIEW_TIMEOUT,
    EMBED_COLOR_ERROR,
    EMBED_COLOR_INFO,
    MAX_EMBED_DESCRIPTION,
)
from src.clients.discord.utils import get_user_info
from src.core.circular_pager import CircularPager
from src.core.logging import get_logger
from src.ports.pager import PagerRef, PageSelectedCallback, ScrollStateCallback

logger = get_logger(__name__)


class CircularCarouselView(discord.ui.View):
    """A carousel view that wraps around at both ends.

    Discord has no swipe gestures, so each button press is replayed on an
    in-memory linear pager as a one-page swipe. The circular carousel mounted
    on that pager takes care of wrapping: pressing > on the last item shows
    the first one, pressing < on the first item shows the last one.

    UI Layout:
    - Embed shows the current item with an "Item x of n" footer
    - Row 0: [<] [>] navigation
    """

    def __init__(
        self,
        user: dict[str, Any] | None,
        items: Sequence[Any],
        render_item: Callable[[Any, int], discord.Embed] | None = None,
        initial_index: int = 0,
        title: str = "Carousel",
        on_page_selected: PageSelectedCallback | None = None,
        on_page_scroll_state_changed: ScrollStateCallback | None = None,
        pager_ref: PagerRef | None = None,
    ) -> None:
        """Initialize the carousel view.

        Args:
            user: User dict with name, id, and pfp keys. Only this user may
                navigate the carousel.
            items: The items to cycle through.
            render_item: Builds the embed for one physical page. Defaults to
                an embed showing the item as text.
            initial_index: Item shown first.
            title: Title used by the default renderer.
            on_page_selected: Called with the index of each item shown.
            on_page_scroll_state_changed: Called with every scroll state the
                underlying pager reports.
            pager_ref: Reference the caller can use to command the pager.
        """
        super().__init__(timeout=CAROUSEL_VIEW_TIMEOUT)
        self.user = user
        self.username, self.user_id, self.pfp = get_user_info(user)
        self.title = title
        self.message: discord.Message | None = None
        self.embed: discord.Embed | None = None

        self.carousel: CircularPager[Any, discord.Embed] = CircularPager(
            items,
            render_item=render_item or self.render_default,
            initial_index=initial_index,
            on_page_selected=on_page_selected,
            on_page_scroll_state_changed=on_page_scroll_state_changed,
            pager_ref=pager_ref,
            name=title,
        )
        rendered = self.carousel.render()
        self.pages: list[discord.Embed] = rendered.children
        self.pager = MemoryPager(len(self.pages), rendered.initial_page)
        self.carousel.mount(self.pager)

        self._update_buttons()

    def render_default(self, item: Any, index: int) -> discord.Embed:
        """Render an item as a plain text embed."""
        description = str(item)
        if len(description) > MAX_EMBED_DESCRIPTION:
            description = description[: MAX_EMBED_DESCRIPTION - 3] + "..."
        embed = discord.Embed(
            title=self.title,
            description=description,
            color=EMBED_COLOR_INFO,
        )
        embed.set_author(name=self.username, icon_url=self.pfp)
        return embed

    def _build_embed(self) -> discord.Embed:
        """Build the embed for the page the pager is on."""
        controller = self.carousel.controller
        if not self.pages:
            return discord.Embed(
                title=self.title,
                description="Nothing to show.",
                color=EMBED_COLOR_INFO,
            )

        embed = self.pages[self.pager.current_page].copy()
        logical_index = controller.current_logical_index or 0
        embed.set_footer(text=f"Item {logical_index + 1} of {len(controller.items)}")
        return embed

    def _update_buttons(self) -> None:
        """Update button disabled states based on current state."""
        # A single item has nowhere to go, in either direction
        stuck = len(self.carousel.controller.items) <= 1
        self.previous_button.disabled = stuck
        self.next_button.disabled = stuck

    def _disable_all_buttons(self) -> None:
        """Disable all non-link buttons."""
        for child in self.children:
            if isinstance(child, discord.ui.Button) and not child.url:
                child.disabled = True

    async def initialize(self, interaction: discord.Interaction) -> None:
        """Create and display the carousel embed."""
        self.embed = self._build_embed()
        self.message = await interaction.followup.send(
            embed=self.embed,
            view=self,
        )

    async def _update_embed(self) -> None:
        """Update the message with the current page after navigation."""
        self.embed = self._build_embed()
        self._update_buttons()
        if self.message is not None:
            await self.message.edit(embed=self.embed, view=self)

    async def set_items(self, items: Sequence[Any]) -> None:
        """Replace the items, keeping the current item when it still exists."""
        self.pages = self.carousel.update_items(items).children
        await self._update_embed()

    async def on_timeout(self) -> None:
        """Freeze the carousel when the view times out."""
        self._disable_all_buttons()
        if self.embed:
            self.embed.color = EMBED_COLOR_ERROR

        if self.message is None:
            return
        try:
            await self.message.edit(embed=self.embed, view=self)
        except discord.HTTPException as ex:
            # Message may have been deleted
            logger.warning("carousel_timeout_edit_failed", error=str(ex))

    async def _navigate(self, interaction: discord.Interaction, delta: int) -> None:
        if self.user_id != interaction.user.id:
            await interaction.response.send_message(
                f"Only the original requester ({self.username}) can use this.",
                ephemeral=True,
            )
            return

        await interaction.response.defer()
        self.pager.swipe(delta)
        await self._update_embed()

    # Row 0: Navigation buttons
    @discord.ui.button(label="<", style=discord.ButtonStyle.primary, row=0)
    async def previous_button(
        self,
        interaction: discord.Interaction,
        button: discord.ui.Button["CircularCarouselView"],
    ) -> None:
        """Show the previous item, wrapping to the last."""
        await self._navigate(interaction, -1)

    @discord.ui.button(label=">", style=discord.ButtonStyle.primary, row=0)
    async def next_button(
        self,
        interaction: discord.Interaction,
        button: discord.ui.Button["CircularCarouselView"],
    ) -> None:
        """Show the next item, wrapping to the first."""
        await self._navigate(interaction, 1)
