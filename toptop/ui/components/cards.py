"""Card-style components for the home feed."""
from __future__ import annotations

from markupsafe import Markup, escape

from toptop.schemas import VideoCard
from ..formatting import format_account_name, format_number
from . import icons


def video_card(card: VideoCard) -> Markup:
    """Return a feed entry linking to the video detail page."""

    return Markup(
        f"""
        <article class="flex gap-4 border-b py-5">
            <a href="/account/{escape(str(card.user.id))}" class="flex-shrink-0">
                <img src="{escape(card.user.image)}" alt="" class="h-14 w-14 rounded-full object-cover">
            </a>
            <div class="flex flex-grow flex-col gap-2">
                <p>
                    <span class="font-bold">{escape(format_account_name(card.user.name))}</span>
                    <span class="ml-2 text-sm">{escape(card.user.name)}</span>
                </p>
                <p class="whitespace-pre-line" style="word-wrap: break-word; overflow-wrap: break-word">{escape(card.caption)}</p>
                <div class="flex items-end gap-5">
                    <a href="/video/{escape(str(card.id))}" class="block w-[280px] overflow-hidden rounded-md">
                        <img src="{escape(card.cover_url)}" alt="" class="h-[500px] w-full object-cover">
                    </a>
                    <div class="flex flex-col gap-4 text-xs font-semibold">
                        <span class="flex flex-col items-center gap-1">{icons.heart(classes="h-6 w-6")}{escape(format_number(card.like_count))}</span>
                        <span class="flex flex-col items-center gap-1">{icons.comment(classes="h-6 w-6 -scale-x-100")}{escape(format_number(card.comment_count))}</span>
                    </div>
                </div>
            </div>
        </article>
        """
    )


def empty_feed(*, following: bool) -> Markup:
    message = "Follow some accounts to see their videos here." if following else "No videos yet."
    return Markup(f'<p class="py-10 text-center text-sm text-gray-400">{escape(message)}</p>')


__all__ = ["video_card", "empty_feed"]
