"""Building blocks for the video detail page."""
from __future__ import annotations

from typing import Iterable

from markupsafe import Markup, escape

from toptop.schemas import CommentItem, VideoDetail
from ..formatting import format_account_name, format_comment_date, format_number
from . import icons
from .layout import LOGO_IMAGE

_FOLLOWING_CLASSES = "border hover:bg-[#F8F8F8] transition"
_FOLLOW_CLASSES = "border border-pink text-pink hover:bg-[#FFF4F5] transition"
_BREAK_WORDS = 'style="word-wrap: break-word; overflow-wrap: break-word"'


def player(video: VideoDetail, *, back_visible: bool = False) -> Markup:
    """Video element with the back and home affordances overlaid."""

    # Hidden until the browser reports enough history to go back to.
    back_hidden = "" if back_visible else " hidden"
    return Markup(
        f"""
        <div class="relative flex flex-grow items-center justify-center bg-[#1E1619]">
            <video class="h-auto max-h-full w-auto max-w-full" src="{escape(video.video_url)}"
                   poster="{escape(video.cover_url)}" muted loop controls></video>
            <div class="absolute left-5 top-5 flex gap-3">
                <button type="button" data-action="back"
                        class="flex h-[40px] w-[40px] items-center justify-center rounded-full bg-[#3D3C3D] fill-white{back_hidden}">
                    {icons.close()}
                </button>
                <a href="/" class="h-[40px] w-[40px]">
                    <img class="h-full w-full rounded-full object-cover" src="{LOGO_IMAGE}" alt="">
                </a>
            </div>
        </div>
        """
    )


def follow_button(*, is_followed: bool) -> Markup:
    classes = _FOLLOWING_CLASSES if is_followed else _FOLLOW_CLASSES
    label = "Following" if is_followed else "Follow"
    return Markup(
        f'<button type="button" data-action="follow" data-followed="{str(is_followed).lower()}" '
        f'class="mt-2 rounded px-3 py-1 text-sm {classes}">{label}</button>'
    )


def author_header(video: VideoDetail, *, follow_visible: bool, is_followed: bool) -> Markup:
    follow_html = (
        f'<div class="flex-shrink-0">{follow_button(is_followed=is_followed)}</div>' if follow_visible else ""
    )
    return Markup(
        f"""
        <div class="flex">
            <div class="mr-3">
                <img src="{escape(video.user.image)}" alt="" height="40" width="40" class="rounded-full">
            </div>
            <div class="flex-grow">
                <p class="font-bold">{escape(format_account_name(video.user.name))}</p>
                <p class="text-sm">{escape(video.user.name)}</p>
            </div>
            {follow_html}
        </div>
        <p class="my-3" {_BREAK_WORDS}>{escape(video.caption)}</p>
        """
    )


def action_bar(*, is_liked: bool, like_count: int, comment_count: int) -> Markup:
    heart_tone = "fill-pink" if is_liked else ""
    return Markup(
        f"""
        <div class="flex items-center justify-between">
            <div class="flex gap-5">
                <div class="flex items-center gap-1">
                    <button type="button" data-action="like" data-liked="{str(is_liked).lower()}"
                            class="flex h-9 w-9 items-center justify-center rounded-full bg-[#F1F1F2] fill-black">
                        <span class="{heart_tone}" data-role="like-icon">{icons.heart()}</span>
                    </button>
                    <span class="text-center text-xs font-semibold" data-role="like-count">{escape(format_number(like_count))}</span>
                </div>
                <div class="flex items-center gap-1">
                    <span class="flex h-9 w-9 items-center justify-center rounded-full bg-[#F1F1F2] fill-black">{icons.comment()}</span>
                    <p class="text-center text-xs font-semibold" data-role="comment-count">{escape(format_number(comment_count))}</p>
                </div>
            </div>
        </div>
        """
    )


def share_box(href: str) -> Markup:
    return Markup(
        f"""
        <div class="mt-3 flex items-stretch">
            <input class="flex-grow border bg-[#F1F1F2] p-2 text-sm outline-none" readonly type="text"
                   value="{escape(href)}" data-role="share-url">
            <button type="button" class="flex-shrink-0 border px-2" data-action="copy-link">Copy link</button>
        </div>
        """
    )


def comment_item(comment: CommentItem) -> str:
    return f"""
        <div class="flex gap-2" data-comment-id="{escape(str(comment.id))}">
            <div class="flex-shrink-0">
                <img src="{escape(comment.user.image)}" width="40" height="40" class="rounded-full" alt="">
            </div>
            <div class="flex-grow">
                <p class="font-bold">{escape(comment.user.name)}</p>
                <p {_BREAK_WORDS}>{escape(comment.content)}</p>
                <p class="text-sm text-gray-400">{escape(format_comment_date(comment.created_at))}</p>
            </div>
        </div>
    """


def comment_list(comments: Iterable[CommentItem]) -> Markup:
    items = "".join(comment_item(comment) for comment in comments)
    return Markup(
        f"""
        <div class="flex flex-grow flex-col items-stretch gap-3 overflow-y-auto bg-[#F8F8F8] p-5" data-role="comments">
            {items}
        </div>
        """
    )


def comment_form(*, is_posting: bool = False, input_value: str = "") -> Markup:
    disabled = is_posting or not input_value.strip()
    disabled_attr = " disabled" if disabled else ""
    tone = "" if disabled else "text-pink"
    label = "Posting..." if is_posting else "Post"
    return Markup(
        f"""
        <form class="flex flex-shrink-0 gap-3 border-t p-5" data-role="comment-form">
            <input class="flex-grow rounded-md border border-transparent bg-[#F1F1F2] p-2 text-sm outline-none transition placeholder:text-gray-500 focus:border-gray-300"
                   type="text" name="content" placeholder="Add comment..." value="{escape(input_value)}" autocomplete="off">
            <button type="submit" class="transition {tone}"{disabled_attr}>{label}</button>
        </form>
        """
    )


__all__ = [
    "player",
    "follow_button",
    "author_header",
    "action_bar",
    "share_box",
    "comment_item",
    "comment_list",
    "comment_form",
]
