"""Left-hand navigation shown on the feed pages."""
from __future__ import annotations

from typing import Iterable

from markupsafe import Markup, escape

from toptop.schemas import UserSummary
from ..formatting import format_account_name
from . import icons

SIGN_IN_PATH = "/sign-in"
FOLLOWING_FEED_PATH = "/?following=1"

FOOTER_LINK_GROUPS: tuple[tuple[str, ...], ...] = (
    ("About", "Newsroom", "Store", "Contact", "Careers", "ByteDance"),
    ("TikTik for Good", "Advertise", "Developers", "Transparency", "TikTik Rewards"),
    ("Help", "Safety", "Terms", "Privacy", "Creator Portal", "Community Guidelines"),
)
COPYRIGHT_NOTICE = "© 2022 TopTop"

_ACTIVE = "fill-pink text-pink"
_INACTIVE = "fill-black text-black"


def is_following_feed(flag: str | None) -> bool:
    """Any non-empty ``following`` query value selects the following feed."""

    return bool(flag)


def _nav_link(href: str, label: str, icon: Markup, *, active: bool) -> str:
    tone = _ACTIVE if active else _INACTIVE
    aria = ' aria-current="page"' if active else ""
    return (
        f'<a href="{escape(href)}" class="flex items-center gap-2 {tone}" data-active="{str(active).lower()}"{aria}>'
        f"{icon}<span>{escape(label)}</span></a>"
    )


def _account_row(account: UserSummary) -> str:
    return f"""
        <a href="/account/{escape(str(account.id))}" class="flex items-center gap-3">
            <img class="h-9 w-9 rounded-full object-cover" src="{escape(account.image)}" alt="">
            <div>
                <p class="relative leading-[1]">
                    <span class="text-sm font-semibold">{escape(format_account_name(account.name))}</span>
                    <span class="absolute right-[-20px] top-1 fill-[#20D5EC]">{icons.verified()}</span>
                </p>
                <p class="text-xs font-light">{escape(account.name)}</p>
            </div>
        </a>
    """


def sidebar(*, following: bool, signed_in: bool, suggested_accounts: Iterable[UserSummary]) -> Markup:
    """Render feed navigation, suggested accounts and the footer links."""

    for_you_link = _nav_link("/", "For You", icons.home(filled=not following), active=not following)
    following_link = _nav_link(
        FOLLOWING_FEED_PATH if signed_in else SIGN_IN_PATH,
        "Following",
        icons.following(filled=following),
        active=following,
    )
    accounts_html = "".join(_account_row(account) for account in suggested_accounts)
    footer_html = "".join(
        '<div class="flex flex-wrap gap-2">'
        + "".join(f"<p>{escape(label)}</p>" for label in group)
        + "</div>"
        for group in FOOTER_LINK_GROUPS
    )

    return Markup(
        f"""
        <aside class="h-[calc(100vh-60px)] w-[348px] flex-shrink-0 overflow-y-auto py-5" data-component="sidebar">
            <nav class="flex flex-col items-stretch gap-5 border-b pb-6 font-semibold">
                {for_you_link}
                {following_link}
            </nav>
            <div class="flex flex-col items-stretch gap-3 border-b py-4">
                <p class="text-sm">Suggested Accounts</p>
                {accounts_html}
            </div>
            <footer class="mt-5 flex flex-col items-stretch gap-4 text-xs leading-[1.2] text-zinc-400 [&_p]:cursor-pointer [&_p:hover]:underline">
                {footer_html}
                <span>{escape(COPYRIGHT_NOTICE)}</span>
            </footer>
        </aside>
        """
    )


__all__ = [
    "COPYRIGHT_NOTICE",
    "FOLLOWING_FEED_PATH",
    "FOOTER_LINK_GROUPS",
    "SIGN_IN_PATH",
    "is_following_feed",
    "sidebar",
]
