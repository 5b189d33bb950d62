"""Layout building blocks shared across pages."""
from __future__ import annotations

import os

from markupsafe import Markup

STATIC_VERSION = os.getenv("STATIC_ASSET_VERSION", "20221018")

LOGO_IMAGE = f"/assets/img/logo.svg?v={STATIC_VERSION}"


def navbar(*, signed_in: bool) -> Markup:
    auth_html = (
        ""
        if signed_in
        else '<a href="/sign-in" class="rounded bg-pink px-6 py-1 text-sm font-semibold text-white">Log in</a>'
    )
    return Markup(
        f"""
        <header class="sticky top-0 z-40 h-[60px] border-b bg-white">
            <div class="mx-auto flex h-full max-w-[1150px] items-center justify-between px-4">
                <a href="/" class="flex items-center gap-2 text-xl font-bold">
                    <img src="{LOGO_IMAGE}" alt="TopTop logo" class="h-8 w-8 rounded-full object-cover">
                    <span>TopTop</span>
                </a>
                {auth_html}
            </div>
        </header>
        """
    )


__all__ = ["navbar", "LOGO_IMAGE"]
