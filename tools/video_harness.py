"""Command-line harness for driving the video page interactions over RPC."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from uuid import UUID

from jose import JWTError, jwt

from toptop.clients import RpcClient, RpcError
from toptop.schemas import UserSummary
from toptop.ui.formatting import format_account_name, format_comment_date
from toptop.ui.state import VideoPageState


class _StdoutClipboard:
    async def write_text(self, text: str) -> None:
        print(f"[clipboard] {text}")


def _viewer_from_token(token: str | None) -> UserSummary | None:
    if not token:
        return None
    try:
        subject = jwt.get_unverified_claims(token).get("sub")
        return UserSummary(id=UUID(str(subject)), name="", image="")
    except (JWTError, ValueError) as exc:
        raise SystemExit(f"Cannot read the viewer from the supplied token: {exc}") from exc


def _print_state(state: VideoPageState) -> None:
    video = state.video
    print(f"Video: {video.id} | @{format_account_name(video.user.name)} | {video.caption}")
    print(
        f"liked={state.is_liked} likes={state.like_count_label} "
        f"followed={state.is_followed} follow_visible={state.follow_visible}"
    )
    print(f"Share: {state.href}")
    print("-" * 80)
    for comment in state.comments:
        print(f"[{format_comment_date(comment.created_at)}] {comment.user.name}: {comment.content}")
    print("-" * 80)
    for notice in state.notices:
        print(f"({notice.kind}) {notice.message}")


async def _run(args: argparse.Namespace) -> int:
    viewer = _viewer_from_token(args.token)
    async with RpcClient(base_url=args.base_url, token=args.token, timeout=args.timeout) as rpc:
        try:
            page = await rpc.video_page(args.video_id)
        except RpcError as exc:
            print(f"Could not load video: {exc}", file=sys.stderr)
            return 2

        state = VideoPageState(page, viewer=viewer, rpc=rpc)
        if args.command == "like":
            state.toggle_like()
        elif args.command == "follow":
            state.toggle_follow()
        elif args.command == "comment":
            state.input_value = args.content
            state.submit_comment()
        elif args.command == "copy":
            await state.copy_link(_StdoutClipboard())
        await state.settle()
        _print_state(state)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Developer harness for the video detail page.")
    parser.add_argument("--base-url", help="Server to talk to (default: RPC_BASE_URL from settings).")
    parser.add_argument("--token", help="Access token of the viewer to act as. Omit to browse signed out.")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds (default: RPC_TIMEOUT from settings).")
    parser.add_argument("--verbose", action="store_true", help="Log RPC failures to stderr.")
    subcommands = parser.add_subparsers(dest="command", required=True)

    for name, summary in (
        ("show", "Print the page as the viewer sees it."),
        ("like", "Toggle the like on the video."),
        ("follow", "Toggle following the video's author."),
        ("copy", "Copy the share link."),
    ):
        command = subcommands.add_parser(name, help=summary)
        command.add_argument("video_id", help="Video id to open.")

    comment = subcommands.add_parser("comment", help="Post a comment and print the refreshed list.")
    comment.add_argument("video_id", help="Video id to open.")
    comment.add_argument("content", help="Comment text.")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.ERROR)
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
