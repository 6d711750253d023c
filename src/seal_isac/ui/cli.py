from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from seal_isac.app import (
    ChangeOutcome,
    block_web_content,
    get_web_content_status,
    hostname_content,
    trust_web_content,
    unblock_web_content,
)
from seal_isac.config import ConfigurationError, configure_logging, get_seal_isac_config
from seal_isac.domain.model import WebContentStatus, parse_web_content

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from seal_isac.config import SealIsacConfig
    from seal_isac.domain.model import WebContent

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="seal-isac",
        description="Manage SEAL-ISAC web content reputation",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    block = subparsers.add_parser("block-url", help="block a given url")
    block.add_argument("url", help="the url to block")
    block.add_argument(
        "--force",
        action="store_true",
        help="force the url to be blocked, even if it's currently trusted",
    )

    unblock = subparsers.add_parser(
        "unblock-url", help="unblock a given url without allowlisting it"
    )
    unblock.add_argument("url", help="the url to unblock")

    allow = subparsers.add_parser("allow-url", help="allowlist a given url")
    allow.add_argument("url", help="the url to allowlist")

    status = subparsers.add_parser(
        "status", help="show the status of a domain, IP address or url"
    )
    status.add_argument("content", help="domain name, IPv4/IPv6 address or url")

    return parser.parse_args(list(argv))


def _target(args: argparse.Namespace) -> WebContent:
    if args.command == "status":
        content = parse_web_content(args.content)
        if content is None:
            raise ValueError(f"Unrecognised web content: {args.content}")
        return content
    return hostname_content(args.url)


def _block(args: argparse.Namespace, target: WebContent, config: SealIsacConfig) -> int:
    log.info("[+] blocking url %s", args.url)
    change = block_web_content(target, force=args.force, config=config)
    if change.outcome is ChangeOutcome.REFUSED:
        log.info("[+] url is currently trusted, please use --force to override")
        return 1
    if change.outcome is ChangeOutcome.UNCHANGED:
        log.info("[+] url is already blocked")
        return 0
    untrusted = " and untrusted" if change.previous is WebContentStatus.TRUSTED else ""
    log.info("[+] blocked%s %s", untrusted, target.value)
    return 0


def _unblock(args: argparse.Namespace, target: WebContent, config: SealIsacConfig) -> int:
    log.info("[+] unblocking url %s", args.url)
    change = unblock_web_content(target, config=config)
    if change.outcome is ChangeOutcome.UNCHANGED:
        log.info("[+] url is not blocked")
        return 1
    log.info("[+] removed %s from blocklist", target.value)
    return 0


def _allow(args: argparse.Namespace, target: WebContent, config: SealIsacConfig) -> int:
    log.info("[+] allowing url %s", args.url)
    change = trust_web_content(target, config=config)
    unblocked = " and unblocked" if change.previous is WebContentStatus.BLOCKED else ""
    log.info("[+] trusted%s %s", unblocked, target.value)
    return 0


def _status(_args: argparse.Namespace, target: WebContent, config: SealIsacConfig) -> int:
    status = get_web_content_status(target, config=config)
    log.info("[+] %s is %s", target, status)
    return 0


_COMMANDS = {
    "block-url": _block,
    "unblock-url": _unblock,
    "allow-url": _allow,
    "status": _status,
}


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        config = get_seal_isac_config()
    except ConfigurationError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(1)

    try:
        target = _target(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    command = _COMMANDS[parsed_args.command]
    try:
        exit_code = command(parsed_args, target, config)
    except Exception:
        log.exception("Fatal error while updating reputation")
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
