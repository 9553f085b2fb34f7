"""CLI entry point for docsmd.

Usage:
    docsmd --url <google_docs_url> [--config PATH] [--comments] [--clean]
    docsmd --init [--config PATH]
    docsmd --instruction
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from loguru import logger
from pydantic import ValidationError

from docsmd.client import DocsClient, InvalidURLError, parse_document_id, parse_tab_id
from docsmd.config import Settings
from docsmd.credentials import CredentialsManager
from docsmd.instructions import INSTRUCTIONS
from docsmd.logging import configure_logging
from docsmd.render import ConversionError
from docsmd.transport import GoogleDocsTransport, TransportError


class CLIError(Exception):
    """A failure reported to the user as ``Error: <message>``."""


def _get_access_token(settings: Settings) -> str:
    """Authenticate and return an access token."""
    manager = CredentialsManager.from_settings(settings)
    try:
        credentials = manager.get_credentials()
    except Exception as e:
        raise CLIError(f"authentication failed: {e}") from e
    token: str = credentials.token
    return token


async def run(url: str, settings: Settings, *, include_comments: bool = False) -> str:
    """Fetch the document at ``url`` and return it as Markdown."""
    try:
        document_id = parse_document_id(url)
    except InvalidURLError as e:
        raise CLIError(f"invalid URL: {e}") from e
    tab_id = parse_tab_id(url)

    access_token = _get_access_token(settings)
    client = DocsClient(
        GoogleDocsTransport(access_token=access_token, timeout=settings.request_timeout)
    )
    try:
        return await client.export(
            document_id, tab_id=tab_id, include_comments=include_comments
        )
    except TransportError as e:
        raise CLIError(f"failed to fetch document: {e}") from e
    except ValidationError as e:
        raise CLIError(f"unexpected document format: {e}") from e
    except ConversionError as e:
        raise CLIError(f"conversion failed: {e}") from e
    finally:
        await client.close()


def init_auth(settings: Settings) -> None:
    """Run the OAuth flow and store the token."""
    print("Initializing OAuth authentication...")
    print()

    manager = CredentialsManager.from_settings(settings)
    try:
        manager.get_credentials(force_refresh=True)
    except Exception as e:
        raise CLIError(f"authentication failed: {e}") from e

    print()
    print("✓ Authentication successful!")
    print(f"✓ Token saved to {manager.token_cache_path}")
    print()
    print("You can now use the CLI without the --init flag:")
    print('  docsmd --url="https://docs.google.com/document/d/DOC_ID/edit"')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsmd",
        description="Render a Google Docs document as Markdown with YAML frontmatter",
    )
    parser.add_argument(
        "--url",
        default="",
        help="Google Docs URL (required for normal operation)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to OAuth credentials JSON file "
        "(defaults to ~/.config/docsmd/config.json)",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Initialize OAuth and save token to default location",
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Clean output (suppress all logs, only output markdown)",
    )
    parser.add_argument(
        "--comments",
        action="store_true",
        help="Append the document's comments as a Comments section",
    )
    parser.add_argument(
        "--instruction",
        action="store_true",
        help="Print integration instructions for AI coding agents",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum log level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.config:
        overrides["credentials_file"] = args.config
    if args.log_level:
        overrides["log_level"] = args.log_level
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        raise CLIError(f"invalid configuration: {e}") from e
    if not args.config:
        try:
            settings.ensure_config_dir()
        except OSError as e:
            raise CLIError(f"failed to create config directory: {e}") from e
    return settings


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.instruction:
        print(INSTRUCTIONS, end="")
        return 0

    try:
        settings = _load_settings(args)
        configure_logging(settings.log_level, quiet=args.clean)

        if args.init:
            init_auth(settings)
            return 0

        if not args.url:
            print("Error: --url flag is required", file=sys.stderr)
            print(file=sys.stderr)
            parser.print_usage(sys.stderr)
            return 1

        markdown = asyncio.run(
            run(args.url, settings, include_comments=args.comments)
        )
    except CLIError as e:
        logger.debug("Command failed: {!r}", e.__cause__)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(markdown)
    return 0


if __name__ == "__main__":
    sys.exit(main())
