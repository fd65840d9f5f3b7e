"""
Command-line interface for URL state tokens.

Usage::

    url-state share config.yaml
    url-state share config.yaml --json
    url-state pack config.yaml
    cat config.yaml | url-state pack
    url-state unpack https://yapi.run/c/<token>

Commands:
    share    Print a share URL for a file, with size statistics on stderr
    pack     Print the token for a file (or stdin)
    unpack   Print the text behind a token or share URL
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Any

import click

from .exceptions import StateCodecError
from .share import build_share_link, token_from_url
from .state import pack, unpack

logger = logging.getLogger(__name__)

_HANDLER_NAME = "url_state.cli"


class ColoredFormatter(logging.Formatter):
    """Log formatter that colors the timestamp, level and logger name."""

    LEVEL_STYLES: dict[int, dict[str, Any]] = {
        logging.DEBUG: {"fg": "bright_black"},
        logging.INFO: {"fg": "green"},
        logging.WARNING: {"fg": "yellow"},
        logging.ERROR: {"fg": "red"},
        logging.CRITICAL: {"fg": "red", "bold": True},
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with click styles."""
        style = self.LEVEL_STYLES.get(record.levelno, {})

        timestamp = click.style(self.formatTime(record, self.datefmt), fg="cyan")
        levelname = click.style(f"{record.levelname:8}", **style)
        name = click.style(record.name, fg="blue")

        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> logging.Handler:
    """Configure logging for the CLI with optional colors and return the installed handler."""
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")
    handler.setFormatter(formatter)

    # Replace the handler from an earlier invocation in the same process.
    #
    # It holds whatever stderr was current back then.
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.setLevel(level)
    root.addHandler(handler)
    return handler


def _decode_text(data: bytes, source: str) -> str:
    # Decode raw bytes so line endings reach the token untouched.
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{source} is not UTF-8 text: {e}") from e


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, no_color: bool) -> None:
    """Pack text into URL-safe tokens and restore it."""
    handler = setup_logging(verbose, no_color)
    ctx.call_on_close(lambda: logging.getLogger().removeHandler(handler))
    ctx.obj = {"color": not no_color}


@cli.command()
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--base-url",
    default=None,
    help="Link prefix (default: URL_STATE_BASE_URL or https://yapi.run/c/)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the link and stats as JSON")
@click.pass_context
def share(ctx: click.Context, file: Path, base_url: str | None, as_json: bool) -> None:
    """
    Generate a shareable link for a file.

    The URL goes to stdout so it can be piped. Size statistics go to stderr.
    """
    content = _decode_text(file.read_bytes(), str(file))
    link = build_share_link(content, base_url)

    if as_json:
        click.echo(link.model_dump_json(by_alias=True))
        return

    color = ctx.obj["color"]
    click.echo(err=True)
    click.echo(click.style(" url-state share ", reverse=True), err=True, color=color)
    click.echo(err=True)
    click.echo(link.url, color=True)
    click.echo(err=True)
    click.echo(
        f"  Size:   {link.original_size} bytes -> {link.token_size} chars ({link.ratio:.1f}%)",
        err=True,
    )
    click.echo(f"  Lines:  {link.lines}", err=True)
    click.echo(err=True)


@cli.command("pack")
@click.argument("source", type=click.File("rb"), default="-")
def pack_command(source: IO[bytes]) -> None:
    """Print the token for a file, or for stdin when no file is given."""
    text = _decode_text(source.read(), getattr(source, "name", "stdin"))
    token = pack(text)
    logger.debug("Packed %d characters into a %d-character token", len(text), len(token))
    click.echo(token, color=True)


@cli.command("unpack")
@click.argument("token_or_url")
def unpack_command(token_or_url: str) -> None:
    """Print the text behind a token or share URL."""
    token = token_from_url(token_or_url)
    try:
        text = unpack(token)
    except StateCodecError as e:
        raise click.ClickException(e.message) from e
    # color=True keeps ANSI sequences in the payload when stdout is not a terminal.
    click.echo(text, nl=not text.endswith("\n"), color=True)


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
