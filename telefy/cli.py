"""CLI entrypoint for telefy."""

from __future__ import annotations

import logging
import re

import click

from telefy import __version__
from telefy.channels import load_channels
from telefy.config import load_config, load_environment
from telefy.dispatcher import ALL_CHANNELS, Dispatcher
from telefy.errors import TelefyError
from telefy.models import ParseMode


PARSE_MODES = {mode.value.lower(): mode for mode in ParseMode}

QUIET_LOGGERS = ("httpx", "httpcore")

MARKDOWN_V2_SPECIAL = re.compile(r"([_*\[\]()~`>#+\-=|{}.!@])")


def escape_markdown_v2(text: str) -> str:
    """Backslash-escape characters reserved by Telegram's MarkdownV2."""
    return MARKDOWN_V2_SPECIAL.sub(r"\\\1", text)


def parse_button(value: str) -> dict[str, str]:
    """Parse a "text|url" option value into an inline button."""
    text, _, url = value.partition("|")
    if not text or not url:
        raise click.BadParameter('format must be "text|url"', param_hint="'--button'")
    return {"text": text, "url": url}


def _enable_debug_logging() -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("telefy").setLevel(logging.DEBUG)
    # httpx logs request URLs, which embed the bot token
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _fail(error: TelefyError) -> None:
    click.echo(f"Error: {error.message}", err=True)
    if error.suggestion:
        click.echo(f"Suggestion: {error.suggestion}", err=True)
    raise SystemExit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.argument("message", nargs=-1)
@click.option("--channel", "-c", default=None, help="Send to a specific channel")
@click.option("--all", "send_all", is_flag=True, help="Send to all configured channels")
@click.option(
    "--parse-mode",
    "-m",
    type=click.Choice(sorted(PARSE_MODES), case_sensitive=False),
    default=None,
    help="Parse mode (default: markdown)",
)
@click.option(
    "--button",
    "-b",
    "button_values",
    multiple=True,
    help='Add an inline button, e.g. "Visit|https://example.com" (repeatable)',
)
@click.option("--raw", is_flag=True, help="Disable automatic escaping for MarkdownV2")
@click.option("--env-file", default=None, help="Path to a .env file (default: search from cwd)")
@click.option("--config", "config_path", default=None, help="Path to telefy.yml")
@click.option("--list-channels", is_flag=True, help="List configured channels and exit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    message,
    channel,
    send_all,
    parse_mode,
    button_values,
    raw,
    env_file,
    config_path,
    list_channels,
    verbose,
):
    """Send a Telegram notification to one or all configured channels.

    Channels come from CHANNEL_<name>_TOKEN and CHANNEL_<name>_CHAT_ID
    variables, read from the environment or a .env file.
    """
    if verbose:
        _enable_debug_logging()

    try:
        config = load_config(config_path)
    except TelefyError as e:
        _fail(e)

    env = load_environment(env_file or config.env_file)

    try:
        registry = load_channels(env, api_url=config.api_url)
    except TelefyError as e:
        _fail(e)

    if list_channels:
        for name in registry.names():
            click.echo(name)
        return

    text = " ".join(message).strip()
    if not text:
        raise click.UsageError("Message is required.")

    if send_all and channel:
        raise click.UsageError("Cannot use --channel and --all together.")

    selector = ALL_CHANNELS if send_all else channel or config.channel
    # Default to the only channel when exactly one is configured
    if not selector and len(registry) == 1:
        selector = registry.names()[0]
    if not selector:
        raise click.UsageError(
            "Please specify a channel with --channel <name> or use --all. "
            f"Available channels: {', '.join(registry.names())}"
        )

    mode = PARSE_MODES.get((parse_mode or config.parse_mode).lower())
    if mode is None:
        raise click.UsageError("Invalid parse mode. Use markdown, html, or markdownv2.")

    buttons = [[parse_button(value)] for value in button_values]

    if mode is ParseMode.MARKDOWN_V2 and not raw:
        text = escape_markdown_v2(text)

    try:
        with Dispatcher(registry, timeout=config.timeout) as dispatcher:
            results = dispatcher.send(
                text, channel=selector, parse_mode=mode.value, buttons=buttons or None
            )
    except TelefyError as e:
        _fail(e)

    for result in results:
        click.echo(f'Message sent successfully to channel "{result.channel}"')
