"""Click command line for inspecting the package and sending test messages.

Purpose
-------
Give operators a quick way to check that a collector receives what the sink
produces, without writing a host application.

Contents
--------
* :func:`cli` - command group (``info``, ``send``) with ``--use-dotenv``.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from datetime import datetime, timezone

import click
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as dotenv_config
from .adapters.batching import BatchingSyslogSink
from .adapters.scheduler import ManualScheduler
from .domain import ConfigurationError, LogEvent, LogLevel, SinkConfig
from .runtime._settings import coerce_level, parse_endpoint

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _dotenv_requested(flag: bool | None) -> bool:
    if flag is not None:
        return flag
    value = os.getenv(dotenv_config.DOTENV_ENV_VAR, "")
    return value.strip().lower() in {"1", "true", "yes", "on"}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env file before running (default: ${dotenv_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, *, version: bool, use_dotenv: bool | None) -> None:
    """Batching syslog sink utilities."""

    if _dotenv_requested(use_dotenv):
        dotenv_config.enable_dotenv()
    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.print_info(), nl=False)


@cli.command("info")
def cli_info() -> None:
    """Print package metadata."""

    click.echo(__init__conf__.print_info(), nl=False)


@cli.command("send")
@click.argument("endpoint", envvar="LOG_SYSLOG_ENDPOINT")
@click.argument("message")
@click.option("--protocol", type=click.Choice(["udp", "tcp"], case_sensitive=False), default="udp", show_default=True)
@click.option("--tls", "use_tls", is_flag=True, help="Wrap the TCP connection in TLS.")
@click.option("--level", default="info", show_default=True, help="Log level of the message.")
@click.option("--facility", default="local1", show_default=True, help="Syslog facility name or code.")
@click.option("--sender", default=None, help="Tag written before the message (default: application name).")
@click.option("--no-split", is_flag=True, help="Send multi-line messages as one syslog message.")
@click.option("--timeout", type=float, default=5.0, show_default=True, help="Socket timeout in seconds.")
def cli_send(
    endpoint: str,
    message: str,
    protocol: str,
    use_tls: bool,
    level: str,
    facility: str,
    sender: str | None,
    no_split: bool,
    timeout: float,
) -> None:
    """Send MESSAGE to the syslog collector at ENDPOINT (HOST:PORT)."""

    try:
        host, port = parse_endpoint(endpoint, None)  # type: ignore[misc]
        options = {"sender": sender} if sender else {}
        config = SinkConfig(
            host=host,
            port=port,
            facility=facility,
            protocol=protocol,
            use_tls=use_tls,
            split_newlines=not no_split,
            batch_size=1,
            send_timeout=timeout,
            **options,
        )
        log_level = coerce_level(level)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    sink = BatchingSyslogSink(config, scheduler=ManualScheduler())
    try:
        sink.accept(LogEvent(timestamp=datetime.now(timezone.utc), level=log_level, message=message, logger_name="cli"))
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        sink.shutdown()

    stats = sink.stats
    _render_summary(config, log_level, stats.lines_sent, stats.lines_failed)
    if stats.lines_failed or stats.events_failed:
        raise click.ClickException(f"{stats.lines_failed} line(s) could not be delivered to {host}:{port}")


def _render_summary(config: SinkConfig, level: LogLevel, sent: int, failed: int) -> None:
    table = Table(title="syslog send", show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    transport = config.protocol.value if hasattr(config.protocol, "value") else str(config.protocol)
    if config.use_tls:
        transport += "+tls"
    table.add_row("endpoint", f"{config.host}:{config.port}")
    table.add_row("transport", transport)
    table.add_row("facility", config.facility.name.lower())
    table.add_row("level", level.severity)
    table.add_row("sender", config.sender)
    table.add_row("lines sent", str(sent))
    table.add_row("lines failed", str(failed))
    Console().print(table)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Exit as exit_signal:
        return exit_signal.exit_code
    return 0


__all__ = ["cli", "main"]
