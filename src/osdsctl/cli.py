"""Command-line interface for managing OpenSDS volumes."""
from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, NoReturn

import click
import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text
from typer.core import TyperGroup

from . import OpenSDSClient
from .builders import (
    VolumeOptions,
    build_create_request,
    build_delete_request,
    build_update_request,
    require_args,
)
from .cli_schema import CLI_DICT_VIEWS, CLI_LIST_VIEWS, DictView, ListView
from .config import DEFAULT_API_VERSION, DEFAULT_ENDPOINT
from .exceptions import ArgumentCountError, OpenSDSError, RequestError, SizeParseError
from .model import VolumeSpec

logger = logging.getLogger(__name__)


class OpenSDSGroup(TyperGroup):
    """Root group that reports command-line usage errors with exit status 1."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


app = typer.Typer(help="OpenSDS storage management CLI.", no_args_is_help=True, cls=OpenSDSGroup)

volume_app = typer.Typer(help="Manage volumes in the cluster.")
app.add_typer(volume_app, name="volume")


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    endpoint: str = typer.Option(
        DEFAULT_ENDPOINT,
        "--endpoint",
        "-e",
        envvar="OPENSDS_ENDPOINT",
        help="OpenSDS API endpoint.",
        show_default=True,
    ),
    api_version: str = typer.Option(
        DEFAULT_API_VERSION,
        "--api-version",
        envvar="OPENSDS_API_VERSION",
        help="API version path segment.",
        show_default=True,
    ),
    verify_ssl: bool = typer.Option(
        True,
        "--verify/--no-verify",
        envvar="OPENSDS_VERIFY_SSL",
        help="Enable or disable TLS certificate verification.",
        show_default=True,
    ),
    cert_path: Path | None = typer.Option(
        None,
        "--cert",
        envvar="OPENSDS_CA_CERT",
        help="Path to a custom CA bundle for TLS verification.",
    ),
    timeout: float = typer.Option(
        30.0,
        "--timeout",
        envvar="OPENSDS_TIMEOUT",
        help="Request timeout (seconds).",
        show_default=True,
    ),
    debug: bool = typer.Option(False, "--debug", help="Log requests to stderr."),
) -> None:
    """OpenSDS storage management CLI."""

    _configure_logging(debug)
    # Converted values; the raw click params for --cert are plain strings.
    ctx.obj = {
        "endpoint": endpoint,
        "api_version": api_version,
        "verify_ssl": verify_ssl,
        "cert_path": cert_path,
        "timeout": timeout,
    }


def _build_client(
    endpoint: str,
    api_version: str,
    verify_ssl: bool,
    cert_path: Path | None,
    timeout: float,
) -> OpenSDSClient:
    verify_target: bool | str
    if cert_path:
        expanded_cert = cert_path.expanduser()
        if not expanded_cert.exists():
            raise typer.BadParameter("Certificate file not found for --cert option.")
        if not verify_ssl:
            raise typer.BadParameter("Cannot combine --cert with --no-verify.")
        verify_target = str(expanded_cert)
    else:
        verify_target = verify_ssl

    return OpenSDSClient(
        endpoint=endpoint,
        api_version=api_version,
        verify_ssl=verify_target,
        timeout=timeout,
    )


def _client_from_context(ctx: typer.Context) -> OpenSDSClient:
    settings = ctx.find_root().obj or {}
    cert_path = settings.get("cert_path")
    return _build_client(
        endpoint=settings.get("endpoint", DEFAULT_ENDPOINT),
        api_version=settings.get("api_version", DEFAULT_API_VERSION),
        verify_ssl=settings.get("verify_ssl", True),
        cert_path=Path(cert_path) if cert_path else None,
        timeout=settings.get("timeout", 30.0),
    )


def _group_profile(ctx: typer.Context) -> str:
    parent = ctx.parent
    while parent is not None:
        if "profile" in parent.params:
            return parent.params["profile"] or ""
        parent = parent.parent
    return ""


def _volume_options(
    ctx: typer.Context,
    *,
    profile: str | None = None,
    name: str = "",
    description: str = "",
    az: str = "",
) -> VolumeOptions:
    return VolumeOptions(
        profile=profile if profile is not None else _group_profile(ctx),
        name=name,
        description=description,
        availability_zone=az,
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


def _console() -> Console:
    return Console(force_terminal=False, color_system=None)


def _render_dict(view: DictView, record: Any) -> None:
    table = Table(box=box.SIMPLE, show_lines=False, header_style="bold cyan")
    table.add_column("Property")
    table.add_column("Value")
    for key, value in view.rows(record):
        table.add_row(Text(key), Text(value))
    _console().print(table)


def _render_list(view: ListView, records: Sequence[Any]) -> None:
    table = Table(box=box.SIMPLE, show_lines=False, header_style="bold cyan")
    for key in view.keys:
        table.add_column(key)
    for row in view.rows(records):
        table.add_row(*(Text(cell) for cell in row))
    _console().print(table)


def _present_record(record: VolumeSpec, *, view_id: str, json_output: bool) -> None:
    if json_output:
        _echo_json(record.to_dict())
        return
    _render_dict(CLI_DICT_VIEWS[view_id], record)


def _present_records(records: Sequence[VolumeSpec], *, view_id: str, json_output: bool) -> None:
    if json_output:
        _echo_json([record.to_dict() for record in records])
        return
    _render_list(CLI_LIST_VIEWS[view_id], records)


def _handle_request_error(exc: RequestError) -> None:
    if exc.status_code is None:
        message = f"Request failed: {exc}"
    else:
        message = f"Request failed (status {exc.status_code}): {exc}"
    # A decoded error body already supplied the message.
    if exc.details and isinstance(exc.details, str) and exc.details not in str(exc):
        message += f"\nDetails: {exc.details}"
    typer.secho(message, err=True, fg=typer.colors.RED)


def _fail(ctx: typer.Context, exc: OpenSDSError) -> NoReturn:
    """Report a failed invocation on stderr and exit with status 1."""

    if isinstance(exc, ArgumentCountError):
        typer.echo(str(exc), err=True)
        typer.echo(ctx.get_usage(), err=True)
    elif isinstance(exc, SizeParseError):
        logger.debug("Rejected size argument %r", exc.raw)
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
    elif isinstance(exc, RequestError):
        _handle_request_error(exc)
    else:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1) from exc


def _volume_cli_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    return {
        "profile": typer.Option(
            None,
            "--profile",
            "-p",
            help="The name of profile configured by admin.",
            show_default=False,
        ),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
    }


_VOLUME_OPTIONS = _volume_cli_options()


@volume_app.callback(invoke_without_command=True)
def volume_main(
    ctx: typer.Context,
    profile: str = typer.Option(
        "",
        "--profile",
        "-p",
        help="The name of profile configured by admin.",
        show_default=False,
    ),
) -> None:
    """Manage volumes in the cluster."""

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(code=1)


@volume_app.command("create", context_settings={"ignore_unknown_options": True})
def volume_create(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(None, metavar="<size>", show_default=False),
    name: str = typer.Option("", "--name", "-n", help="The name of created volume."),
    description: str = typer.Option(
        "", "--description", "-d", help="The description of created volume."
    ),
    az: str = typer.Option("", "--az", "-a", help="The availability zone of created volume."),
    profile: str | None = _VOLUME_OPTIONS["profile"],
    output_json: bool = _VOLUME_OPTIONS["output_json"],
) -> None:
    """Create a volume in the cluster."""

    options = _volume_options(ctx, profile=profile, name=name, description=description, az=az)
    try:
        (raw_size,) = require_args(args, 1)
        spec = build_create_request(raw_size, options)
        logger.debug("Built create request: %s", spec.to_payload())
        with _client_from_context(ctx) as client:
            record = client.volumes.create(spec)
    except OpenSDSError as exc:
        _fail(ctx, exc)
    _present_record(record, view_id="volume.create", json_output=output_json)


@volume_app.command("show")
def volume_show(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(None, metavar="<id>", show_default=False),
    profile: str | None = _VOLUME_OPTIONS["profile"],
    output_json: bool = _VOLUME_OPTIONS["output_json"],
) -> None:
    """Show a volume in the cluster."""

    try:
        (volume_id,) = require_args(args, 1)
        with _client_from_context(ctx) as client:
            record = client.volumes.get(volume_id)
    except OpenSDSError as exc:
        _fail(ctx, exc)
    _present_record(record, view_id="volume.show", json_output=output_json)


@volume_app.command("list")
def volume_list(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(None, hidden=True, show_default=False),
    profile: str | None = _VOLUME_OPTIONS["profile"],
    output_json: bool = _VOLUME_OPTIONS["output_json"],
) -> None:
    """List all volumes in the cluster."""

    try:
        require_args(args, 0)
        with _client_from_context(ctx) as client:
            records = client.volumes.list()
    except OpenSDSError as exc:
        _fail(ctx, exc)
    _present_records(records, view_id="volume.list", json_output=output_json)


@volume_app.command("delete")
def volume_delete(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(None, metavar="<id>", show_default=False),
    profile: str | None = _VOLUME_OPTIONS["profile"],
) -> None:
    """Delete a volume in the cluster."""

    options = _volume_options(ctx, profile=profile)
    try:
        (volume_id,) = require_args(args, 1)
        spec = build_delete_request(options)
        logger.debug("Built delete request for %s: %s", volume_id, spec.to_payload())
        with _client_from_context(ctx) as client:
            client.volumes.delete(volume_id, spec)
    except OpenSDSError as exc:
        _fail(ctx, exc)
    typer.echo(f"Delete volume({volume_id}) success.")


@volume_app.command("update")
def volume_update(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(None, metavar="<id>", show_default=False),
    name: str = typer.Option("", "--name", "-n", help="The name of updated volume."),
    description: str = typer.Option(
        "", "--description", "-d", help="The description of updated volume."
    ),
    profile: str | None = _VOLUME_OPTIONS["profile"],
    output_json: bool = _VOLUME_OPTIONS["output_json"],
) -> None:
    """Update a volume in the cluster."""

    options = _volume_options(ctx, profile=profile, name=name, description=description)
    try:
        (volume_id,) = require_args(args, 1)
        spec = build_update_request(options)
        logger.debug("Built update request for %s: %s", volume_id, spec.to_payload())
        with _client_from_context(ctx) as client:
            record = client.volumes.update(volume_id, spec)
    except OpenSDSError as exc:
        _fail(ctx, exc)
    _present_record(record, view_id="volume.update", json_output=output_json)
