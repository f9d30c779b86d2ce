from __future__ import annotations

import json

import typer

from stremthru.core.config import settings
from stremthru.store.alldebrid.client import APIClient, APIClientConfig
from stremthru.store.alldebrid.response import Response
from stremthru.store.base.context import Ctx
from stremthru.store.base.errors import StoreError, UpstreamError

app = typer.Typer(help="Call the AllDebrid API through the store client.")


def _make_client(api_key: str | None) -> APIClient:
    return APIClient(APIClientConfig.from_settings(settings, api_key=api_key))


def _parse_params(values: list[str]) -> dict[str, list[str]]:
    form: dict[str, list[str]] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {raw!r}", param_hint="--param")
        form.setdefault(key, []).append(value)
    return form


@app.command("request")
def request_cmd(
    method: str = typer.Argument(..., help="HTTP method (e.g. GET or POST)."),
    path: str = typer.Argument(..., help="API path (e.g. /v4/user)."),
    param: list[str] | None = typer.Option(
        None, "--param", "-p", help="Parameter as key=value. Repeat for multiple values."
    ),
    api_key: str | None = typer.Option(None, "--api-key", help="Override ALLDEBRID_API_KEY."),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Request timeout in seconds (default: unbounded)."
    ),
) -> None:
    """Send one request and print the response `data` as JSON."""

    form = _parse_params(param or [])
    ctx = Ctx(
        timeout=timeout if timeout is not None else settings.alldebrid_timeout_s,
        form=form or None,
    )

    client = _make_client(api_key)
    envelope = Response()
    try:
        client.request(method, path, ctx, envelope)
    except UpstreamError as e:
        status = e.status_code or "-"
        typer.echo(f"FAILED code={e.code} status={status} | {e}", err=True)
        raise typer.Exit(code=1) from e
    except StoreError as e:
        typer.echo(f"FAILED | {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(json.dumps(envelope.data, indent=2, sort_keys=True))
