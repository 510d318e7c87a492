from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional
import typer

from .bootstrap import build_app
from .config_loader import ConfigError
from .core.errors import MalformedEndpointError
from .core.classify import is_gce_error
from .api.envelope import parse_error_body
from .endpoints.compute import construct_compute_endpoint

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def endpoint(
    config: Path = Path("config/default.yaml"),
    base: Optional[str] = typer.Option(None, help="Base endpoint; skips the config file."),
    variant: Optional[str] = typer.Option(None, help="API variant, e.g. v1, beta, alpha."),
):
    """Print the compute endpoint rewritten to the requested variant."""
    try:
        if base:
            if not variant:
                print("--variant is required with --base", file=sys.stderr)
                raise typer.Exit(code=2)
            url = construct_compute_endpoint(base, variant)
        else:
            ctx = build_app(config)
            url = ctx["endpoint"]
            if variant:
                url = construct_compute_endpoint(url, variant)
    except (MalformedEndpointError, ConfigError, FileNotFoundError) as e:
        print(f"[endpoint] {e}", file=sys.stderr)
        raise typer.Exit(code=2)
    print(url)


@app.command()
def classify(
    body_file: Path,
    reason: str,
    status: int = typer.Option(400, help="HTTP status the body came with."),
):
    """Decode an API error body and report whether it carries REASON (exit 0 on match)."""
    if not body_file.exists():
        print(f"[classify] Body file not found: {body_file}", file=sys.stderr)
        raise typer.Exit(code=2)
    err = parse_error_body(status, body_file.read_bytes())
    matched = is_gce_error(err, reason)
    print("true" if matched else "false")
    if not matched:
        raise typer.Exit(code=1)
