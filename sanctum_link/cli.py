"""Sanctum Link CLI: run a data-source script locally the way the host runtime would.

Commands:
    sanctum-link simulate   fetch, validate and ABI-encode one request
    sanctum-link sources    list registered data-source scripts
"""

from typing import List, Optional

import typer

from sanctum_link.logging_config import setup_logging

setup_logging()

from sanctum_link.config import REQUEST_ARGS, REQUEST_SOURCE, SOURCES  # noqa: E402
from sanctum_link.schemas.runs import RequestConfig  # noqa: E402
from sanctum_link.services.encoder_service import decode_result  # noqa: E402
from sanctum_link.services.http_service_client import HTTPServiceClient  # noqa: E402
from sanctum_link.services.pipeline_service import PipelineService  # noqa: E402

app = typer.Typer(
    name="sanctum-link",
    help="Simulate Sanctum Link off-chain request scripts",
    no_args_is_help=True,
)


def request_config(source: str, args: List[str]) -> RequestConfig:
    conf = SOURCES.get(source, {})
    return RequestConfig(
        source=source,
        args=args,
        expected_return_type=conf.get("expected_return_type", "bytes"),
    )


@app.command()
def simulate(
    source: Optional[str] = typer.Argument(None, help="Source name; defaults to REQUEST_SOURCE"),
    args: Optional[List[str]] = typer.Argument(None, help="Request args; defaults to REQUEST_ARGS even when a source is named"),
    show_decoded: bool = typer.Option(False, "--decode", "-d", help="Also print the decoded tuple"),
):
    """Run one request and print the encoded bytes as hex."""
    if source:
        cfg = request_config(source, list(args or REQUEST_ARGS))
    else:
        cfg = request_config(REQUEST_SOURCE, REQUEST_ARGS)

    result = PipelineService(HTTPServiceClient()).run(cfg.source, cfg.args)
    if not result.ok:
        typer.echo(f"{result.code}: {result.message}", err=True)
        raise typer.Exit(1)

    typer.echo("0x" + result.encoded.hex())
    if show_decoded:
        for abi_type, value in zip(result.types, decode_result(result.types, result.encoded)):
            typer.echo(f"{abi_type}\t{value!r}")


@app.command()
def sources():
    """List registered data-source scripts."""
    for name, conf in SOURCES.items():
        typer.echo(f"{name}\t{conf['resource_kind']}\t{conf['encoder']}\t{conf['description']}")


if __name__ == "__main__":
    app()
