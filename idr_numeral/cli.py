"""Command-line interface for formatting and parsing Indonesian numbers."""

from __future__ import annotations

import json
from typing import List, Optional, Union

import typer

from .config import AppConfig, load_config
from .fixed import FixedPoint
from .formatting import format_idr
from .logging import configure_logging, get_logger
from .models import DECIMALS_PRESERVE, PARSE_MODES, FormatOptions, ParseOptions
from .parsing import parse_idr

logger = get_logger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Indonesian number formatter and parser. Pass negative values after '--'.",
)


def _setup() -> AppConfig:
    try:
        config = load_config()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    configure_logging(config.log_level)
    return config


@app.command("format")
def format_command(
    values: List[str] = typer.Argument(..., help="Values to format, e.g. 1050,5 or 'Rp 1.234,56'"),
    decimals: Optional[str] = typer.Option(
        None,
        "--decimals",
        help=f"'{DECIMALS_PRESERVE}' to keep typed decimals, or the number of decimals to force",
    ),
    pad_zeros: Optional[bool] = typer.Option(
        None,
        "--pad-zeros/--no-pad-zeros",
        help="Pad typed decimals to two digits (only with preserved decimals)",
    ),
) -> None:
    config = _setup()
    options = FormatOptions(
        decimals=_parse_decimals(decimals) if decimals is not None else config.decimals,
        pad_zeros=config.pad_zeros if pad_zeros is None else pad_zeros,
    )
    logger.debug("cli_format", count=len(values), decimals=options.decimals, pad_zeros=options.pad_zeros)
    for value in values:
        typer.echo(format_idr(value, options))


@app.command("parse")
def parse_command(
    values: List[str] = typer.Argument(..., help="Indonesian formatted values, e.g. 1.234,56"),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        help=f"Result type: {' or '.join(PARSE_MODES)}",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per value"),
) -> None:
    config = _setup()
    try:
        options = ParseOptions(mode=(mode or config.parse_mode).lower())
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--mode") from exc

    failed = 0
    for value in values:
        result = parse_idr(value, options)
        if result is None:
            failed += 1
            logger.info("cli_parse_invalid", value=value)
        if as_json:
            typer.echo(json.dumps(_as_payload(value, result), ensure_ascii=False))
        else:
            typer.echo(_as_text(result))

    if failed:
        raise typer.Exit(code=1)


def _parse_decimals(value: str) -> Union[int, str]:
    if value.strip().lower() == DECIMALS_PRESERVE:
        return DECIMALS_PRESERVE
    try:
        decimals = int(value)
    except ValueError as exc:
        raise typer.BadParameter(
            f"must be '{DECIMALS_PRESERVE}' or a non-negative integer", param_hint="--decimals"
        ) from exc
    if decimals < 0:
        raise typer.BadParameter("must not be negative", param_hint="--decimals")
    return decimals


def _as_text(result: Union[float, FixedPoint, None]) -> str:
    if result is None:
        return ""
    if isinstance(result, FixedPoint):
        return result.to_canonical_string()
    return repr(result)


def _as_payload(value: str, result: Union[float, FixedPoint, None]) -> dict:
    if isinstance(result, FixedPoint):
        return {
            "input": value,
            "value": result.to_canonical_string(),
            "sign": result.sign,
            "unscaled": result.unscaled_digits,
            "scale": result.scale,
        }
    return {"input": value, "value": result}


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
