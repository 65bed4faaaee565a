from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import SunfConfig, load_optional_config
from .logging_config import get_logger, setup_logging
from .normalize import REMOVE_EMOJIS_OPTIONS, NormalizationOptions, clean_many
from .records import format_records, read_records, write_records
from .report import codepoint_report


app = typer.Typer(
    help="sunf — canonical, comparison-friendly Unicode text",
    rich_markup_mode="rich",
    add_completion=False,
)

logger = get_logger("cli")

_DEFAULT_OPTIONS = NormalizationOptions()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sunf {__version__}")
        raise typer.Exit()


@app.callback()
def _global_options(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Optional config.toml path (defaults to ./config.toml when present)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="DEBUG|INFO|WARNING|ERROR (logs go to stderr)",
    ),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        dir_okay=False,
        help="Also append log records to this file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print version and exit",
    ),
):
    try:
        cfg = load_optional_config(config)
    except (FileNotFoundError, ValueError, tomllib.TOMLDecodeError) as e:
        raise typer.BadParameter(str(e), param_hint="--config")

    level = "WARNING"
    file_path: str | None = None
    if cfg is not None:
        cfg_level = cfg.get("logging", "level")
        if isinstance(cfg_level, str):
            level = cfg_level

        cfg_file = cfg.get("logging", "file")
        if isinstance(cfg_file, str):
            file_path = cfg_file
    if log_level is not None:
        level = log_level
    if log_file is not None:
        file_path = str(log_file)

    try:
        setup_logging(level, log_file=file_path)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")

    ctx.obj = {"config": cfg}


def _config_from(ctx: typer.Context) -> SunfConfig | None:
    if isinstance(getattr(ctx, "obj", None), dict):
        return ctx.obj.get("config")
    return None


def _resolve_flag(value: bool | None, cfg: SunfConfig | None, key: str, default: bool) -> bool:
    # explicit flag > [clean] config > library default
    if value is not None:
        return bool(value)
    if cfg is not None:
        cfg_value = cfg.get("clean", key)
        if isinstance(cfg_value, bool):
            return cfg_value
    return default


def _resolve_options(
    ctx: typer.Context,
    *,
    allow_tab: bool | None,
    allow_eol: bool | None,
    collapse_whitespace: bool | None,
    remove_emojis: bool | None,
) -> NormalizationOptions:
    cfg = _config_from(ctx)
    return NormalizationOptions(
        allow_tab=_resolve_flag(allow_tab, cfg, "allow_tab", _DEFAULT_OPTIONS.allow_tab),
        allow_eol=_resolve_flag(allow_eol, cfg, "allow_eol", _DEFAULT_OPTIONS.allow_eol),
        collapse_whitespace=_resolve_flag(
            collapse_whitespace, cfg, "collapse_whitespace", _DEFAULT_OPTIONS.collapse_whitespace
        ),
        remove_emojis=_resolve_flag(remove_emojis, cfg, "remove_emojis", _DEFAULT_OPTIONS.remove_emojis),
    )


def _collect_inputs(texts: Optional[List[str]], inp: Path | None) -> List[str]:
    if inp is not None:
        if texts:
            raise typer.BadParameter("pass TEXT arguments or --in, not both")
        return read_records(inp)
    if texts:
        return list(texts)
    raise typer.BadParameter("nothing to normalize: pass TEXT arguments or --in FILE")


def _emit(inputs: List[str], outputs: List[str], *, out: Path | None, json_output: bool) -> None:
    content = format_records(outputs, as_json=json_output, inputs=inputs)
    if out is not None:
        write_records(content, out)
        typer.echo(f"Wrote {len(outputs)} records to {out}")
        return
    typer.echo(content)


@app.command("clean")
def clean_cmd(
    ctx: typer.Context,
    texts: Optional[List[str]] = typer.Argument(None, help="Strings to normalize"),
    inp: Path | None = typer.Option(
        None,
        "--in",
        exists=True,
        dir_okay=False,
        help="Input text file: one record per line",
    ),
    out: Path | None = typer.Option(None, "--out", help="Write results here instead of stdout"),
    allow_tab: Optional[bool] = typer.Option(
        None, "--allow-tab/--no-allow-tab", help="Keep tabs unchanged [default: no]"
    ),
    allow_eol: Optional[bool] = typer.Option(
        None, "--allow-eol/--no-allow-eol", help="Keep CR/LF unchanged [default: yes]"
    ),
    collapse_whitespace: Optional[bool] = typer.Option(
        None,
        "--collapse-whitespace/--no-collapse-whitespace",
        help="Collapse whitespace runs into a single space [default: no]",
    ),
    remove_emojis: Optional[bool] = typer.Option(
        None, "--remove-emojis/--keep-emojis", help="Drop emoji codepoints [default: keep]"
    ),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--no-json", help="Print [{input, output}] JSON"
    ),
):
    """Normalize text with basic_string_clean."""
    options = _resolve_options(
        ctx,
        allow_tab=allow_tab,
        allow_eol=allow_eol,
        collapse_whitespace=collapse_whitespace,
        remove_emojis=remove_emojis,
    )
    as_json = _resolve_flag(json_output, _config_from(ctx), "json", False)

    inputs = _collect_inputs(texts, inp)
    logger.debug("clean options: %s", options)
    outputs = clean_many(inputs, options)
    logger.info("cleaned %d records", len(outputs))
    _emit(inputs, outputs, out=out, json_output=as_json)


@app.command("remove-emojis")
def remove_emojis_cmd(
    texts: Optional[List[str]] = typer.Argument(None, help="Strings to strip"),
    inp: Path | None = typer.Option(
        None,
        "--in",
        exists=True,
        dir_okay=False,
        help="Input text file: one record per line",
    ),
    out: Path | None = typer.Option(None, "--out", help="Write results here instead of stdout"),
    json_output: bool = typer.Option(False, "--json", help="Print [{input, output}] JSON"),
):
    """Drop emoji, collapse whitespace and normalize (fixed preset)."""
    inputs = _collect_inputs(texts, inp)
    outputs = clean_many(inputs, REMOVE_EMOJIS_OPTIONS)
    logger.info("removed emojis from %d records", len(outputs))
    _emit(inputs, outputs, out=out, json_output=bool(json_output))


@app.command("inspect")
def inspect_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="String to explain"),
    allow_tab: Optional[bool] = typer.Option(None, "--allow-tab/--no-allow-tab"),
    allow_eol: Optional[bool] = typer.Option(None, "--allow-eol/--no-allow-eol"),
    collapse_whitespace: Optional[bool] = typer.Option(
        None, "--collapse-whitespace/--no-collapse-whitespace"
    ),
    remove_emojis: Optional[bool] = typer.Option(None, "--remove-emojis/--keep-emojis"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
):
    """Show how each codepoint of TEXT is classified and what it emits.

    Options resolve exactly as for ``clean``, including the [clean] config section.
    """
    options = _resolve_options(
        ctx,
        allow_tab=allow_tab,
        allow_eol=allow_eol,
        collapse_whitespace=collapse_whitespace,
        remove_emojis=remove_emojis,
    )
    rows = codepoint_report(text, options)

    if bool(json_output):
        typer.echo(json.dumps(rows, ensure_ascii=False))
        return

    table = Table(title="sunf inspect")
    table.add_column("codepoint")
    table.add_column("name")
    table.add_column("category")
    table.add_column("emitted")
    for row in rows:
        table.add_row(row["codepoint"], row["name"], row["category"], repr(row["emitted"]))

    console = Console()
    console.print(table)
