"""Typer-based command line interface for the pattern registry.

``list`` prints the registry, ``match`` applies one pattern to a string and
``scan`` runs a set of patterns over a text file and reports every match with
its line and column.

Exit codes
----------
0 success
1 no match (``match`` only)
3 I/O error (missing or unreadable input)
4 configuration error
5 unknown pattern name
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .patterns import (
    PatternMatch,
    definitions,
    get_definition,
    get_pattern,
    iter_line_matches,
    iter_matches,
)
from .utils.errors import ConfigFormatError, UnknownPatternError
from .utils.logging import configure_logging, get_logger
from .utils.textspan import build_line_starts, char_to_line_col

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

app = typer.Typer(
    name="regexcollection",
    help=(
        "Precompiled regular expressions. Use 'regexcollection list' to see the "
        "patterns and 'regexcollection scan --in FILE' to search a file."
    ),
)

log = get_logger(__name__)

EXIT_NO_MATCH = 1
EXIT_IO = 3
EXIT_CONFIG = 4
EXIT_UNKNOWN_PATTERN = 5


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    patterns: list[str] | None,
    as_json: bool | None,
    max_matches: int | None,
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if patterns:
        new_cfg.scan.patterns = list(dict.fromkeys(patterns))
    if as_json is not None:
        new_cfg.output.format = "json" if as_json else "text"
    if max_matches is not None:
        new_cfg.scan.max_matches = max_matches
    return new_cfg


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


def _scan_text(text: str, cfg: ConfigModel) -> list[PatternMatch]:
    """Run every configured pattern over ``text`` in configuration order.

    Anchored patterns (``^...``) are applied to each line on its own.
    """

    limit = cfg.scan.max_matches
    found: list[PatternMatch] = []
    for name in cfg.scan.patterns:
        matcher = iter_line_matches if get_definition(name).anchored else iter_matches
        count = 0
        for match in matcher(name, text):
            found.append(match)
            count += 1
            if limit and count >= limit:
                break
        log.info("%s: %d match(es)", name, count)
    return found


def _match_record(
    match: PatternMatch, line_starts: tuple[int, ...], show_groups: bool
) -> dict[str, Any]:
    line, col = char_to_line_col(match.start, line_starts)
    record: dict[str, Any] = {
        "pattern": match.name,
        "line": line + 1,
        "column": col + 1,
        "start": match.start,
        "end": match.end,
        "text": match.text,
    }
    if show_groups:
        record["groups"] = list(match.groups)
    return record


def _format_text(record: dict[str, Any]) -> str:
    out = f"{record['line']}:{record['column']}\t{record['pattern']}\t{record['text']!r}"
    groups = record.get("groups")
    if groups:
        out += "\t" + json.dumps(groups, ensure_ascii=False)
    return out


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main() -> None:
    """Entry point for the regexcollection command group."""
    pass


@app.command("list")
def list_patterns(
    show_pattern: bool = typer.Option(  # noqa: B008
        False, "--show-pattern", "-p", help="Also print each pattern's source text"
    ),
) -> None:
    """List registry names with a short description."""

    width = max(len(d.name) for d in definitions())
    for definition in definitions():
        typer.echo(f"{definition.name.ljust(width)}  {definition.description}")
        if show_pattern:
            typer.echo(f"{' ' * width}  {definition.pattern}")


@app.command()
def match(
    name: str = typer.Argument(..., help="Registry name, see 'regexcollection list'"),
    text: str = typer.Argument(..., help="Text to match against"),
    full: bool = typer.Option(  # noqa: B008
        False, "--full", help="Require the whole text to match instead of searching"
    ),
) -> None:
    """Apply pattern ``name`` to ``text`` and print the match and its groups."""

    try:
        rx = get_pattern(name)
    except UnknownPatternError as exc:
        _safe_exit(EXIT_UNKNOWN_PATTERN, str(exc))

    found = rx.fullmatch(text) if full else rx.search(text)
    if found is None:
        _safe_exit(EXIT_NO_MATCH, "no match")

    typer.echo(f"match: {found.group(0)!r}")
    for idx, group in enumerate(found.groups(), start=1):
        typer.echo(f"group {idx}: {group!r}")


@app.command()
def scan(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Text file to scan"
    ),
    patterns: Optional[list[str]] = typer.Option(  # noqa: B008
        None, "--pattern", "-p", help="Registry name to run (repeatable); defaults from config"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    as_json: bool | None = typer.Option(  # noqa: B008
        None, "--json/--text", help="Output format override"
    ),
    max_matches: Optional[int] = typer.Option(  # noqa: B008
        None, "--max-matches", min=0, help="Per-pattern match limit, 0 for unlimited"
    ),
    encoding: str = typer.Option("utf-8-sig", help="Input file encoding"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Scan ``in_path`` with the configured patterns and print every match.

    Anchored patterns such as dns_hostname, city_state_postal and
    markdown_code_fence are checked against each line of the file.
    """

    configure_logging(verbose)

    for name in patterns or []:
        try:
            get_pattern(name)
        except UnknownPatternError as exc:
            _safe_exit(EXIT_UNKNOWN_PATTERN, str(exc))

    try:
        cfg = load_config(config_path)
    except ValidationError as exc:
        _safe_exit(EXIT_CONFIG, str(exc).splitlines()[0])
    except (ConfigFormatError, yaml.YAMLError, OSError) as exc:
        _safe_exit(EXIT_CONFIG, str(exc))
    cfg = _apply_overrides(cfg, patterns=patterns, as_json=as_json, max_matches=max_matches)
    log.info("patterns: %s", ", ".join(cfg.scan.patterns))

    try:
        text = in_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        _safe_exit(EXIT_IO, str(exc))
    log.info("read %d chars from %s", len(text), in_path)

    with Timing() as t_scan:
        found = _scan_text(text, cfg)
    log.info("found %d match(es) in %.1f ms", len(found), t_scan.ms)

    line_starts = build_line_starts(text)
    records = [_match_record(m, line_starts, cfg.scan.show_groups) for m in found]
    if cfg.output.format == "json":
        typer.echo(json.dumps(records, ensure_ascii=False, indent=2))
    else:
        for record in records:
            typer.echo(_format_text(record))
