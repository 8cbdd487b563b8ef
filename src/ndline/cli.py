"""CLI root — entry point for all ndline subcommands.

Entry points:
  ndline
  python -m ndline

Command surface:
  ndline validate PATH     check that every line of PATH is a JSON document
  ndline decode PATH       print the records of PATH as one JSON array
  ndline encode PATH       print the JSON array in PATH as NDJSON
  ndline config show       print resolved configuration

PATH may be ``-`` to read standard input.

Exit codes: 0 = success, 1 = a line is not valid JSON, 2 = the input could
not be read or is not usable.
"""

import json
from pathlib import Path

import typer

from ndline import __version__
from ndline.codec import DecodeOutcome, Invalid
from ndline.logging import get_logger

app = typer.Typer(
    name="ndline",
    help="Validate, decode and encode newline-delimited JSON.",
    no_args_is_help=True,
)

_log = get_logger(__name__)

_STDIN = "-"


# ---------------------------------------------------------------------------
# Global callback — runs before every subcommand
# ---------------------------------------------------------------------------


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ndline {__version__}")
        raise typer.Exit()


@app.callback()
def _main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Print version and exit.",
    ),
) -> None:
    """Validate, decode and encode newline-delimited JSON."""
    # Eager options (--version) raise typer.Exit() before this body runs,
    # so configure_logging() is only called for real subcommands.
    from ndline.logging import configure_logging

    configure_logging()


# ---------------------------------------------------------------------------
# Shared input handling
# ---------------------------------------------------------------------------


def _decode_source(source: str) -> DecodeOutcome:
    """Decode *source* (a path or ``-``), exiting 2 if it cannot be read."""
    from ndline.api import unmarshal, unmarshal_file
    from ndline.files import ResourceError

    if source == _STDIN:
        return unmarshal(typer.get_binary_stream("stdin").read())
    try:
        return unmarshal_file(Path(source))
    except ResourceError as exc:
        _log.error("cannot read input", path=source, detail=exc.detail)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc


def _read_raw(source: str) -> bytes:
    from ndline.files import ResourceError, read_lines

    if source == _STDIN:
        return typer.get_binary_stream("stdin").read()
    try:
        return b"".join(read_lines(Path(source)))
    except ResourceError as exc:
        _log.error("cannot read input", path=source, detail=exc.detail)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc


def _reject(source: str, outcome: Invalid) -> None:
    """Report an Invalid outcome and exit 1."""
    err = outcome.error
    _log.warning("ndjson rejected", path=source, line_number=err.line_number, reason=err.reason)
    typer.echo(str(err), err=True)
    raise typer.Exit(1)


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


@app.command("validate")
def validate(
    source: str = typer.Argument(..., metavar="PATH", help="NDJSON file, or - for stdin."),
) -> None:
    """Check that every line is a complete JSON document.

    Stops at the first bad line and reports its number and the parse
    error.  Blank lines inside the input are errors; a trailing newline at
    the end of the input is not.
    """
    outcome = _decode_source(source)
    if not outcome.ok:
        _reject(source, outcome)

    n = len(outcome.values)
    _log.info("ndjson validated", path=source, records=n)
    typer.echo(f"ok: {n} record(s)")


# ---------------------------------------------------------------------------
# decode
# ---------------------------------------------------------------------------


@app.command("decode")
def decode(
    source: str = typer.Argument(..., metavar="PATH", help="NDJSON file, or - for stdin."),
    indent: int = typer.Option(
        0,
        "--indent",
        "-i",
        min=0,
        help="Pretty-print with this many spaces.  0 = compact single line.",
    ),
) -> None:
    """Print every record as elements of a single JSON array."""
    from ndline.config import get_settings

    outcome = _decode_source(source)
    if not outcome.ok:
        _reject(source, outcome)

    typer.echo(
        json.dumps(
            outcome.values,
            indent=indent or None,
            ensure_ascii=get_settings().codec.ensure_ascii,
        )
    )
    _log.info("ndjson decoded", path=source, records=len(outcome.values))


# ---------------------------------------------------------------------------
# encode
# ---------------------------------------------------------------------------


@app.command("encode")
def encode(
    source: str = typer.Argument(..., metavar="PATH", help="JSON array file, or - for stdin."),
) -> None:
    """Print a JSON array document as NDJSON, one element per line."""
    from ndline.api import marshal

    raw = _read_raw(source)
    try:
        document = json.loads(raw)
    except ValueError as exc:
        _log.error("input is not JSON", path=source, detail=str(exc))
        typer.echo(f"Error: input is not valid JSON: {exc}", err=True)
        raise typer.Exit(2) from exc

    if not isinstance(document, list):
        _log.error("input is not a JSON array", path=source, got=type(document).__name__)
        typer.echo(f"Error: expected a JSON array, got {type(document).__name__}", err=True)
        raise typer.Exit(2)

    try:
        text = marshal(document)
    except (TypeError, ValueError) as exc:
        _log.error("cannot encode input", path=source, detail=str(exc))
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc

    typer.echo(text, nl=False)
    _log.info("ndjson encoded", path=source, records=len(document))


# ---------------------------------------------------------------------------
# config subcommands
# ---------------------------------------------------------------------------

_config_app = typer.Typer(help="Inspect resolved configuration.")
app.add_typer(_config_app, name="config")


@_config_app.command("show")
def config_show() -> None:
    """Print the fully-resolved configuration and exit.

    Shows which config file was loaded and the final value of every setting
    after environment-variable overrides are applied.
    """
    from ndline.config import _config_file, get_settings

    settings = get_settings()

    typer.echo(f"\n  config : {_config_file()}\n")

    for section_name, section in settings.model_dump().items():
        typer.echo(f"  [{section_name}]")
        width = max(len(k) for k in section)
        for key, val in section.items():
            typer.echo(f"  {key.ljust(width)} = {val}")
        typer.echo()
