from __future__ import annotations

import json

import typer

from argfile.core.errors import ArgvError, ResponseFileError
from argfile.core.expand.expand_argv import expand_argv, try_expand_argv
from argfile.core.expand.expand_config import ConfigError, load_and_merge
from argfile.core.logging import configure_logging
from argfile.core.tokenize.build_argv import build_argv
from argfile.core.write.write_argv import write_argv

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def _callback(
    ctx: typer.Context,
    log_level: str | None = typer.Option(None, "--log-level", help="DEBUG|INFO|WARNING|ERROR"),
) -> None:
    """Shell-free argument splitting and @file expansion."""
    ctx.obj = {"log_level": log_level}
    configure_logging(log_level or "WARNING")


@app.command("split")
def split(
    text: str = typer.Argument(..., help="String to split into arguments"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Split a string into arguments using quote/backslash rules."""
    if format not in ("text", "json"):
        _print_errors([_unknown_format(format)])
        raise typer.Exit(code=2)

    argv = build_argv(text)
    _emit(argv, command="split", format=format)


@app.command("expand")
def expand(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(None, help="Arguments; @FILE reads more from FILE"),
    prog: str = typer.Option("argfile", "--prog", help="Program name used as argv[0]"),
    iteration_limit: int | None = typer.Option(
        None, "--iteration-limit", help="Maximum @-files expanded (default 2000)"
    ),
    config: str | None = typer.Option(None, "--config", help="Optional YAML settings file"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
    no_exit: bool = typer.Option(
        False, "--no-exit", help="Report fatal @-file errors as an error envelope"
    ),
) -> None:
    """Expand @file arguments and print the resulting list (without argv[0])."""
    if format not in ("text", "json"):
        _print_errors([_unknown_format(format)])
        raise typer.Exit(code=2)

    try:
        cfg = load_and_merge(
            config,
            iteration_limit=iteration_limit,
            log_level=(ctx.obj or {}).get("log_level"),
        )
    except FileNotFoundError:
        _print_errors(
            [
                ArgvError(
                    code="E_CONFIG_FILE_NOT_FOUND",
                    message=f"config file not found: {config}",
                    path="config",
                )
            ]
        )
        raise typer.Exit(code=2)
    except ConfigError as e:
        _print_errors(
            [ArgvError(code="E_CONFIG_INVALID", message=str(e), file=config, path="config")]
        )
        raise typer.Exit(code=2)
    configure_logging(cfg.log_level)

    argv = [prog] + list(args or [])
    if no_exit:
        try:
            _, out = try_expand_argv(len(argv), argv, iteration_limit=cfg.iteration_limit)
        except ResponseFileError as e:
            _print_errors([e])
            raise typer.Exit(code=1)
    else:
        _, out = expand_argv(len(argv), argv, iteration_limit=cfg.iteration_limit)

    _emit(out[1:], command="expand", format=format)


@app.command("write")
def write(
    args: list[str] | None = typer.Argument(None, help="Arguments to store"),
    out: str = typer.Option(..., "--out", help="Path of the response file to write"),
) -> None:
    """Write arguments to a response file that splits back to the same list."""
    argv = list(args or [])
    write_argv(argv, out)
    typer.echo(f"OK: wrote {len(argv)} argument(s) to {out}")


def _emit(argv: list[str], *, command: str, format: str) -> None:
    if format == "json":
        payload = {
            "tool": "argfile",
            "command": command,
            "ok": True,
            "argc": len(argv),
            "argv": argv,
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return
    for arg in argv:
        # Undecodable response-file bytes come back as surrogates; write them raw.
        typer.echo(arg.encode("utf-8", "surrogateescape"))


def _unknown_format(format: str) -> ArgvError:
    return ArgvError(
        code="E_UNKNOWN_FORMAT",
        message=f"unknown format: {format} (choose one of: text, json)",
        path="format",
    )


def _print_errors(errors: list[ArgvError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.file or "", e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="argfile")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
