r"""
Goal: Friendly CLI for WinFocus.

- Export `app` (tests import this).
- Talks to the engine in-process; `serve` starts the local agent for other tools.
- Output is JSON so shell completion hooks and scripts can consume it.
- Exit codes: 0 found, 1 no matching window, 2 malformed pattern (only with --strict).
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import typer

from winfocus.errors import MalformedQueryError
from winfocus.services.focus_service import FocusService
from winfocus.services.logs import configure_logging
from winfocus.settings import MAX_SUGGESTIONS

app = typer.Typer(
    help="WinFocus CLI",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _service() -> FocusService:
    return FocusService()


def _echo(payload: Dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.callback(help="WinFocus CLI")
def _root_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr at DEBUG level"),
) -> None:
    configure_logging("DEBUG" if verbose else "WARNING", to_file=False)


@app.command("windows")
def windows() -> None:
    """List titled top-level windows in enumeration order."""
    items = [w.model_dump() for w in _service().windows()]
    _echo({"windows": items})


@app.command("resolve")
def resolve(
    query: str,
    strict: bool = typer.Option(False, help="Fail on patterns that are not valid regexes"),
) -> None:
    """Resolve a handle, a 'title (handle)' suggestion or a regex to a live window."""
    try:
        result = _service().resolve(query, strict=strict)
    except MalformedQueryError as e:
        _echo({"found": False, "error": str(e)})
        raise typer.Exit(2)
    _echo({"found": result.found, "handle": result.handle, "strategy": result.strategy})
    if not result.found:
        raise typer.Exit(1)


@app.command("complete")
def complete(
    partial: str = typer.Argument("", help="What has been typed so far"),
    limit: Optional[int] = typer.Option(MAX_SUGGESTIONS, min=0, help="Max suggestions (0 = all)"),
    plain: bool = typer.Option(False, help="One suggestion per line, no JSON"),
) -> None:
    """Suggest window titles for a partial input, best match first."""
    ranked = _service().rank(partial, limit=limit or None)
    if plain:
        for c in ranked:
            typer.echo(c.display)
        return
    _echo(
        {
            "partial": partial,
            "items": [{"display": c.display, "handle": c.handle, "score": c.score} for c in ranked],
        }
    )


@app.command("focus")
def focus(query: str) -> None:
    """Resolve QUERY and bring that window to the front."""
    result = _service().focus(query)
    _echo({"ok": result.found, "handle": result.handle, "strategy": result.strategy})
    if not result.found:
        raise typer.Exit(1)


@app.command("serve")
def serve() -> None:
    """Run the local WinFocus agent (blocking)."""
    from winfocus.main import main as run_agent

    run_agent()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
