"""
WinFocus agent entrypoint

Goals
- Simple uvicorn runner so packaging/scripts can `python -m winfocus.cli.entry` or import run().
- Config via env (WINFOCUS_HOST/WINFOCUS_PORT) through winfocus.settings.
"""

from __future__ import annotations

import uvicorn

from winfocus.settings import WINFOCUS_HOST, WINFOCUS_PORT


def run() -> None:
    uvicorn.run("winfocus.main:app", host=WINFOCUS_HOST, port=WINFOCUS_PORT, reload=False, log_level="info")


if __name__ == "__main__":
    run()
