"""
Goal: Centralized configuration for WinFocus (paths, agent port, enumeration flags).
Everything comes from environment variables so scripts can tweak behavior without code.
"""

import os
import re
from pathlib import Path


def _validate_port(port_str: str, default: int) -> int:
    """Validate port number is in valid range."""
    try:
        port = int(port_str)
        if 1024 <= port <= 65535:
            return port
    except ValueError:
        pass
    return default


def _validate_host(host_str: str, default: str) -> str:
    """Validate host is localhost or a private IP."""
    if not host_str:
        return default

    allowed_hosts = {'127.0.0.1', 'localhost', '::1'}
    if host_str in allowed_hosts:
        return host_str

    if re.match(r'^192\.168\.\d{1,3}\.\d{1,3}$', host_str) or \
       re.match(r'^10\.\d{1,3}\.\d{1,3}\.\d{1,3}$', host_str) or \
       re.match(r'^172\.(1[6-9]|2[0-9]|3[0-1])\.\d{1,3}\.\d{1,3}$', host_str):
        return host_str

    return default


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _positive_int(value: str, default: int) -> int:
    try:
        n = int(value)
    except ValueError:
        return default
    return n if n > 0 else default


# Grab the local appdata folder in a Windows-friendly way
LOCAL_APPDATA = os.getenv("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
APP_DIR = Path(LOCAL_APPDATA) / "WinFocus"
LOG_DIR = APP_DIR / "logs"
TOKEN_FILE = APP_DIR / "token.txt"

# Local agent address; 5030 stays clear of the usual dev ports
WINFOCUS_PORT = _validate_port(os.getenv("WINFOCUS_PORT", "5030"), 5030)
WINFOCUS_HOST = _validate_host(os.getenv("WINFOCUS_HOST", "127.0.0.1"), "127.0.0.1")

# Only list windows that are currently visible (hidden top-level windows are skipped)
VISIBLE_ONLY = _flag("WINFOCUS_VISIBLE_ONLY")

# How many suggestions the CLI/agent hand back; the ranker itself never truncates
MAX_SUGGESTIONS = _positive_int(os.getenv("WINFOCUS_MAX_SUGGESTIONS", "25"), 25)

LOG_LEVEL = os.getenv("WINFOCUS_LOG_LEVEL", "INFO").upper()
