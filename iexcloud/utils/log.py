"""
Color-coded console output for the iexcloud CLI.

Results (header and JSON) go to stdout; status messages go to stderr.

Uses colorama for cross-platform terminal color support.
"""

import datetime
import json
import logging
import sys
from typing import Optional

from colorama import Fore, Style, init

init(autoreset=True)


# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------

class C:
    """Color shortcuts for CLI output."""
    HEADER = Fore.CYAN + Style.BRIGHT
    STEP = Fore.BLUE + Style.BRIGHT
    OK = Fore.GREEN + Style.BRIGHT
    WARN = Fore.YELLOW + Style.BRIGHT
    ERR = Fore.RED + Style.BRIGHT
    DIM = Style.DIM
    KEY = Fore.CYAN
    VALUE = Fore.GREEN
    RESET = Style.RESET_ALL


def _ts() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


# ---------------------------------------------------------------------------
# Console messages
# ---------------------------------------------------------------------------

def header(msg: str) -> None:
    """Print a bold section header."""
    print(f"\n{C.HEADER}{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}{C.RESET}\n")


def step(msg: str) -> None:
    print(f"{C.STEP}[{_ts()}] >> {msg}{C.RESET}", file=sys.stderr)


def info(msg: str) -> None:
    print(f"{C.DIM}[{_ts()}]{C.RESET} {msg}", file=sys.stderr)


def ok(msg: str) -> None:
    print(f"{C.OK}[{_ts()}] OK {msg}{C.RESET}", file=sys.stderr)


def warn(msg: str) -> None:
    print(f"{C.WARN}[{_ts()}] WARN {msg}{C.RESET}", file=sys.stderr)


def err(msg: str) -> None:
    """Print an error to stderr."""
    print(f"{C.ERR}[{_ts()}] ERR {msg}{C.RESET}", file=sys.stderr)


def json_block(payload: bytes) -> None:
    """Pretty-print a JSON document with colored keys."""
    text = json.dumps(json.loads(payload), indent=2)
    for line in text.splitlines():
        key, sep, rest = line.partition('": ')
        if sep and key.lstrip().startswith('"'):
            print(f"{C.KEY}{key}\"{C.RESET}: {C.VALUE}{rest}{C.RESET}")
        else:
            print(line)


# ---------------------------------------------------------------------------
# Verbose logging setup
# ---------------------------------------------------------------------------

def setup_verbose_logging(name: str = "iexcloud", level: int = logging.DEBUG,
                          log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the package logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
