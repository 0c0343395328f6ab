from __future__ import annotations

import logging
import os
import sys
import typing as t
from pathlib import Path
from textwrap import dedent

from . import config
from .exceptions import CredentialError
from .utils import atomic_write_file
from .utils import colored
from .utils import sanitized


log: logging.Logger = logging.getLogger(__name__)

Prompt = t.Callable[[], str]


def prompt_for_session() -> str:
    """Ask the user to paste their session cookie on stdin."""
    msg = dedent(
        """\
        In order to download puzzle inputs from the Advent of Code website, your
        session cookie is needed. Log in to https://adventofcode.com, then find the
        value of the 'session' cookie in your browser and paste it here.
        """
    )
    print(colored(msg, color="yellow"), file=sys.stderr)
    try:
        return input("session: ")
    except EOFError:
        return ""


def read_session_file(path: Path) -> str | None:
    """
    First whitespace-delimited token of the session file, or None if there is no
    such file. A file that exists is trusted as-is.
    """
    try:
        txt = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as err:
        raise CredentialError(f"unable to read session file {path} ({err})") from err
    words = txt.split()
    if not words:
        raise CredentialError(f"session file {path} is empty")
    return words[0]


def get_session(path: Path | None = None, prompt: Prompt | None = None) -> str:
    """
    Discover the user's session token. The AOC_SESSION environment variable wins,
    then the session file. Otherwise the user is prompted, and the answer is saved
    to the session file before it's used, so that they are only ever asked once.
    """
    # export your session id as AOC_SESSION env var
    token = os.getenv("AOC_SESSION", "").strip()
    if token:
        log.debug("using session from environment token=%s", sanitized(token))
        return token

    # or chuck it in a plaintext file
    if path is None:
        path = config.SESSION_FILE
    token = read_session_file(path)
    if token is not None:
        log.debug("using session from %s token=%s", path, sanitized(token))
        return token

    log.info("session file %s not found, prompting for session cookie", path)
    if prompt is None:
        prompt = prompt_for_session
    token = (prompt() or "").strip()
    if not token:
        raise CredentialError("Missing session ID")
    try:
        atomic_write_file(path, token)
    except OSError as err:
        raise CredentialError(f"unable to save session file {path} ({err})") from err
    log.info("saved session token=%s to %s", sanitized(token), path)
    return token
