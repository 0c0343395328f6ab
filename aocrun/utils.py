from __future__ import annotations

import logging
import os
import platform
import shutil
import sys
import typing as t
from datetime import timedelta
from datetime import timezone
from importlib.metadata import entry_points
from importlib.metadata import version
from pathlib import Path
from tempfile import NamedTemporaryFile

import urllib3

if sys.version_info >= (3, 10):
    from importlib.metadata import EntryPoints as _EntryPointsType
else:
    from importlib.metadata import EntryPoint

    _EntryPointsType = list[EntryPoint]

log: logging.Logger = logging.getLogger(__name__)

# puzzles unlock at midnight EST, and December never observes daylight saving
AOC_TZ = timezone(timedelta(hours=-5), "EST")
_v = version("advent-of-code-runner")
USER_AGENT = f"github.com/aocrun/advent-of-code-runner v{_v}"


class HttpClient:
    # every request to adventofcode.com goes through this wrapper
    # so that the user agent and session cookie are always attached.

    pool_manager: urllib3.PoolManager
    req_count: int

    def __init__(self) -> None:
        proxy_url = os.environ.get("http_proxy") or os.environ.get("https_proxy")
        headers = {"User-Agent": USER_AGENT}
        if proxy_url:
            self.pool_manager = urllib3.ProxyManager(proxy_url, headers=headers)
        else:
            self.pool_manager = urllib3.PoolManager(headers=headers)
        self.req_count = 0

    def get(self, url: str, token: str) -> urllib3.BaseHTTPResponse:
        # a single attempt, redirects are not followed: an expired session gets
        # bounced to the front page and that should count as a failure
        headers = self.pool_manager.headers | {"Cookie": f"session={token}"}
        resp = self.pool_manager.request(
            "GET", url, headers=headers, redirect=False, retries=False
        )
        self.req_count += 1
        return resp


http: HttpClient = HttpClient()


def _ensure_intermediate_dirs(path: Path) -> None:
    path.expanduser().parent.mkdir(parents=True, exist_ok=True)


def atomic_write_file(path: Path, contents_str: str) -> None:
    """
    Atomically write a string to a file by writing it to a temporary file, and then
    renaming it to the final destination name. Existence of the file therefore
    always means the content is complete, even if the process dies mid-write.
    """
    _ensure_intermediate_dirs(path)
    with NamedTemporaryFile(
        "w", dir=path.parent, encoding="utf-8", newline="", delete=False
    ) as f:
        log.debug("writing to tempfile @ %s", f.name)
        try:
            f.write(contents_str)
        except BaseException:
            f.close()
            os.unlink(f.name)
            raise
    log.debug("moving %s -> %s", f.name, path)
    shutil.move(f.name, path)


def sanitized(token: str) -> str:
    return "..." + token[-4:]


_ANSIColor = t.Literal[
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"
]
_ansi_colors = t.get_args(_ANSIColor)
if platform.system() == "Windows":
    os.system("color")  # hack - makes ANSI colors work in the windows cmd window


def colored(txt: str, color: _ANSIColor | None) -> str:
    if color is None:
        return txt
    code = _ansi_colors.index(color.casefold())
    reset = "\x1b[0m"
    return f"\x1b[{code + 30}m{txt}{reset}"


def get_plugins(group: str = "aocrun.days") -> _EntryPointsType:
    """
    Currently installed day registries, advertised by entry-point.
    """
    try:
        # Python 3.10+
        return entry_points(group=group)
    except TypeError:
        # Python 3.9
        return entry_points().get(group, [])
