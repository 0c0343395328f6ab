from __future__ import annotations

import logging
from pathlib import Path

import urllib3

from . import config
from .cookies import get_session
from .cookies import Prompt
from .exceptions import CacheError
from .exceptions import FetchError
from .exceptions import PuzzleLockedError
from .utils import atomic_write_file
from .utils import HttpClient
from .utils import http as default_http
from .utils import sanitized


log: logging.Logger = logging.getLogger(__name__)


class InputStore:
    """
    Puzzle inputs, read from a local cache directory when present and otherwise
    downloaded (once) from adventofcode.com and written to the cache.

    Note that puzzle inputs never change for a given user, so a cached input is
    kept indefinitely. Delete the file by hand if you need to re-download it.
    """

    def __init__(
        self,
        inputs_dir: Path | None = None,
        session_path: Path | None = None,
        prompt: Prompt | None = None,
        http: HttpClient | None = None,
    ) -> None:
        self.inputs_dir = config.INPUTS_DIR if inputs_dir is None else inputs_dir
        self.session_path = session_path
        self.prompt = prompt
        self.http = default_http if http is None else http
        self._token: str | None = None

    def cache_path(self, year: int, day: int) -> Path:
        return self.inputs_dir / str(year) / f"day{day:02d}"

    @property
    def token(self) -> str:
        """
        The session token, loaded lazily and then remembered for the lifetime of
        this store. Cache hits never need it.
        """
        if self._token is None:
            self._token = get_session(path=self.session_path, prompt=self.prompt)
        return self._token

    def get_input(self, year: int, day: int) -> str:
        path = self.cache_path(year, day)
        try:
            # bytes in, bytes out: no newline translation on a cache hit
            data = path.read_bytes().decode("utf-8")
        except FileNotFoundError:
            log.debug("input cache miss %s", path)
        except (OSError, UnicodeDecodeError) as err:
            raise CacheError(f"unable to read cached input {path} ({err})") from err
        else:
            log.debug("input cache hit %s", path)
            return data
        data = self.fetch(year, day)
        try:
            atomic_write_file(path, data)
        except OSError as err:
            raise CacheError(f"unable to write cached input {path} ({err})") from err
        log.info("saved puzzle input for %d/%02d to %s", year, day, path)
        return data

    def fetch(self, year: int, day: int) -> str:
        url = config.URL.format(year=year, day=day) + "/input"
        token = self.token
        log.info("getting data year=%s day=%s token=%s", year, day, sanitized(token))
        try:
            response = self.http.get(url, token=token)
        except urllib3.exceptions.HTTPError as err:
            log.error("request to %s failed: %s", url, err)
            raise FetchError(f"unable to reach {url} ({err})") from err
        if not 200 <= response.status < 300:
            if response.status == 404:
                raise PuzzleLockedError(f"{year}/{day:02d} not available yet")
            log.error("got %s status code token=%s", response.status, sanitized(token))
            log.error(response.data.decode(errors="replace"))
            raise FetchError(f"HTTP {response.status} at {url}")
        try:
            return response.data.decode()
        except UnicodeDecodeError as err:
            raise FetchError(f"undecodable response from {url} ({err})") from err
