"""
Source fetching for local files and HTTP(S) URLs.

Each named source is a location string: an absolute URL, or a file path
resolved against the configured base directory.
"""

import socket
from pathlib import Path
from typing import Any, Optional, Union
from urllib.error import HTTPError, URLError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from ..errors import SourceUnavailableError
from ..logging import get_logger
from .parsers import parse_json_payload

logger = get_logger(__name__)

REMOTE_SCHEMES = ("http", "https")


class SourceFetcher:
    """Fetches and decodes JSON source documents."""

    def __init__(self, base_dir: Union[str, Path] = ".", timeout_seconds: float = 10.0):
        self.base_dir = Path(base_dir)
        self.timeout_seconds = timeout_seconds

    def is_remote(self, location: str) -> bool:
        """True if the location is an HTTP(S) URL."""
        return isinstance(location, str) and urlparse(location).scheme in REMOTE_SCHEMES

    def resolve_path(self, location: str) -> Path:
        """Resolve a local location against the base directory."""
        path = Path(location)
        if not path.is_absolute():
            path = self.base_dir / path
        return path

    def fetch_bytes(self, location: str, source: Optional[str] = None) -> bytes:
        """
        Read the raw document at a location.

        Raises:
            SourceUnavailableError: On network errors, non-success HTTP status,
                a missing/unreadable local file, or a malformed location
        """
        if not isinstance(location, str) or not location.strip():
            raise SourceUnavailableError(
                f"Invalid location: {location!r}",
                source=source,
                location=str(location),
            )
        if self.is_remote(location):
            return self._fetch_remote(location, source)
        return self._read_local(location, source)

    def fetch_json(self, location: str, source: Optional[str] = None) -> Any:
        """
        Fetch and decode the JSON document at a location.

        Raises:
            SourceUnavailableError: If the document cannot be read
            SourceParseError: If the document is not valid JSON
        """
        raw_data = self.fetch_bytes(location, source)
        return parse_json_payload(raw_data, source=source)

    def _fetch_remote(self, url: str, source: Optional[str]) -> bytes:
        try:
            req = Request(url, headers={
                'Accept': 'application/json',
                'User-Agent': 'streacs-app/1.0'
            })
            with urlopen(req, timeout=self.timeout_seconds) as response:
                status = response.getcode()
                if not 200 <= status < 300:
                    raise SourceUnavailableError(
                        f"HTTP {status} from {url}",
                        status_code=status,
                        source=source,
                        location=url,
                    )
                return response.read()

        except HTTPError as e:
            raise SourceUnavailableError(
                f"HTTP {e.code}: {e.reason}",
                status_code=e.code,
                source=source,
                location=url,
            ) from e

        except (OSError, URLError, socket.timeout) as e:
            raise SourceUnavailableError(
                f"Network error: {e}",
                source=source,
                location=url,
            ) from e

        except ValueError as e:
            # Includes http.client.InvalidURL
            raise SourceUnavailableError(
                f"Invalid URL {url!r}: {e}",
                source=source,
                location=url,
            ) from e

    def _read_local(self, location: str, source: Optional[str]) -> bytes:
        path = self.resolve_path(location)

        try:
            return path.read_bytes()
        except (OSError, ValueError) as e:
            raise SourceUnavailableError(
                f"Cannot read {path}: {getattr(e, 'strerror', None) or e}",
                source=source,
                location=str(path),
            ) from e
