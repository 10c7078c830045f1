from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .core.models import RepositoryRecord

logger = logging.getLogger(__name__)

_USER_AGENT = "repo-showcase"


class RepositoryPayload(BaseModel):
    """One item of the data source's JSON array.

    Every field is optional so partial records still load; missing values
    fall back when converted to :class:`RepositoryRecord`.
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    updated_at: Optional[str] = None
    html_url: Optional[str] = None


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp such as ``2024-05-01T12:00:00Z``."""

    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def to_record(payload: RepositoryPayload) -> RepositoryRecord:
    return RepositoryRecord(
        name=payload.name or "",
        url=payload.html_url or "",
        description=(payload.description or "").strip() or None,
        language=payload.language or None,
        updated_at=parse_timestamp(payload.updated_at),
    )


def parse_repositories(data: Any) -> List[RepositoryRecord]:
    """Convert a decoded JSON body into records.

    Anything other than a list yields an empty result; items that are not
    objects or fail validation are skipped.
    """

    if not isinstance(data, list):
        logger.warning("Repository payload is not a JSON array (got %s)", type(data).__name__)
        return []

    records: List[RepositoryRecord] = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning("Skipping repository #%d: not a JSON object", idx)
            continue
        try:
            payload = RepositoryPayload.model_validate(item)
        except ValidationError as e:
            logger.warning("Skipping repository #%d: %s", idx, e.errors()[0].get("msg", e))
            continue
        records.append(to_record(payload))
    return records


class RepositoryFetchError(RuntimeError):
    """Raised when the repository endpoint cannot deliver a usable list."""


def _http_get_json(url: str, headers: Optional[Dict[str, str]] = None, timeout: float = 10) -> Any:
    req = urllib.request.Request(url, headers=headers or {})
    with urllib.request.urlopen(req, timeout=timeout) as resp:
        data = resp.read()
    if not data:
        return None
    return json.loads(data.decode("utf-8"))


class HttpRepositorySource:
    """Fetches the repository list from the configured endpoint.

    Transport errors, non-success statuses, truncated or undecodable bodies
    and malformed URLs are raised as :class:`RepositoryFetchError`; callers
    decide how to recover.
    There is no retry.
    """

    def __init__(self, url: str, timeout: float = 10) -> None:
        self.url = url
        self.timeout = timeout

    def fetch(self) -> List[RepositoryRecord]:
        try:
            data = _http_get_json(
                self.url,
                headers={
                    "Accept": "application/json",
                    "User-Agent": _USER_AGENT,
                },
                timeout=self.timeout,
            )
        except urllib.error.HTTPError as e:
            raise RepositoryFetchError(f"HTTP {e.code} from {self.url}") from e
        except (urllib.error.URLError, OSError) as e:
            raise RepositoryFetchError(f"Failed to reach {self.url}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RepositoryFetchError(f"Invalid JSON from {self.url}: {e}") from e
        except http.client.HTTPException as e:
            # 响应体被截断等
            raise RepositoryFetchError(f"Broken response from {self.url}: {e!r}") from e
        except ValueError as e:
            raise RepositoryFetchError(f"Invalid repositories URL {self.url!r}: {e}") from e

        if not isinstance(data, list):
            raise RepositoryFetchError(
                f"Expected a JSON array from {self.url}, got {type(data).__name__}"
            )

        records = parse_repositories(data)
        logger.info("Fetched %d repositories from %s", len(records), self.url)
        return records


def load_repositories(source: Any) -> List[RepositoryRecord]:
    """Fetch from ``source``, substituting an empty list on failure."""

    try:
        return list(source.fetch())
    except RepositoryFetchError as e:
        logger.error("Failed to fetch repositories: %s", e)
        return []
