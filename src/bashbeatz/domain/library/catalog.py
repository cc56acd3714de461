"""
Remote catalog access.

Fetches the song listing from the music server and builds the stream URL
for a track.
"""

import os
from typing import Any, List, Optional
from urllib.parse import quote

import requests
from loguru import logger
from requests.exceptions import RequestException

from bashbeatz.exceptions import FetchError

from .models import CatalogEntry, DirectoryEntry, TrackMetadata, TrackRecord

# Characters JavaScript's encodeURIComponent leaves untouched besides [A-Za-z0-9_.~-]
_URI_COMPONENT_SAFE = "!*'()"


def songs_url(base_url: str) -> str:
    """URL of the catalog listing."""
    return f"{base_url.rstrip('/')}/songs"


def track_url(base_url: str, file_path: str) -> str:
    """URL that streams a track, addressed by its url-encoded base name."""
    name = quote(os.path.basename(file_path), safe=_URI_COMPONENT_SAFE)
    return f"{songs_url(base_url)}/{name}"


def _text(value: Any) -> Optional[str]:
    """Coerce a metadata value to display text; blank values become None.

    Non-blank text is kept verbatim so titles differing only in surrounding
    whitespace stay distinct.
    """
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value)
    return text if text.strip() else None


def parse_metadata(raw: dict) -> TrackMetadata:
    return TrackMetadata(
        artist=_text(raw.get("artist")),
        album=_text(raw.get("album")),
        title=_text(raw.get("title")),
        year=_text(raw.get("year")),
        track=_text(raw.get("track")),
        duration=_text(raw.get("duration")),
    )


def parse_entry(raw: Any) -> Optional[CatalogEntry]:
    """Translate one JSON entry from /songs into a catalog entry.

    Returns:
        TrackRecord for {file, metadata}, DirectoryEntry for
        {type: "directory", name}, or None for anything else
    """
    if not isinstance(raw, dict):
        return None

    file_path = raw.get("file")
    if isinstance(file_path, str) and file_path:
        metadata = raw.get("metadata")
        if isinstance(metadata, dict):
            return TrackRecord(file_path=file_path, metadata=parse_metadata(metadata))
        return TrackRecord(file_path=file_path, metadata=None)

    name = raw.get("name")
    if raw.get("type") == "directory" and isinstance(name, str) and name:
        return DirectoryEntry(name=name)

    return None


def parse_entries(payload: Any) -> List[CatalogEntry]:
    """Parse the /songs body, dropping entries with an unknown shape."""
    entries = []
    for raw in payload:
        entry = parse_entry(raw)
        if entry is None:
            logger.debug(f"Skipping unrecognized catalog entry: {raw!r}")
            continue
        entries.append(entry)
    return entries


def fetch_songs(base_url: str, timeout: float = 10.0) -> List[CatalogEntry]:
    """Fetch and parse the catalog listing.

    Args:
        base_url: Server base URL, e.g. "http://localhost:3000"
        timeout: Request timeout in seconds

    Returns:
        Catalog entries in server order

    Raises:
        FetchError: On connection failure, HTTP error status, or a body that
            is not a JSON list
    """
    url = songs_url(base_url)
    logger.info(f"Fetching catalog: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except RequestException as e:
        # Also covers requests.exceptions.JSONDecodeError
        raise FetchError(url, str(e)) from e

    if not isinstance(payload, list):
        raise FetchError(url, f"expected a JSON list, got {type(payload).__name__}")

    entries = parse_entries(payload)
    logger.info(f"Fetched {len(entries)} catalog entries ({len(payload)} received)")
    return entries
