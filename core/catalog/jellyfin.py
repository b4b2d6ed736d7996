"""Jellyfin library catalog backed by the server's REST API."""

from __future__ import annotations

from typing import Any, Dict, List

import requests

from core.catalog.adapter import CatalogItem, CatalogProvider


def jellyfin_request(
    session: requests.Session,
    method: str,
    base_url: str,
    endpoint: str,
    timeout: float,
    params: Dict[str, Any] | None = None,
    body: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    """Make a Jellyfin API request.

    Args:
        session: Requests session carrying the auth header.
        method: HTTP method.
        base_url: Server root, e.g. "http://localhost:8096".
        endpoint: API endpoint path.
        timeout: Request timeout in seconds.
        params: Optional query parameters.
        body: Optional JSON body.

    Returns:
        Parsed JSON response, or an empty dict for bodiless responses.
    """
    url = f"{base_url}{endpoint}"
    resp = session.request(method, url, params=params, json=body, timeout=timeout)
    resp.raise_for_status()
    if not resp.content:
        return {}
    return resp.json()


def build_session(api_key: str) -> requests.Session:
    """Create a session authenticated with a Jellyfin API key."""
    session = requests.Session()
    session.headers.update({"X-Emby-Token": api_key, "Accept": "application/json"})
    return session


class JellyfinCatalog(CatalogProvider):
    """Movies from a Jellyfin server; renames update the item's Name."""

    name = "jellyfin"

    def __init__(self, session: requests.Session, base_url: str, timeout: float = 20.0) -> None:
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def list_movies(self) -> List[CatalogItem]:
        data = jellyfin_request(
            self.session,
            "GET",
            self.base_url,
            "/Items",
            self.timeout,
            params={"IncludeItemTypes": "Movie", "Recursive": "true"},
        )
        items: List[CatalogItem] = []
        for raw in data.get("Items", []) or []:
            item_id = raw.get("Id")
            if not item_id:
                continue
            items.append(CatalogItem(key=str(item_id), name=str(raw.get("Name") or ""), payload=raw))
        return items

    def rename(self, item: CatalogItem, new_name: str) -> None:
        # The update endpoint replaces the whole item, so start from the full record.
        current = jellyfin_request(self.session, "GET", self.base_url, f"/Items/{item.key}", self.timeout)
        body = dict(current or item.payload)
        body["Name"] = new_name
        jellyfin_request(self.session, "POST", self.base_url, f"/Items/{item.key}", self.timeout, body=body)
        item.name = new_name
        item.payload = body
