import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

DEFAULT_ORIGIN = "https://app.thebcms.com"


class BCMSApiError(Exception):
    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"BCMS API error {status}: {message}")
        self.status = status
        self.message = message


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason or "Unknown error"
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)


class _EntryApi:
    """Read-only access to parsed entries of one instance."""

    def __init__(self, client: "BCMSClient") -> None:
        self._client = client

    def _template_path(self, template: str) -> str:
        return (
            f"/api/v3/org/{quote(self._client.org_id, safe='')}"
            f"/instance/{quote(self._client.instance_id, safe='')}"
            f"/template/{quote(template, safe='')}"
        )

    def get_all(self, template: str) -> List[Dict[str, Any]]:
        """Return every parsed entry of a template, in provider order."""
        body = self._client.get_json(f"{self._template_path(template)}/entry/all/parse")
        items = body.get("items", body) if isinstance(body, dict) else body
        if not isinstance(items, list):
            raise BCMSApiError(0, f"Unexpected entry list payload for template '{template}'")
        return items

    def get_by_slug(self, slug: str, template: str) -> Dict[str, Any]:
        """Return one parsed entry looked up by its slug."""
        body = self._client.get_json(f"{self._template_path(template)}/entry/{quote(slug, safe='')}/parse")
        item = body.get("item", body) if isinstance(body, dict) else body
        if not isinstance(item, dict):
            raise BCMSApiError(0, f"Unexpected entry payload for slug '{slug}'")
        return item


class BCMSClient:
    """Minimal BCMS REST client.

    Mirrors the surface of the official JS SDK the site was designed
    against: ``client.entry.get_all(template)`` and
    ``client.entry.get_by_slug(slug, template)``.
    """

    def __init__(
        self,
        org_id: str,
        instance_id: str,
        api_key_id: str,
        api_key_secret: str,
        *,
        origin: str = DEFAULT_ORIGIN,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.org_id = org_id
        self.instance_id = instance_id
        self.origin = origin.rstrip("/")
        self.timeout = timeout
        self._api_key_id = api_key_id
        self._api_key_secret = api_key_secret
        self._session = session or requests.Session()
        self.entry = _EntryApi(self)

    def _headers(self) -> dict:
        return {
            "Authorization": f"ApiKey {self._api_key_id}.{self._api_key_secret}",
            "Accept": "application/json",
        }

    def get_json(self, path: str) -> Any:
        url = f"{self.origin}{path}"
        try:
            resp = self._session.get(url, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"BCMS request failed for {path}: {e}")
            raise BCMSApiError(0, str(e)) from e

        if resp.status_code >= 400:
            raise BCMSApiError(resp.status_code, _error_message(resp))

        try:
            return resp.json()
        except ValueError as e:
            raise BCMSApiError(resp.status_code, "Response body is not valid JSON") from e
