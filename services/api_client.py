import logging

import requests

log = logging.getLogger(__name__)


class ApiClient:
    """Single pre-configured HTTP client for the Spending Tracker API.

    Every request carries a JSON content type. Transport failures and non-2xx
    responses are raised as requests exceptions, unchanged.
    """

    def __init__(self, base_url: str, timeout: float | None = None,
                 session: requests.Session | None = None):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    def url_for(self, path: str) -> str:
        return self._base_url + "/" + path.lstrip("/")

    def get(self, path: str):
        return self._request("GET", path)

    def post(self, path: str, payload: dict):
        return self._request("POST", path, json=payload)

    def close(self):
        self._session.close()

    def _request(self, method: str, path: str, json: dict | None = None):
        url = self.url_for(path)
        log.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, json=json, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            log.warning("%s %s failed: %s", method, url, e)
            raise
        if not response.content:
            return None
        return response.json()
