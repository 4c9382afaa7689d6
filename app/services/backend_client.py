import json
import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'http://localhost:8000'
JSON_HEADERS = {'Content-Type': 'application/json'}


class BackendError(Exception):
    """Raised when a backend call fails or answers with a non-2xx status."""

    def __init__(self, status_code=None, path=None, reason=None):
        self.status_code = status_code
        self.path = path
        self.reason = reason
        super().__init__(str(status_code) if status_code is not None else (reason or 'backend error'))


class BackendClient:
    """Thin JSON client for the EDmin REST backend."""

    def __init__(self, base_url=DEFAULT_BASE_URL, timeout=10, session=None):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config, session=None):
        return cls(
            base_url=config.get('BACKEND_URL', DEFAULT_BASE_URL),
            timeout=config.get('BACKEND_TIMEOUT', 10),
            session=session,
        )

    def url_for(self, path):
        return f"{self.base_url}{path}"

    def fetch_json(self, path, method='GET', payload=None):
        """Issue a request and return the decoded JSON body.

        Raises BackendError on connection failures, non-2xx answers and bodies
        that are not JSON. For status failures the error message is the status code.
        """
        kwargs = {'headers': JSON_HEADERS, 'timeout': self.timeout}
        if payload is not None:
            kwargs['data'] = json.dumps(payload)

        try:
            resp = self.session.request(method, self.url_for(path), **kwargs)
        except requests.RequestException as e:
            logger.debug(f"{method} {path} failed: {e}")
            raise BackendError(path=path, reason=str(e)) from e

        if not 200 <= resp.status_code < 300:
            logger.debug(f"{method} {path} answered HTTP {resp.status_code}")
            raise BackendError(status_code=resp.status_code, path=path)

        try:
            return resp.json()
        except ValueError as e:
            raise BackendError(path=path, reason=f"invalid JSON from {path}") from e

    def health(self):
        return self.fetch_json('/')

    def list_records(self, path):
        return self.fetch_json(path)

    def create_record(self, path, payload):
        return self.fetch_json(path, method='POST', payload=payload)
