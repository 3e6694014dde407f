"""
Thin requests-based client for /api/v1.
"""

import logging
from typing import Any, Dict, Iterator, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ApiClientError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, detail: Any, url: str = ''):
        super().__init__(f"API error {status_code} at {url}: {detail}")
        self.status_code = status_code
        self.detail = detail
        self.url = url


class CommAppApiClient:
    """
    Session wrapper that handles the JWT bearer header, JSON bodies
    and page-number pagination.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.trust_env = False
        self.token = token

    @property
    def token(self) -> Optional[str]:
        return self._token

    @token.setter
    def token(self, value: Optional[str]) -> None:
        self._token = value
        if value:
            self.session.headers['Authorization'] = f'Bearer {value}'
        else:
            self.session.headers.pop('Authorization', None)

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """Obtain a JWT pair and use the access token for later calls."""
        data = self.request('POST', 'auth/login/', json={'username': username, 'password': password})
        self.token = data['access']
        return data

    def request(self, method: str, path: str, **kwargs) -> Any:
        url = self.url(path)
        kwargs.setdefault('timeout', self.timeout)
        logger.debug("%s %s", method, url)
        response = self.session.request(method, url, **kwargs)

        if response.status_code >= 400:
            try:
                detail = response.json()
            except ValueError:
                detail = response.text
            logger.warning("%s %s -> %s", method, url, response.status_code)
            raise ApiClientError(response.status_code, detail, url)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def get(self, path: str, **kwargs) -> Any:
        return self.request('GET', path, **kwargs)

    def post(self, path: str, **kwargs) -> Any:
        return self.request('POST', path, **kwargs)

    def patch(self, path: str, **kwargs) -> Any:
        return self.request('PATCH', path, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request('DELETE', path, **kwargs)

    def iter_results(self, path: str, params: Optional[Dict[str, Any]] = None) -> Iterator[Dict[str, Any]]:
        """Yield every item of a paginated list endpoint."""
        data = self.get(path, params=params)
        while True:
            if isinstance(data, list):
                yield from data
                return
            yield from data.get('results', [])
            next_url = data.get('next')
            if not next_url:
                return
            response = self.session.get(next_url, timeout=self.timeout)
            if response.status_code >= 400:
                raise ApiClientError(response.status_code, response.text, next_url)
            data = response.json()
