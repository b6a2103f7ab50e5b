from __future__ import annotations

import logging
from typing import Optional

import requests
from requests import Response


class ProviderError(RuntimeError):
    """Raised when the provider could not be reached at all."""


class HTTPProvider:
    """Base class owning the HTTP session for upstream providers.

    A single attempt is made per call. ``timeout=None`` leaves the transport
    defaults in place.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise ProviderError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise ProviderError(f"request failed: {exc}") from exc


__all__ = ["HTTPProvider", "ProviderError"]
