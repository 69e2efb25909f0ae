"""httpx-backed implementation of :class:`~ahoy.core.protocols.TemplateFetcher`.

All httpx exceptions are caught here and re-raised as
:class:`~ahoy.exceptions.InitTemplateError`.
"""

from __future__ import annotations

import httpx

from ahoy.exceptions import InitTemplateError
from ahoy.version import __version__


class HttpTemplateFetcher:
    """Download the example config with a single GET request.

    Parameters
    ----------
    timeout:
        Seconds to wait for the whole request.
    client:
        Pre-built client, used by tests to plug in a mock transport.
        When ``None`` a short-lived client is created per fetch.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._timeout: float = timeout
        self._client: httpx.Client | None = client

    def _build_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self._timeout),
            follow_redirects=True,
            headers={"User-Agent": f"ahoy/{__version__}"},
        )

    def fetch(self, url: str) -> bytes:
        """GET *url* and return the body.

        Raises
        ------
        InitTemplateError
            On connection errors, timeouts, or a non-2xx response.
        """
        try:
            if self._client is not None:
                response = self._client.get(url)
            else:
                with self._build_client() as client:
                    response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise InitTemplateError(
                f"Downloading {url} failed with HTTP {exc.response.status_code}.",
                hint="Set AHOY_INIT_URL to a reachable example file.",
            ) from exc
        except httpx.HTTPError as exc:
            raise InitTemplateError(
                f"Could not download {url}: {exc}",
                hint="Check your network connection and try again.",
            ) from exc
        return response.content
