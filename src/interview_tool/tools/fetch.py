"""URL fetch tool — HTTP GET returning the response body as text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from interview_tool.core.errors import INVALID_REQUEST, UpstreamError
from interview_tool.tools.base import require_str

if TYPE_CHECKING:
    from interview_tool.config.schema import FetchConfig


class FetchUrlTool:
    """Fetch a URL with ``httpx``.

    Implements the :class:`Tool` protocol.  The body is returned whatever
    the HTTP status; only transport failures and undecodable bodies are
    errors.
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        from interview_tool.config.schema import FetchConfig as FConfig

        self._config = config or FConfig()
        self._transport = transport

    @property
    def name(self) -> str:
        return "get_url"

    @property
    def description(self) -> str:
        return "Fetch a URL with an HTTP GET request and return the response body."

    @property
    def parameters_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "description": "The URL to fetch.",
                },
            },
            "required": ["url"],
        }

    async def execute(self, **kwargs: Any) -> str:
        url = require_str(kwargs, "url")

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout,
                follow_redirects=self._config.follow_redirects,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            msg = f"Failed to get url {url}, error: {exc}"
            raise UpstreamError(msg, code=INVALID_REQUEST) from exc

        try:
            return response.content.decode(response.encoding or "utf-8")
        except (UnicodeDecodeError, LookupError) as exc:
            msg = f"The response from {url} is not text"
            raise UpstreamError(msg, code=INVALID_REQUEST) from exc
