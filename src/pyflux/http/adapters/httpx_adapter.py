# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""httpx-based HTTP transport adapter."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta

import httpx
import structlog

from pyflux.http.ports.outbound import TransportResult
from pyflux.http.types import Header
from pyflux.kernel.exceptions import TransportException

logger = structlog.get_logger("pyflux.http.adapters.httpx")


class HttpxTransportAdapter:
    """Transport backed by httpx.AsyncClient.

    Redirects are not followed and no timeout applies unless *timeout* is
    given. Headers are sent as a list of pairs so repeated names survive.
    """

    def __init__(
        self,
        timeout: timedelta | None = None,
        verify: bool = True,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            timeout=timeout.total_seconds() if timeout is not None else None,
            verify=verify,
            follow_redirects=False,
        )

    async def exchange(
        self,
        verb: str,
        url: str,
        body: str,
        headers: Sequence[Header],
    ) -> TransportResult:
        try:
            response = await self._client.request(
                verb,
                url,
                content=body.encode("utf-8") if body else None,
                headers=list(headers),
                follow_redirects=False,
            )
        except httpx.HTTPError as exc:
            logger.debug("transport_error", verb=verb, url=url, error=repr(exc))
            raise TransportException(0, str(exc) or type(exc).__name__, code="TRANSPORT_ERROR") from exc

        return TransportResult(
            status_code=response.status_code,
            status_message=response.reason_phrase,
            body=response.text,
        )

    async def start(self) -> None:
        """No-op -- httpx client is ready after construction."""

    async def stop(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
