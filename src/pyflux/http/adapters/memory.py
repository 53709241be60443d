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
"""In-memory transport for tests and offline wiring."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

from pyflux.http.ports.outbound import TransportResult
from pyflux.http.types import Header
from pyflux.kernel.exceptions import TransportException


@dataclass(frozen=True)
class RecordedCall:
    verb: str
    url: str
    body: str
    headers: tuple[Header, ...]


@dataclass
class _Route:
    result: TransportResult | None = None
    error: TransportException | None = None
    gate: asyncio.Event | None = None


class InMemoryTransport:
    """Scripted transport keyed by ``(verb, url)``.

    Unrouted requests complete with ``404 Not Found``. A route can be held
    on an :class:`asyncio.Event` so a test decides when it completes:

        release = transport.respond("GET", "http://x/a", 200, "a", hold=True)
        ...
        release.set()
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], _Route] = {}
        self.calls: list[RecordedCall] = []

    def respond(
        self,
        verb: str,
        url: str,
        status_code: int = 200,
        body: str = "",
        status_message: str = "OK",
        hold: bool = False,
    ) -> asyncio.Event | None:
        """Script a completed exchange. Returns the release event when *hold*."""
        route = _Route(result=TransportResult(status_code, status_message, body))
        return self._add(verb, url, route, hold)

    def fail(
        self,
        verb: str,
        url: str,
        status_code: int = 0,
        message: str = "Network error",
        hold: bool = False,
    ) -> asyncio.Event | None:
        """Script a transport-level error."""
        route = _Route(error=TransportException(status_code, message, code="TRANSPORT_ERROR"))
        return self._add(verb, url, route, hold)

    def _add(self, verb: str, url: str, route: _Route, hold: bool) -> asyncio.Event | None:
        if hold:
            route.gate = asyncio.Event()
        self._routes[(verb.upper(), url)] = route
        return route.gate

    async def exchange(
        self,
        verb: str,
        url: str,
        body: str,
        headers: Sequence[Header],
    ) -> TransportResult:
        self.calls.append(RecordedCall(verb, url, body, tuple(headers)))
        route = self._routes.get((verb.upper(), url))
        if route is None:
            return TransportResult(404, "Not Found", "")
        if route.gate is not None:
            await route.gate.wait()
        if route.error is not None:
            raise route.error
        assert route.result is not None
        return route.result

    async def start(self) -> None:
        """No-op for in-memory transport."""

    async def stop(self) -> None:
        """No-op for in-memory transport."""
