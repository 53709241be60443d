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
"""Send pipeline: a stream of requests in, a stream of typed responses out.

Each request occurrence starts exactly one transport exchange as an asyncio
task and returns immediately. When the task finishes, a done-callback
classifies the outcome and emits exactly one response occurrence. Responses
are emitted in completion order, which need not match submission order.
Nothing is retried, batched, deduplicated or cancelled, and no exchange
outcome is ever raised out of the pipeline.
"""

from __future__ import annotations

import asyncio
from typing import Any, TypeVar

import structlog

from pyflux.http.ports.outbound import HttpTransportPort, TransportResult
from pyflux.http.types import (
    Failure,
    Http,
    HttpResponse,
    NoConversion,
    Request,
    Success,
    describe_failure,
)
from pyflux.kernel.exceptions import TransportException
from pyflux.kernel.types import Some
from pyflux.stream.stream import Stream

T = TypeVar("T")

logger = structlog.get_logger("pyflux.http.sender")


def classify(request: Request[T], result: TransportResult) -> HttpResponse[T]:
    """Map a completed exchange to its response value."""
    if not result.ok:
        return Failure(Http(result.status_code, result.status_message))
    parsed = request.parse(result.body)
    if isinstance(parsed, Some):
        return Success(parsed.value)
    return Failure(NoConversion(result.body))


def classify_error(exc: BaseException) -> HttpResponse[Any]:
    """Map an exchange that raised to its response value."""
    if isinstance(exc, TransportException):
        return Failure(Http(exc.status_code, exc.message))
    return Failure(Http(0, str(exc) or type(exc).__name__))


class HttpSender:
    """Dispatches request streams through an :class:`HttpTransportPort`.

    Must be driven from inside a running event loop: occurrences arriving on
    a request stream schedule their exchanges on that loop.
    """

    def __init__(self, transport: HttpTransportPort) -> None:
        self._transport = transport
        self._in_flight: set[asyncio.Task[TransportResult]] = set()
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def transport(self) -> HttpTransportPort:
        return self._transport

    @property
    def in_flight(self) -> int:
        """Number of exchanges started but not yet emitted."""
        return len(self._in_flight)

    def send(self, requests: Stream[Request[T]]) -> Stream[HttpResponse[T]]:
        """Return the stream of responses, one per request occurrence."""
        responses: Stream[HttpResponse[T]] = Stream()
        requests.subscribe(lambda request: self.dispatch(request, responses))
        return responses

    def dispatch(self, request: Request[T], responses: Stream[HttpResponse[T]]) -> None:
        """Start one exchange whose outcome will be emitted on *responses*."""
        loop = asyncio.get_running_loop()
        logger.debug("http_dispatch", verb=request.verb, url=request.url)
        task = loop.create_task(
            self._transport.exchange(request.verb, request.url, request.body, request.headers)
        )
        self._in_flight.add(task)
        self._idle.clear()
        task.add_done_callback(lambda done: self._complete(request, done, responses))

    def _complete(
        self,
        request: Request[T],
        task: asyncio.Task[TransportResult],
        responses: Stream[HttpResponse[T]],
    ) -> None:
        try:
            response = self._outcome(request, task)
            if isinstance(response, Failure):
                logger.warning(
                    "http_failure", verb=request.verb, url=request.url, **describe_failure(response.error)
                )
            else:
                logger.debug("http_success", verb=request.verb, url=request.url)
            responses.emit(response)
        finally:
            self._in_flight.discard(task)
            if not self._in_flight:
                self._idle.set()

    @staticmethod
    def _outcome(request: Request[T], task: asyncio.Task[TransportResult]) -> HttpResponse[T]:
        if task.cancelled():
            return Failure(Http(0, "Exchange cancelled"))
        exc = task.exception()
        if exc is not None:
            if not isinstance(exc, TransportException):
                logger.error("transport_raised", verb=request.verb, url=request.url, error=repr(exc))
            return classify_error(exc)
        return classify(request, task.result())

    async def drain(self) -> None:
        """Wait until every started exchange has emitted its response."""
        await self._idle.wait()

    async def start(self) -> None:
        await self._transport.start()

    async def stop(self) -> None:
        """Wait for outstanding exchanges, then stop the transport."""
        await self.drain()
        await self._transport.stop()


def send(requests: Stream[Request[T]], transport: HttpTransportPort) -> Stream[HttpResponse[T]]:
    """Shorthand for ``HttpSender(transport).send(requests)``."""
    return HttpSender(transport).send(requests)
