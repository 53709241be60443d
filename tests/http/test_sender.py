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
"""Tests for the send pipeline."""

import asyncio

import pytest

from pyflux.http.adapters.memory import InMemoryTransport
from pyflux.http.builders import get, get_json, post, post_json
from pyflux.http.ports.outbound import TransportResult
from pyflux.http.sender import HttpSender, classify, classify_error, send
from pyflux.http.types import WAITING, Failure, Http, NoConversion, Success
from pyflux.kernel.exceptions import TransportException
from pyflux.kernel.lifecycle import Lifecycle
from pyflux.stream import Stream, StreamRecorder


class ExplodingTransport:
    """Transport whose exchange raises something other than TransportException."""

    async def exchange(self, verb, url, body, headers):
        raise RuntimeError("socket exploded")

    async def start(self) -> None:
        pass

    async def stop(self) -> None:
        pass


class TestClassify:
    def test_success(self):
        assert classify(get("http://x"), TransportResult(200, "OK", "hi")) == Success("hi")

    def test_any_2xx_is_success(self):
        assert classify(post("http://x", ""), TransportResult(204, "No Content", "")) == Success(None)

    def test_non_2xx_is_http_failure(self):
        result = TransportResult(404, "Not Found", "missing")
        assert classify(get("http://x"), result) == Failure(Http(404, "Not Found"))

    def test_redirect_status_is_failure(self):
        result = TransportResult(302, "Found", "")
        assert classify(get("http://x"), result) == Failure(Http(302, "Found"))

    def test_unparseable_body(self):
        result = TransportResult(200, "OK", "not-json")
        assert classify(get_json("http://x"), result) == Failure(NoConversion("not-json"))

    def test_classify_error(self):
        assert classify_error(TransportException(0, "Network error")) == Failure(Http(0, "Network error"))
        assert classify_error(ValueError("bad")) == Failure(Http(0, "bad"))


class TestHttpSender:
    @pytest.mark.asyncio
    async def test_get_ok(self):
        transport = InMemoryTransport()
        transport.respond("GET", "http://x/ok", 200, "hi")
        sender = HttpSender(transport)
        requests: Stream = Stream()
        recorder = StreamRecorder(sender.send(requests))

        requests.emit(get("http://x/ok"))
        await sender.drain()

        assert recorder.values == [Success("hi")]

    @pytest.mark.asyncio
    async def test_get_json_bad_body(self):
        transport = InMemoryTransport()
        transport.respond("GET", "http://x/bad", 200, "not-json")
        sender = HttpSender(transport)
        requests: Stream = Stream()
        recorder = StreamRecorder(sender.send(requests))

        requests.emit(get_json("http://x/bad"))
        await sender.drain()

        assert recorder.values == [Failure(NoConversion("not-json"))]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "request_",
        [get("http://x/missing"), get_json("http://x/missing"), post("http://x/missing", "b")],
    )
    async def test_not_found(self, request_):
        transport = InMemoryTransport()
        transport.respond(request_.verb, "http://x/missing", 404, "", status_message="Not Found")
        sender = HttpSender(transport)
        requests: Stream = Stream()
        recorder = StreamRecorder(sender.send(requests))

        requests.emit(request_)
        await sender.drain()

        assert recorder.values == [Failure(Http(404, "Not Found"))]

    @pytest.mark.asyncio
    async def test_transport_error_becomes_failure_value(self):
        transport = InMemoryTransport()
        transport.fail("GET", "http://x/down", 0, "Connection refused")
        sender = HttpSender(transport)
        requests: Stream = Stream()
        recorder = StreamRecorder(sender.send(requests))

        requests.emit(get("http://x/down"))
        await sender.drain()

        assert recorder.values == [Failure(Http(0, "Connection refused"))]

    @pytest.mark.asyncio
    async def test_unexpected_transport_exception_is_not_raised(self):
        sender = HttpSender(ExplodingTransport())
        requests: Stream = Stream()
        recorder = StreamRecorder(sender.send(requests))

        requests.emit(get("http://x"))
        await sender.drain()

        assert recorder.values == [Failure(Http(0, "socket exploded"))]

    @pytest.mark.asyncio
    async def test_request_fields_reach_transport(self):
        transport = InMemoryTransport()
        sender = HttpSender(transport)
        requests: Stream = Stream()
        sender.send(requests)

        requests.emit(post_json("http://x/items", {"id": 1}))
        await sender.drain()

        [call] = transport.calls
        assert call.verb == "POST"
        assert call.url == "http://x/items"
        assert call.body == '{"id":1}'
        assert call.headers == (("Content-Type", "application/json"),)

    @pytest.mark.asyncio
    async def test_dispatch_does_not_block_and_never_emits_waiting(self):
        transport = InMemoryTransport()
        release = transport.respond("GET", "http://x/slow", 200, "done", hold=True)
        sender = HttpSender(transport)
        requests: Stream = Stream()
        recorder = StreamRecorder(sender.send(requests))

        requests.emit(get("http://x/slow"))
        assert sender.in_flight == 1
        assert recorder.values == []

        release.set()
        await sender.drain()

        assert recorder.values == [Success("done")]
        assert WAITING not in recorder.values
        assert sender.in_flight == 0

    @pytest.mark.asyncio
    async def test_completion_order_may_differ_from_submission_order(self):
        transport = InMemoryTransport()
        release_a = transport.respond("GET", "http://x/a", 200, "A", hold=True)
        release_b = transport.respond("GET", "http://x/b", 200, "B", hold=True)
        sender = HttpSender(transport)
        requests: Stream = Stream()
        recorder = StreamRecorder(sender.send(requests))

        requests.emit(get("http://x/a"))
        requests.emit(get("http://x/b"))
        await asyncio.sleep(0)

        release_b.set()
        while not recorder.values:
            await asyncio.sleep(0)
        release_a.set()
        await sender.drain()

        assert recorder.values == [Success("B"), Success("A")]

    @pytest.mark.asyncio
    async def test_one_response_per_request_without_dedup(self):
        transport = InMemoryTransport()
        transport.respond("GET", "http://x/same", 200, "v")
        sender = HttpSender(transport)
        requests: Stream = Stream()
        recorder = StreamRecorder(sender.send(requests))

        for _ in range(3):
            requests.emit(get("http://x/same"))
        await sender.drain()

        assert recorder.values == [Success("v")] * 3
        assert len(transport.calls) == 3

    @pytest.mark.asyncio
    async def test_waiting_seeds_caller_state(self):
        transport = InMemoryTransport()
        transport.respond("GET", "http://x/ok", 200, "hi")
        sender = HttpSender(transport)
        requests: Stream = Stream()
        state = sender.send(requests).hold(WAITING)

        assert state.value == WAITING
        requests.emit(get("http://x/ok"))
        await sender.drain()
        assert state.value == Success("hi")

    @pytest.mark.asyncio
    async def test_drain_with_nothing_in_flight(self):
        sender = HttpSender(InMemoryTransport())
        await asyncio.wait_for(sender.drain(), timeout=1)


class TestSenderLifecycle:
    def test_implements_lifecycle(self):
        assert isinstance(HttpSender(InMemoryTransport()), Lifecycle)

    @pytest.mark.asyncio
    async def test_stop_waits_for_in_flight(self):
        transport = InMemoryTransport()
        release = transport.respond("GET", "http://x/slow", 200, "late", hold=True)
        sender = HttpSender(transport)
        await sender.start()
        requests: Stream = Stream()
        recorder = StreamRecorder(sender.send(requests))

        requests.emit(get("http://x/slow"))
        stopping = asyncio.create_task(sender.stop())
        await asyncio.sleep(0)
        assert not stopping.done()

        release.set()
        await stopping
        assert recorder.values == [Success("late")]


class TestSendFunction:
    @pytest.mark.asyncio
    async def test_module_level_send(self):
        transport = InMemoryTransport()
        transport.respond("GET", "http://x/ok", 200, "hi")
        requests: Stream = Stream()
        recorder = StreamRecorder(send(requests, transport))

        requests.emit(get("http://x/ok"))
        while not recorder.values:
            await asyncio.sleep(0)

        assert recorder.values == [Success("hi")]
