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
"""Tests for the in-memory transport."""

import asyncio

import pytest

from pyflux.http.adapters.memory import InMemoryTransport, RecordedCall
from pyflux.http.ports.outbound import HttpTransportPort, TransportResult
from pyflux.kernel.exceptions import TransportException


class TestInMemoryTransport:
    def test_implements_port(self):
        assert isinstance(InMemoryTransport(), HttpTransportPort)

    @pytest.mark.asyncio
    async def test_unrouted_is_not_found(self):
        result = await InMemoryTransport().exchange("GET", "http://x", "", [])
        assert result == TransportResult(404, "Not Found", "")

    @pytest.mark.asyncio
    async def test_scripted_response_and_call_log(self):
        transport = InMemoryTransport()
        transport.respond("get", "http://x", 200, "body")
        result = await transport.exchange("GET", "http://x", "q", [("A", "1")])
        assert result == TransportResult(200, "OK", "body")
        assert transport.calls == [RecordedCall("GET", "http://x", "q", (("A", "1"),))]

    @pytest.mark.asyncio
    async def test_scripted_failure(self):
        transport = InMemoryTransport()
        transport.fail("GET", "http://x", 0, "Timeout")
        with pytest.raises(TransportException, match="Timeout"):
            await transport.exchange("GET", "http://x", "", [])

    @pytest.mark.asyncio
    async def test_hold_until_released(self):
        transport = InMemoryTransport()
        release = transport.respond("GET", "http://x", 200, "later", hold=True)
        pending = asyncio.create_task(transport.exchange("GET", "http://x", "", []))
        await asyncio.sleep(0)
        assert not pending.done()
        release.set()
        assert (await pending).body == "later"
