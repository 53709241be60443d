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
"""Outbound port: the transport that performs an HTTP exchange."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from pyflux.http.types import Header


@dataclass(frozen=True)
class TransportResult:
    """A completed exchange, whatever its status."""

    status_code: int
    status_message: str
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class HttpTransportPort(Protocol):
    """Abstract HTTP transport.

    ``exchange`` returns a :class:`TransportResult` for any completed
    exchange, including non-2xx ones, and raises
    :class:`~pyflux.kernel.exceptions.TransportException` when no HTTP
    status could be obtained.
    """

    async def exchange(
        self,
        verb: str,
        url: str,
        body: str,
        headers: Sequence[Header],
    ) -> TransportResult: ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...
