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
"""HTTP transport auto-configuration."""

from __future__ import annotations

from datetime import timedelta

import structlog

from pyflux.config.properties.http import HttpProperties
from pyflux.core.config import Config
from pyflux.http.adapters.httpx_adapter import HttpxTransportAdapter
from pyflux.http.adapters.memory import InMemoryTransport
from pyflux.http.ports.outbound import HttpTransportPort
from pyflux.http.sender import HttpSender

logger = structlog.get_logger("pyflux.http.auto_configuration")


def create_transport(config: Config) -> HttpTransportPort:
    """Build the transport selected by ``pyflux.http.transport``."""
    props = config.bind(HttpProperties)
    logger.info("http_transport_selected", transport=props.transport, timeout=props.timeout)

    if props.transport == "memory":
        return InMemoryTransport()

    timeout = timedelta(seconds=props.timeout) if props.timeout is not None else None
    return HttpxTransportAdapter(timeout=timeout, verify=props.verify_ssl)


def create_sender(config: Config) -> HttpSender:
    return HttpSender(create_transport(config))
