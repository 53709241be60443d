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
"""Unified exception hierarchy for PyFlux.

HTTP outcomes never travel as exceptions: they are delivered as values on a
response stream. Exceptions are reserved for the layers around that contract.

Categories:
- InfrastructureException: transport and network failures raised by adapters
- ConfigurationException: invalid or unbindable configuration
"""

from __future__ import annotations


class PyFluxException(Exception):
    """Base exception for all PyFlux errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "TRANSPORT_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class InfrastructureException(PyFluxException):
    """Infrastructure failures: network, sockets, TLS."""


class TransportException(InfrastructureException):
    """Raised by a transport adapter when an exchange cannot complete.

    status_code is the code reported alongside the failure; adapters use
    0 when the failure happened before any HTTP status was received.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)
        self.status_code = status_code
        self.message = message


class ConfigurationException(PyFluxException):
    """Configuration could not be loaded, resolved, or bound."""
