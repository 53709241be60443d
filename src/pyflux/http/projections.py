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
"""Per-occurrence views over a response stream."""

from __future__ import annotations

from typing import TypeVar

from pyflux.http.types import Failure, Response, Success
from pyflux.kernel.types import Option, Some
from pyflux.stream.stream import Stream

A = TypeVar("A")
B = TypeVar("B")


def success_of(response: Response[A, B]) -> Option[A]:
    if isinstance(response, Success):
        return Some(response.value)
    return None


def failure_of(response: Response[A, B]) -> Option[B]:
    if isinstance(response, Failure):
        return Some(response.error)
    return None


def successes(responses: Stream[Response[A, B]]) -> Stream[Option[A]]:
    """``Some(a)`` for every ``Success(a)``, ``None`` for anything else.

    Stateless: a ``Waiting`` after a ``Success`` yields ``None`` again.
    """
    return responses.map(success_of)


def failures(responses: Stream[Response[A, B]]) -> Stream[Option[B]]:
    """``Some(b)`` for every ``Failure(b)``, ``None`` for anything else."""
    return responses.map(failure_of)
