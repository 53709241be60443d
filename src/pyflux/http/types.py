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
"""HTTP request and response data model.

A :class:`Request` describes one HTTP call together with the function that
interprets its body. Every exchange ends in exactly one :class:`Response`
value: ``Success`` with the parsed body, or ``Failure`` carrying an
:data:`HttpFailure`. ``Waiting`` is never produced by the send pipeline; it
is there for callers seeding derived state before the first response.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from pyflux.kernel.types import Option

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")

Header = tuple[str, str]
Parser = Callable[[str], Option[T]]


def _freeze_headers(headers: Iterable[Header]) -> tuple[Header, ...]:
    return tuple((str(name), str(value)) for name, value in headers)


@dataclass(frozen=True)
class Request(Generic[T]):
    """One HTTP call and the way its response body is interpreted.

    ``parse`` must be pure and total: it never raises and returns either
    ``Some(value)`` or ``None`` for any body. ``headers`` keeps insertion
    order and may repeat names; it reaches the transport unchanged.
    """

    verb: str
    url: str
    body: str
    parse: Parser[T] = field(compare=False)
    headers: tuple[Header, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze_headers(self.headers))


# --- failure taxonomy -------------------------------------------------------


@dataclass(frozen=True)
class Http:
    """The exchange failed at the HTTP or transport layer."""

    status_code: int
    status_message: str


@dataclass(frozen=True)
class NoConversion:
    """The exchange succeeded but ``parse`` rejected the body."""

    raw_body: str


HttpFailure = Union[Http, NoConversion]


# --- response variant -------------------------------------------------------


@dataclass(frozen=True)
class Waiting:
    """Outcome not yet known."""

    def is_waiting(self) -> bool:
        return True

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Success(Generic[A]):
    value: A

    def is_waiting(self) -> bool:
        return False

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure(Generic[B]):
    error: B

    def is_waiting(self) -> bool:
        return False

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


WAITING = Waiting()

Response = Union[Waiting, Success[A], Failure[B]]
HttpResponse = Union[Waiting, Success[T], Failure[HttpFailure]]


def fold_response(
    response: Response[A, B],
    on_waiting: Callable[[], R],
    on_success: Callable[[A], R],
    on_failure: Callable[[B], R],
) -> R:
    """Exhaustive case analysis over the three response arms."""
    if isinstance(response, Success):
        return on_success(response.value)
    if isinstance(response, Failure):
        return on_failure(response.error)
    if isinstance(response, Waiting):
        return on_waiting()
    raise TypeError(f"Not a Response: {response!r}")


def describe_failure(failure: HttpFailure) -> dict[str, Any]:
    """Flatten a failure into log-friendly key/value pairs."""
    if isinstance(failure, Http):
        return {"kind": "http", "status": failure.status_code, "message": failure.status_message}
    if isinstance(failure, NoConversion):
        return {"kind": "no_conversion", "body_length": len(failure.raw_body)}
    raise TypeError(f"Not an HttpFailure: {failure!r}")
