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
"""Convenience constructors for common HTTP requests."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from pyflux.http import json
from pyflux.http.json import JsonValue
from pyflux.http.types import Header, Parser, Request
from pyflux.kernel.types import Option, Some

T = TypeVar("T")

JSON_CONTENT_TYPE: Header = ("Content-Type", "application/json")


def _as_text(body: str) -> Option[str]:
    return Some(body)


def _as_unit(_body: str) -> Option[None]:
    return Some(None)


def request(
    verb: str,
    url: str,
    body: str,
    parse: Parser[T],
    headers: Iterable[Header] = (),
) -> Request[T]:
    """Assemble a request without any validation."""
    return Request(verb=verb, url=url, body=body, parse=parse, headers=tuple(headers))


def get(url: str) -> Request[str]:
    """GET *url*, succeeding with the raw response text."""
    return request("GET", url, "", _as_text)


def get_json(url: str) -> Request[JsonValue]:
    """GET *url*, succeeding with the decoded JSON document.

    A body that is not valid JSON fails with ``NoConversion``.
    """
    return request("GET", url, "", json.decode)


def post(url: str, body: str) -> Request[None]:
    """POST *body* to *url*. The response body is ignored."""
    return request("POST", url, body, _as_unit)


def post_json(url: str, value: JsonValue) -> Request[None]:
    """POST *value* as JSON to *url*. The response body is ignored."""
    return request("POST", url, json.encode(value), _as_unit, [JSON_CONTENT_TYPE])


def put(url: str, body: str) -> Request[None]:
    return request("PUT", url, body, _as_unit)


def put_json(url: str, value: JsonValue) -> Request[None]:
    return request("PUT", url, json.encode(value), _as_unit, [JSON_CONTENT_TYPE])


def delete(url: str) -> Request[None]:
    return request("DELETE", url, "", _as_unit)
