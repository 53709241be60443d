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
"""PyFlux HTTP: typed requests dispatched as streams of responses."""

from pyflux.http.builders import delete, get, get_json, post, post_json, put, put_json, request
from pyflux.http.ports.outbound import HttpTransportPort, TransportResult
from pyflux.http.projections import failure_of, failures, success_of, successes
from pyflux.http.sender import HttpSender, classify, classify_error, send
from pyflux.http.types import (
    WAITING,
    Failure,
    Http,
    HttpFailure,
    HttpResponse,
    NoConversion,
    Request,
    Response,
    Success,
    Waiting,
    fold_response,
)

__all__ = [
    # Model
    "Request",
    "Http",
    "NoConversion",
    "HttpFailure",
    "Waiting",
    "Success",
    "Failure",
    "WAITING",
    "Response",
    "HttpResponse",
    "fold_response",
    # Builders
    "request",
    "get",
    "get_json",
    "post",
    "post_json",
    "put",
    "put_json",
    "delete",
    # Pipeline
    "HttpSender",
    "HttpTransportPort",
    "TransportResult",
    "classify",
    "classify_error",
    "send",
    # Projections
    "successes",
    "failures",
    "success_of",
    "failure_of",
]
