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
"""HTTP subsystem configuration properties."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from pyflux.core.config import config_properties


@config_properties(prefix="pyflux.http")
class HttpProperties(BaseModel):
    """Configuration for the HTTP transport (pyflux.http.*).

    ``timeout`` is unset by default: no deadline is imposed on an exchange
    unless one is configured explicitly.
    """

    transport: Literal["httpx", "memory"] = "httpx"
    timeout: float | None = Field(default=None, gt=0)
    verify_ssl: bool = True
