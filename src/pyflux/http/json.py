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
"""JSON codec used by the JSON request builders."""

from __future__ import annotations

import json
from typing import Any

from pyflux.kernel.types import Option, Some

JsonValue = Any


def encode(value: JsonValue) -> str:
    """Serialize *value* to compact JSON text."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def decode(text: str) -> Option[JsonValue]:
    """Parse JSON text; ``None`` when *text* is not valid JSON.

    A literal ``null`` document decodes to ``Some(None)``.
    """
    try:
        return Some(json.loads(text))
    except (ValueError, RecursionError):
        return None
