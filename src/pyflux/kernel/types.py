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
"""Optional values that distinguish "absent" from a present None."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Some(Generic[T]):
    """A present value. Some(None) is present and carries the unit value."""

    value: T


# The absent marker is plain None.
Option = Union[Some[T], None]


def is_some(option: Option[T]) -> bool:
    """True when *option* holds a value."""
    return isinstance(option, Some)


def unwrap_or(option: Option[T], default: T) -> T:
    """Return the held value, or *default* when absent."""
    if isinstance(option, Some):
        return option.value
    return default
