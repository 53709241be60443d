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
"""StreamRecorder: collects occurrences for assertions in tests."""

from __future__ import annotations

from typing import Generic, TypeVar

from pyflux.stream.stream import Stream

T = TypeVar("T")


class StreamRecorder(Generic[T]):
    """Subscribe to a stream and keep every occurrence in arrival order.

    Usage::

        recorder = StreamRecorder(responses)
        ...
        assert recorder.values == [Success("hi")]
    """

    def __init__(self, stream: Stream[T]) -> None:
        self.values: list[T] = []
        self._subscription = stream.subscribe(self.values.append)

    def __len__(self) -> int:
        return len(self.values)

    @property
    def last(self) -> T:
        if not self.values:
            raise IndexError("no occurrences recorded")
        return self.values[-1]

    def clear(self) -> None:
        self.values.clear()

    def stop(self) -> None:
        self._subscription.cancel()
