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
"""Streams and signals: the dataflow graph HTTP responses travel through.

A :class:`Stream` is an event channel. ``emit()`` pushes one occurrence to
every listener synchronously, in subscription order, before returning.
Derived streams (``map``, ``filter``, ``fold``) subscribe to their source at
creation time, so an occurrence propagates depth-first through the graph in
the order the graph was built. There is no scheduler: asynchronous work
re-enters the graph by calling ``emit()`` from an event loop callback.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Listener = Callable[[T], None]


class Subscription:
    """Handle returned by :meth:`Stream.subscribe`."""

    __slots__ = ("_stream", "_listener")

    def __init__(self, stream: Stream, listener: Listener) -> None:
        self._stream: Stream | None = stream
        self._listener = listener

    @property
    def active(self) -> bool:
        return self._stream is not None

    def cancel(self) -> None:
        """Detach the listener. Cancelling twice is a no-op."""
        if self._stream is not None:
            self._stream._detach(self._listener)
            self._stream = None


class Stream(Generic[T]):
    """A push-based stream of occurrences."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._listeners: list[Listener[T]] = []

    def __repr__(self) -> str:
        return f"Stream(name={self.name!r}, listeners={len(self._listeners)})"

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener[T]) -> Subscription:
        """Register *listener* to receive every later occurrence."""
        self._listeners.append(listener)
        return Subscription(self, listener)

    def _detach(self, listener: Listener[T]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, value: T) -> None:
        """Deliver *value* to all current listeners.

        Listeners added while an occurrence is being delivered only see the
        next one. An exception raised by a listener propagates to the caller.
        """
        for listener in list(self._listeners):
            listener(value)

    def map(self, fn: Callable[[T], U]) -> Stream[U]:
        """One output occurrence per input occurrence, transformed by *fn*."""
        out: Stream[U] = Stream()
        self.subscribe(lambda value: out.emit(fn(value)))
        return out

    def filter(self, predicate: Callable[[T], bool]) -> Stream[T]:
        out: Stream[T] = Stream()

        def forward(value: T) -> None:
            if predicate(value):
                out.emit(value)

        self.subscribe(forward)
        return out

    def fold(self, initial: U, fn: Callable[[U, T], U]) -> Signal[U]:
        """Accumulate occurrences into a :class:`Signal` starting at *initial*."""
        signal: Signal[U] = Signal(initial)
        self.subscribe(lambda value: signal._update(fn(signal.value, value)))
        return signal

    def hold(self, initial: T) -> Signal[T]:
        """A signal holding the latest occurrence, *initial* until the first."""
        return self.fold(initial, lambda _, value: value)

    @staticmethod
    def merge(*streams: Stream[T]) -> Stream[T]:
        """Interleave occurrences from several streams as they are emitted."""
        out: Stream[T] = Stream()
        for stream in streams:
            stream.subscribe(out.emit)
        return out


class Signal(Generic[T]):
    """A time-varying value with a stream of its updates."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self.changes: Stream[T] = Stream()

    def __repr__(self) -> str:
        return f"Signal({self._value!r})"

    @property
    def value(self) -> T:
        return self._value

    def sample(self) -> T:
        return self._value

    def _update(self, value: T) -> None:
        self._value = value
        self.changes.emit(value)
