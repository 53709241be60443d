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
"""Tests for the Some/None optional type."""

from pyflux.kernel.types import Some, is_some, unwrap_or


class TestSome:
    def test_some_none_is_present(self):
        assert is_some(Some(None))

    def test_none_is_absent(self):
        assert not is_some(None)

    def test_equality_by_value(self):
        assert Some("a") == Some("a")
        assert Some("a") != Some("b")

    def test_unwrap_or(self):
        assert unwrap_or(Some(3), 0) == 3
        assert unwrap_or(None, 0) == 0
        assert unwrap_or(Some(None), 0) is None
