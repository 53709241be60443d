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
"""Tests for StructlogAdapter: default LoggingPort implementation."""

import logging

from pyflux.core.config import Config
from pyflux.logging.port import LoggingPort
from pyflux.logging.structlog_adapter import StructlogAdapter


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyflux": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyflux": {"logging": {"format": "JSON"}}}))
        assert adapter._format == "json"

    def test_configure_applies_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"pyflux": {"logging": {"level": {"root": "INFO", "pyflux.http.sender": "DEBUG"}}}})
        adapter.configure(config)
        assert adapter._module_levels == {"pyflux.http.sender": "DEBUG"}
        assert logging.getLogger("pyflux.http.sender").level == logging.DEBUG


class TestStructlogAdapterGetLogger:
    def test_get_logger_returns_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("pyflux.test")
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "warning", None))

    def test_set_level(self):
        adapter = StructlogAdapter()
        adapter.set_level("pyflux.custom", "warning")
        assert logging.getLogger("pyflux.custom").level == logging.WARNING
