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
"""PyFlux Kernel: foundation layer with zero external dependencies."""

from pyflux.kernel.exceptions import (
    ConfigurationException,
    InfrastructureException,
    PyFluxException,
    TransportException,
)
from pyflux.kernel.lifecycle import Lifecycle
from pyflux.kernel.types import Option, Some, is_some, unwrap_or

__all__ = [
    # Lifecycle
    "Lifecycle",
    # Types
    "Option",
    "Some",
    "is_some",
    "unwrap_or",
    # Exceptions
    "PyFluxException",
    "InfrastructureException",
    "TransportException",
    "ConfigurationException",
]
