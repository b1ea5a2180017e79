# Copyright 2026 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

"""Shared leaf-level types used across releasegate.

This module must have **zero** imports from other ``releasegate``
subpackages to avoid circular-import chains.  It is safe to import
from any module in the project.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    'CommitRecord',
]


@dataclass(frozen=True)
class CommitRecord:
    """One raw commit as handed over by the history reader.

    Attributes:
        id: Opaque commit identifier (usually the full SHA).
        raw_message: The complete commit message, subject and body.
    """

    id: str
    raw_message: str

