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

"""Pydantic models for the JSON reports handed to CI jobs.

Field names serialize in camelCase (``currentVersion``, ``nextVersion``)
so downstream workflow steps can read them with ``jq`` or
``fromJSON()``; Python code may use either spelling.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    'ChangelogReport',
    'ChangelogStats',
    'CommitAnalysis',
    'CommitStats',
    'VersionAnalysisReport',
]


class _Report(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_json(self) -> str:
        """Serialize with camelCase keys, indented for log readability."""
        return self.model_dump_json(by_alias=True, indent=2)


class CommitStats(_Report):
    """Commit counts for one release."""

    total: int = Field(default=0, ge=0, description='Number of commits analyzed.')
    breaking: int = Field(default=0, ge=0, description='Commits flagged as breaking changes.')
    features: int = Field(default=0, ge=0, description='feat/feature commits.')
    fixes: int = Field(default=0, ge=0, description='fix/bugfix commits.')
    other: int = Field(default=0, ge=0, description='Commits not following Conventional Commits.')


class CommitAnalysis(_Report):
    """One analyzed commit."""

    sha: str = Field(default='', description='Commit identifier.')
    type: str | None = Field(default=None, description='Lower-cased commit type, null when unclassified.')
    scope: str | None = Field(default=None, description='Commit scope.')
    breaking: bool = Field(default=False, description='Whether the commit is a breaking change.')
    description: str = Field(default='', description='Subject text after the type prefix.')
    bump: str = Field(default='none', description='Bump this commit asks for.')


class VersionAnalysisReport(_Report):
    """Result of computing the next version from commit history."""

    current_version: str = Field(description='Version found in the project manifest.')
    next_version: str = Field(description='Computed next version; equals currentVersion when nothing is released.')
    bump: str | None = Field(default=None, description='Applied bump, null when nothing is released.')
    tag: str | None = Field(default=None, description='Tag name for the release, null when nothing is released.')
    commits: list[CommitAnalysis] = Field(default_factory=list)
    summary: CommitStats = Field(default_factory=CommitStats)


class ChangelogStats(_Report):
    """Commit counts for one changelog section.

    Unlike :class:`CommitStats` the categories partition the commits:
    a breaking commit counts only as breaking, and ``other`` holds
    everything that is neither breaking, a feature nor a fix.
    """

    total_commits: int = Field(default=0, ge=0, description='Number of commits in the section range.')
    breaking: int = Field(default=0, ge=0, description='Breaking commits, whatever their type.')
    features: int = Field(default=0, ge=0, description='Non-breaking feat/feature commits.')
    fixes: int = Field(default=0, ge=0, description='Non-breaking fix/bugfix commits.')
    other: int = Field(default=0, ge=0, description='All remaining commits.')


class ChangelogReport(_Report):
    """Result of synthesizing and merging a changelog section."""

    success: bool = True
    version: str = Field(description='Version the section documents.')
    date: str = Field(description='Release date, YYYY-MM-DD.')
    changelog_path: str = Field(default='', description='Changelog file the caller wrote, if any.')
    stats: ChangelogStats = Field(default_factory=ChangelogStats)
