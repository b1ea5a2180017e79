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

"""Reduce a batch of classified commits to one bump directive.

Key Concepts (ELI5)::

    ┌─────────────────────┬────────────────────────────────────────────────┐
    │ Concept             │ ELI5 Explanation                               │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Per-commit bump     │ Each commit "votes" for major, minor, patch   │
    │                     │ or none based on its type and breaking flag.  │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Batch bump          │ The loudest vote wins:                         │
    │                     │ major > minor > patch > none.                  │
    └─────────────────────┴────────────────────────────────────────────────┘

    Commit → BumpType mapping::

        breaking (``!`` or BREAKING CHANGE)             →  major
        feat:, feature:                                 →  minor
        fix:, bugfix:, chore:, docs:, style:,
        refactor:, perf:, test:, build:, ci:            →  patch
        anything else, or unclassified                  →  none

The reduction is commutative and idempotent, so commit order and
re-runs never change the result. An empty batch resolves to ``none``;
defaulting to a patch release is a caller policy (see
:func:`releasegate.release.effective_bump`), never done here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from releasegate.commit_parsing import BumpType, ClassifiedCommit, max_bump

__all__ = [
    'ADDED_TYPES',
    'CommitSummary',
    'FIXED_TYPES',
    'MINOR_TYPES',
    'PATCH_TYPES',
    'bump_for',
    'resolve',
    'summarize',
]

MINOR_TYPES: frozenset[str] = frozenset({'feat', 'feature'})
PATCH_TYPES: frozenset[str] = frozenset({
    'fix',
    'bugfix',
    'chore',
    'docs',
    'style',
    'refactor',
    'perf',
    'test',
    'build',
    'ci',
})

# Types counted as features / fixes in summaries and changelogs.
ADDED_TYPES: frozenset[str] = MINOR_TYPES
FIXED_TYPES: frozenset[str] = frozenset({'fix', 'bugfix'})


def bump_for(commit: ClassifiedCommit) -> BumpType:
    """Return the bump a single commit asks for."""
    if commit.breaking:
        return BumpType.MAJOR
    if commit.type in MINOR_TYPES:
        return BumpType.MINOR
    if commit.type in PATCH_TYPES:
        return BumpType.PATCH
    return BumpType.NONE


def resolve(commits: Iterable[ClassifiedCommit]) -> BumpType:
    """Reduce commits to the highest-precedence bump directive.

    Args:
        commits: Classified commits, in any order.

    Returns:
        The strongest :class:`BumpType`; ``NONE`` for an empty batch or
        a batch with no recognized commits.
    """
    result = BumpType.NONE
    for commit in commits:
        result = max_bump(result, bump_for(commit))
        if result is BumpType.MAJOR:
            break
    return result


@dataclass(frozen=True)
class CommitSummary:
    """Counts describing a batch of commits.

    Attributes:
        total: Number of commits.
        breaking: Commits flagged as breaking.
        features: Commits of type ``feat``/``feature``.
        fixes: Commits of type ``fix``/``bugfix``.
        other: Commits that did not follow the Conventional Commit grammar.
    """

    total: int = 0
    breaking: int = 0
    features: int = 0
    fixes: int = 0
    other: int = 0


def summarize(commits: Iterable[ClassifiedCommit]) -> CommitSummary:
    """Count breaking, feature, fix and unclassified commits.

    The categories overlap: a breaking ``feat`` counts both as breaking
    and as a feature.
    """
    total = breaking = features = fixes = other = 0
    for commit in commits:
        total += 1
        if commit.breaking:
            breaking += 1
        if commit.type in ADDED_TYPES:
            features += 1
        if commit.type in FIXED_TYPES:
            fixes += 1
        if commit.type is None:
            other += 1
    return CommitSummary(total=total, breaking=breaking, features=features, fixes=fixes, other=other)
