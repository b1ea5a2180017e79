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

"""Tests for releasegate.bump."""

from __future__ import annotations

import itertools

import pytest
from releasegate.bump import CommitSummary, bump_for, resolve, summarize
from releasegate.commit_parsing import BumpType, classify
from releasegate.versions import apply_bump


def _commits(*messages: str) -> list:
    return [classify(m, commit_id=f'sha{i}') for i, m in enumerate(messages)]


# ── Per-commit bump ─────────────────────────────────────────────────────


class TestBumpFor:
    """Tests for bump_for()."""

    @pytest.mark.parametrize('type_', ['feat', 'feature', 'Feat'])
    def test_minor_types(self, type_: str) -> None:
        """Feature types ask for a minor bump."""
        assert bump_for(classify(f'{type_}: x')) is BumpType.MINOR

    @pytest.mark.parametrize(
        'type_',
        ['fix', 'bugfix', 'chore', 'docs', 'style', 'refactor', 'perf', 'test', 'build', 'ci'],
    )
    def test_patch_types(self, type_: str) -> None:
        """Maintenance types ask for a patch bump."""
        assert bump_for(classify(f'{type_}: x')) is BumpType.PATCH

    @pytest.mark.parametrize('message', ['revert: x', 'wip: x', 'Update README'])
    def test_none(self, message: str) -> None:
        """Unknown types and unclassified commits ask for nothing."""
        assert bump_for(classify(message)) is BumpType.NONE

    def test_breaking_overrides_type(self) -> None:
        """Any breaking commit asks for a major bump."""
        assert bump_for(classify('chore!: drop node 16')) is BumpType.MAJOR
        assert bump_for(classify('docs: x\n\nBREAKING CHANGE: y')) is BumpType.MAJOR

    def test_breaking_unclassified(self) -> None:
        """A breaking marker on an unclassified subject still asks for major."""
        assert bump_for(classify('Rewrite\n\nBREAKING CHANGE: everything')) is BumpType.MAJOR


# ── Batch resolution ────────────────────────────────────────────────────


class TestResolve:
    """Tests for resolve()."""

    def test_empty_is_none(self) -> None:
        """An empty batch never bumps."""
        assert resolve([]) is BumpType.NONE

    def test_only_unrecognized_is_none(self) -> None:
        """Commits without a recognized type resolve to none."""
        assert resolve(_commits('Update README', 'wip: stuff')) is BumpType.NONE

    def test_fix_and_feat_is_minor(self) -> None:
        """fix + feat resolves to minor and 1.0.0 becomes 1.1.0."""
        bump = resolve(_commits('fix: a', 'feat: b'))
        assert bump is BumpType.MINOR
        assert str(apply_bump('1.0.0', bump)) == '1.1.0'

    def test_breaking_footer_is_major(self) -> None:
        """A breaking footer resolves to major and 1.1.0 becomes 2.0.0."""
        bump = resolve(_commits('feat!: break\n\nBREAKING CHANGE: x'))
        assert bump is BumpType.MAJOR
        assert str(apply_bump('1.1.0', bump)) == '2.0.0'

    def test_accepts_generator(self) -> None:
        """Any iterable of commits is accepted."""
        assert resolve(c for c in _commits('fix: a')) is BumpType.PATCH

    def test_commutative(self) -> None:
        """Reordering commits never changes the result."""
        commits = _commits('docs: a', 'feat(ui): b', 'fix: c', 'Merge pull request #1')
        expected = resolve(commits)
        for perm in itertools.permutations(commits):
            assert resolve(perm) is expected

    def test_idempotent(self) -> None:
        """Repeating the same commits never changes the result."""
        for messages in [('fix: a',), ('fix: a', 'feat: b'), ('chore: x', 'feat!: y'), ('Update',)]:
            commits = _commits(*messages)
            assert resolve(commits + commits) is resolve(commits)


# ── Summary ─────────────────────────────────────────────────────────────


class TestSummarize:
    """Tests for summarize()."""

    def test_counts(self) -> None:
        """Each category is counted independently."""
        summary = summarize(
            _commits(
                'feat: a',
                'feature(ui): b',
                'fix: c',
                'bugfix: d',
                'chore: e',
                'Update README',
                'feat!: f',
            )
        )
        assert summary == CommitSummary(total=7, breaking=1, features=3, fixes=2, other=1)

    def test_breaking_feature_counts_as_feature(self) -> None:
        """A breaking feat counts as both breaking and feature."""
        summary = summarize(_commits('feat: x\n\nBREAKING CHANGE: y'))
        assert summary.breaking == 1
        assert summary.features == 1

    def test_empty(self) -> None:
        """An empty batch has all-zero counts."""
        assert summarize([]) == CommitSummary()
