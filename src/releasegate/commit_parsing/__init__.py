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

r"""Commit message classification.

This subpackage turns raw commit messages into
:class:`ClassifiedCommit` records. The :class:`CommitClassifier`
protocol allows teams to plug in their own commit message format while
keeping the same bump and changelog machinery.

Usage::

    from releasegate.commit_parsing import classify, classify_records

    cc = classify('fix(api)!: drop v1 routes', commit_id='abc1234')
    assert cc.type == 'fix'
    assert cc.scope == 'api'
    assert cc.breaking is True

    commits = classify_records(records)  # list[CommitRecord]
"""

from __future__ import annotations

from collections.abc import Iterable

from releasegate._types import CommitRecord
from releasegate.commit_parsing._conventional import (
    BREAKING_MARKERS,
    SUBJECT_PATTERN,
    ConventionalCommitClassifier,
    has_breaking_marker,
)
from releasegate.commit_parsing._types import (
    BUMP_PRECEDENCE,
    BumpType,
    ClassifiedCommit,
    CommitClassifier,
    max_bump,
)

# Module-level singleton for convenience.
_DEFAULT_CLASSIFIER = ConventionalCommitClassifier()


def classify(raw_message: str, commit_id: str = '') -> ClassifiedCommit:
    """Classify a single commit message as a Conventional Commit.

    Convenience wrapper around
    :meth:`ConventionalCommitClassifier.classify`.

    Args:
        raw_message: The full commit message.
        commit_id: The commit identifier (for reference).

    Returns:
        A :class:`ClassifiedCommit`; never raises on malformed input.
    """
    return _DEFAULT_CLASSIFIER.classify(raw_message, commit_id=commit_id)


def classify_records(
    records: Iterable[CommitRecord],
    classifier: CommitClassifier | None = None,
) -> list[ClassifiedCommit]:
    """Classify a batch of commit records, preserving input order."""
    impl = classifier or _DEFAULT_CLASSIFIER
    return [impl.classify(record.raw_message, commit_id=record.id) for record in records]


__all__ = [
    'BREAKING_MARKERS',
    'BUMP_PRECEDENCE',
    'BumpType',
    'ClassifiedCommit',
    'CommitClassifier',
    'ConventionalCommitClassifier',
    'SUBJECT_PATTERN',
    'classify',
    'classify_records',
    'has_breaking_marker',
    'max_bump',
]
