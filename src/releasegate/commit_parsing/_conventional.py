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

r"""Conventional Commit classifier.

Splits a raw commit message into a :class:`ClassifiedCommit`:

**Subject line** (first line)::

    type(scope)!: description

**Body**: everything after the first newline, trimmed.

Rules:

- ``type`` is any run of ASCII word characters and is normalised to
  lowercase; ``scope`` is the parenthesised text without the parens.
- ``!`` right before the colon marks a breaking change.
- A literal ``BREAKING CHANGE:`` or ``BREAKING-CHANGE:`` anywhere in the
  message also marks a breaking change, whether or not the subject
  matched. The marker is case-sensitive.
- A subject that does not match degrades to an *unclassified* commit
  (``type`` and ``scope`` are ``None``, ``description`` is the subject
  verbatim). Classification never raises.

Pure implementation: depends only on ``re`` and :mod:`._types`.
No I/O, no logging, no side effects.
"""

from __future__ import annotations

import re

from releasegate.commit_parsing._types import ClassifiedCommit

# Subject line: type(scope)!: description
SUBJECT_PATTERN: re.Pattern[str] = re.compile(
    r'^(?P<type>\w+)'  # type (e.g. feat, fix, chore)
    r'(?:\((?P<scope>[^)]+)\))?'  # optional scope in parens
    r'(?P<breaking>!)?'  # optional breaking change indicator
    r':\s*'  # colon + optional whitespace
    r'(?P<description>.+)$',  # description
    re.ASCII,
)

BREAKING_MARKERS: tuple[str, ...] = ('BREAKING CHANGE:', 'BREAKING-CHANGE:')

# Text after the first breaking-change marker: the rest of its line, or the
# next non-blank line when the marker ends its line.
_BREAKING_DETAIL_PATTERN: re.Pattern[str] = re.compile(r'BREAKING[ -]CHANGE:\s*(?P<detail>[^\n]*)')


def has_breaking_marker(message: str) -> bool:
    """Return ``True`` if *message* contains a breaking-change marker."""
    return any(marker in message for marker in BREAKING_MARKERS)


def _breaking_detail(message: str) -> str:
    """Return the text following the first breaking-change marker."""
    m = _BREAKING_DETAIL_PATTERN.search(message)
    return m.group('detail').strip() if m else ''


class ConventionalCommitClassifier:
    r"""Classifier for ``type(scope)!: description`` commit messages.

    Example::

        classifier = ConventionalCommitClassifier()

        cc = classifier.classify('feat(auth): add OAuth2')
        assert cc.type == 'feat'
        assert cc.scope == 'auth'

        cc = classifier.classify('feat: new API\n\nBREAKING CHANGE: removed v1')
        assert cc.breaking is True
        assert cc.breaking_description == 'removed v1'

        cc = classifier.classify('Update README')
        assert cc.type is None
        assert cc.description == 'Update README'
    """

    def classify(self, raw_message: str, commit_id: str = '') -> ClassifiedCommit:
        """Classify a raw commit message.

        Args:
            raw_message: The full commit message.
            commit_id: The commit identifier (for reference).

        Returns:
            A :class:`ClassifiedCommit`; unclassified when the subject
            does not follow the grammar.
        """
        subject, _, rest = raw_message.partition('\n')
        body = rest.strip()

        marker_breaking = has_breaking_marker(raw_message)
        detail = _breaking_detail(raw_message) if marker_breaking else ''

        match = SUBJECT_PATTERN.match(subject)
        if not match:
            return ClassifiedCommit(
                id=commit_id,
                type=None,
                scope=None,
                breaking=marker_breaking,
                description=subject,
                body=body,
                breaking_description=detail,
            )

        return ClassifiedCommit(
            id=commit_id,
            type=match.group('type').lower(),
            scope=match.group('scope'),
            breaking=bool(match.group('breaking')) or marker_breaking,
            description=match.group('description').strip(),
            body=body,
            breaking_description=detail,
        )
