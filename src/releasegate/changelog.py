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

"""Render a Keep-a-Changelog section from classified commits.

Key Concepts (ELI5)::

    ┌─────────────────────────┬─────────────────────────────────────────────┐
    │ Concept                 │ Plain-English                               │
    ├─────────────────────────┼─────────────────────────────────────────────┤
    │ RenderedLine            │ One markdown bullet for one commit.         │
    ├─────────────────────────┼─────────────────────────────────────────────┤
    │ ChangelogGroups         │ Bullets bucketed as breaking / added /      │
    │                         │ fixed / changed.                            │
    ├─────────────────────────┼─────────────────────────────────────────────┤
    │ ChangelogEntry          │ Version + date + groups for one release.    │
    └─────────────────────────┴─────────────────────────────────────────────┘

Grouping rules::

    breaking=True                 →  ⚠ BREAKING CHANGES  (regardless of type)
    feat, feature                 →  Added
    fix, bugfix                   →  Fixed
    docs, perf, refactor          →  Changed
    anything else / unclassified  →  omitted

A breaking commit is listed only under breaking changes. Empty groups
produce no heading. Rendering is pure text; reading and writing
``CHANGELOG.md`` is left to the caller (see :mod:`releasegate.merge`).

Usage::

    from releasegate.changelog import render

    md = render('1.0.0', '2024-01-15', commits)
    # ## [1.0.0] - 2024-01-15
    #
    # ### Added
    #
    # - **auth**: add OAuth2 ([abc1234](../../commit/abc1234...))
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Iterable
from dataclasses import dataclass

from releasegate.bump import ADDED_TYPES, FIXED_TYPES
from releasegate.commit_parsing import ClassifiedCommit
from releasegate.errors import InvalidDateError
from releasegate.schemas import ChangelogReport, ChangelogStats

__all__ = [
    'CHANGED_TYPES',
    'ChangelogEntry',
    'ChangelogGroups',
    'DEFAULT_COMMIT_URL',
    'GROUP_HEADINGS',
    'RenderedLine',
    'build_entry',
    'build_report',
    'changelog_stats',
    'group_commits',
    'new_changelog_document',
    'normalize_date',
    'render',
    'render_entry',
    'render_line',
]

CHANGED_TYPES: frozenset[str] = frozenset({'docs', 'perf', 'refactor'})

# Group key → heading, in display order.
GROUP_HEADINGS: list[tuple[str, str]] = [
    ('breaking', '⚠ BREAKING CHANGES'),
    ('added', 'Added'),
    ('fixed', 'Fixed'),
    ('changed', 'Changed'),
]

# Relative link from a rendered CHANGELOG.md on a forge to the commit page.
DEFAULT_COMMIT_URL = '../../commit/{sha}'

_ISO_DATE_PATTERN: re.Pattern[str] = re.compile(r'^\d{4}-\d{2}-\d{2}$')

_CHANGELOG_TEMPLATE = """\
# Changelog

All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/),
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).

"""


@dataclass(frozen=True)
class RenderedLine:
    """One changelog bullet.

    Attributes:
        commit_id: Identifier of the commit the bullet describes.
        text: The bullet, e.g. ``- **api**: add pagination ([abc1234](...))``.
        detail: Optional indented continuation line (breaking-change
            detail), without the indentation.
    """

    commit_id: str
    text: str
    detail: str = ''

    def lines(self) -> list[str]:
        """Return the markdown lines for this bullet."""
        if self.detail:
            return [self.text, f'  {self.detail}']
        return [self.text]


@dataclass(frozen=True)
class ChangelogGroups:
    """Rendered bullets bucketed by outcome category."""

    breaking: tuple[RenderedLine, ...] = ()
    added: tuple[RenderedLine, ...] = ()
    fixed: tuple[RenderedLine, ...] = ()
    changed: tuple[RenderedLine, ...] = ()

    def __len__(self) -> int:
        """Total number of bullets across all groups."""
        return len(self.breaking) + len(self.added) + len(self.fixed) + len(self.changed)


@dataclass(frozen=True)
class ChangelogEntry:
    """Changelog data for one release.

    Attributes:
        version: Version string for the heading.
        date: ISO-8601 calendar date (``YYYY-MM-DD``).
        groups: The bucketed bullets.
    """

    version: str
    date: str
    groups: ChangelogGroups


def normalize_date(value: str | datetime.date) -> str:
    """Return *value* as a ``YYYY-MM-DD`` string.

    Raises:
        InvalidDateError: If *value* is not an ISO-8601 calendar date.
    """
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, str) and _ISO_DATE_PATTERN.match(value):
        try:
            return datetime.date.fromisoformat(value).isoformat()
        except ValueError as exc:
            raise InvalidDateError(value) from exc
    raise InvalidDateError(value)


def _group_key(commit: ClassifiedCommit) -> str | None:
    if commit.breaking:
        return 'breaking'
    if commit.type in ADDED_TYPES:
        return 'added'
    if commit.type in FIXED_TYPES:
        return 'fixed'
    if commit.type in CHANGED_TYPES:
        return 'changed'
    return None


def render_line(
    commit: ClassifiedCommit,
    *,
    commit_url: str = DEFAULT_COMMIT_URL,
    short_sha_length: int = 7,
    breaking_details: bool = True,
) -> RenderedLine:
    """Render one commit as a changelog bullet.

    Format: ``- **scope**: description ([short](link))``. The scope
    prefix is omitted when the commit has no scope and the link is
    omitted when the commit has no identifier.

    Args:
        commit: The classified commit.
        commit_url: Link template; receives ``{sha}`` and ``{short_sha}``.
        short_sha_length: Number of id characters shown in the link text.
        breaking_details: Attach the ``BREAKING CHANGE:`` text as a
            continuation line for breaking commits.

    Returns:
        The :class:`RenderedLine`.
    """
    parts: list[str] = ['- ']
    if commit.scope:
        parts.append(f'**{commit.scope}**: ')
    parts.append(commit.description)

    if commit.id:
        short_sha = commit.id[:short_sha_length]
        url = commit_url.format(sha=commit.id, short_sha=short_sha)
        parts.append(f' ([{short_sha}]({url}))')

    detail = ''
    if breaking_details and commit.breaking and commit.breaking_description:
        detail = commit.breaking_description

    return RenderedLine(commit_id=commit.id, text=''.join(parts), detail=detail)


def group_commits(
    commits: Iterable[ClassifiedCommit],
    *,
    commit_url: str = DEFAULT_COMMIT_URL,
    short_sha_length: int = 7,
    breaking_details: bool = True,
) -> ChangelogGroups:
    """Bucket commits into changelog groups, keeping commit order.

    Commits whose type has no changelog group (``chore``, ``ci``, ...)
    and unclassified commits are dropped.
    """
    buckets: dict[str, list[RenderedLine]] = {key: [] for key, _ in GROUP_HEADINGS}
    for commit in commits:
        key = _group_key(commit)
        if key is None:
            continue
        buckets[key].append(
            render_line(
                commit,
                commit_url=commit_url,
                short_sha_length=short_sha_length,
                breaking_details=breaking_details,
            )
        )
    return ChangelogGroups(**{key: tuple(lines) for key, lines in buckets.items()})


def build_entry(
    version: str,
    date: str | datetime.date,
    commits: Iterable[ClassifiedCommit],
    *,
    commit_url: str = DEFAULT_COMMIT_URL,
    short_sha_length: int = 7,
    breaking_details: bool = True,
) -> ChangelogEntry:
    """Build the :class:`ChangelogEntry` for one release.

    Raises:
        InvalidDateError: If *date* is not an ISO-8601 calendar date.
    """
    return ChangelogEntry(
        version=str(version),
        date=normalize_date(date),
        groups=group_commits(
            commits,
            commit_url=commit_url,
            short_sha_length=short_sha_length,
            breaking_details=breaking_details,
        ),
    )


def render_entry(entry: ChangelogEntry) -> str:
    """Render a :class:`ChangelogEntry` as a markdown section.

    The section starts with ``## [version] - date`` and ends with a
    single newline.
    """
    lines: list[str] = [f'## [{entry.version}] - {entry.date}', '']

    for key, heading in GROUP_HEADINGS:
        bullets: tuple[RenderedLine, ...] = getattr(entry.groups, key)
        if not bullets:
            continue
        lines.append(f'### {heading}')
        lines.append('')
        for bullet in bullets:
            lines.extend(bullet.lines())
        lines.append('')

    return '\n'.join(lines).rstrip('\n') + '\n'


def render(
    version: str,
    date: str | datetime.date,
    commits: Iterable[ClassifiedCommit],
    *,
    commit_url: str = DEFAULT_COMMIT_URL,
    short_sha_length: int = 7,
    breaking_details: bool = True,
) -> str:
    """Render the changelog section for *version* released on *date*.

    Args:
        version: Version string for the heading.
        date: Release date, ``YYYY-MM-DD`` or a :class:`datetime.date`.
        commits: Classified commits of the release.
        commit_url: Link template; receives ``{sha}`` and ``{short_sha}``.
        short_sha_length: Number of id characters shown in links.
        breaking_details: Render breaking-change detail lines.

    Returns:
        The markdown section.

    Raises:
        InvalidDateError: If *date* is not an ISO-8601 calendar date.
    """
    entry = build_entry(
        version,
        date,
        commits,
        commit_url=commit_url,
        short_sha_length=short_sha_length,
        breaking_details=breaking_details,
    )
    return render_entry(entry)


def new_changelog_document() -> str:
    """Return the boilerplate for a brand-new ``CHANGELOG.md``.

    The template has no version heading, so merging a section into it
    appends the section after the boilerplate.
    """
    return _CHANGELOG_TEMPLATE


def changelog_stats(commits: Iterable[ClassifiedCommit]) -> ChangelogStats:
    """Count commits per changelog category.

    Each commit lands in exactly one category, checked in order:
    breaking, feature, fix, other. ``docs``/``perf``/``refactor``
    commits listed under "Changed" count as other.
    """
    counts = {'breaking': 0, 'features': 0, 'fixes': 0, 'other': 0}
    total = 0
    for commit in commits:
        total += 1
        if commit.breaking:
            counts['breaking'] += 1
        elif commit.type in ADDED_TYPES:
            counts['features'] += 1
        elif commit.type in FIXED_TYPES:
            counts['fixes'] += 1
        else:
            counts['other'] += 1
    return ChangelogStats(total_commits=total, **counts)


def build_report(
    entry: ChangelogEntry,
    commits: Iterable[ClassifiedCommit],
    *,
    changelog_path: str = '',
) -> ChangelogReport:
    """Build the JSON report for a synthesized changelog section.

    Args:
        entry: The entry that was rendered.
        commits: All commits of the release range, including the ones
            the section omits.
        changelog_path: Path of the changelog file the caller wrote.

    Returns:
        The :class:`~releasegate.schemas.ChangelogReport`.
    """
    return ChangelogReport(
        version=entry.version,
        date=entry.date,
        changelog_path=str(changelog_path),
        stats=changelog_stats(commits),
    )
