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

"""Release planning: commit history in, next version and changelog out.

This is the layer where caller policy lives. The core components stay
policy-free; :func:`plan_release` wires them together::

    CommitRecord list
         │
         ▼
    classify_records ──▶ resolve ──▶ effective_bump (policy) ──▶ apply_bump
         │                                                          │
         └────────────────────────▶ render ◀────────── next version ┘
                                      │
                                      ▼
                                 ReleasePlan

Policy: with ``default_bump = "patch"`` a batch of commits where none
asks for a release still ships a patch release. An empty batch never
releases, whatever the policy.

:func:`check_proposed_version` cross-checks a hand-edited version (e.g.
in a pull request) against both the transition rules and the bump the
commits call for.
"""

from __future__ import annotations

import datetime
from collections.abc import Sequence
from dataclasses import dataclass, replace

from releasegate._types import CommitRecord
from releasegate.bump import CommitSummary, bump_for, resolve, summarize
from releasegate.changelog import ChangelogEntry, build_entry, build_report, normalize_date, render_entry
from releasegate.commit_parsing import BumpType, ClassifiedCommit, classify_records
from releasegate.config import ReleaseGateConfig
from releasegate.logging import get_logger
from releasegate.schemas import ChangelogReport, CommitAnalysis, CommitStats, VersionAnalysisReport
from releasegate.validation import VersionTransition, validate_increment
from releasegate.versions import SemanticVersion, apply_bump, format_tag, parse_version

__all__ = [
    'ReleasePlan',
    'check_proposed_version',
    'effective_bump',
    'plan_release',
]

logger = get_logger(__name__)


def effective_bump(resolved: BumpType, commit_count: int, default_bump: BumpType = BumpType.NONE) -> BumpType:
    """Apply the "always move forward" caller policy.

    Args:
        resolved: The bump computed by :func:`releasegate.bump.resolve`.
        commit_count: Number of commits in the batch.
        default_bump: Bump to use when commits exist but *resolved* is
            ``NONE``.

    Returns:
        The bump to apply; ``NONE`` means "no release".
    """
    if commit_count == 0:
        return BumpType.NONE
    if resolved is BumpType.NONE:
        return default_bump
    return resolved


@dataclass(frozen=True)
class ReleasePlan:
    """Everything an orchestrator needs to cut (or skip) a release.

    Attributes:
        current_version: Version read from the manifest.
        next_version: Version to release, or ``None`` when skipping.
        bump: Bump that was applied after caller policy.
        resolved_bump: Bump the commits alone called for.
        tag: Tag name for the release, or ``None``.
        date: Release date (``YYYY-MM-DD``).
        section: Rendered changelog section, empty when skipping.
        commits: The classified commits.
        summary: Commit counts.
        entry: Changelog data behind *section*, ``None`` when skipping.
    """

    current_version: SemanticVersion
    next_version: SemanticVersion | None
    bump: BumpType
    resolved_bump: BumpType
    tag: str | None
    date: str
    section: str
    commits: tuple[ClassifiedCommit, ...]
    summary: CommitSummary
    entry: ChangelogEntry | None = None

    @property
    def releasable(self) -> bool:
        """``True`` if the plan produces a new version."""
        return self.next_version is not None

    def changelog_report(self, changelog_path: str = '') -> ChangelogReport | None:
        """Build the changelog JSON report, or ``None`` when skipping.

        Args:
            changelog_path: Path of the changelog file the caller wrote
                the merged section to.
        """
        if self.entry is None:
            return None
        return build_report(self.entry, self.commits, changelog_path=changelog_path)

    def to_report(self) -> VersionAnalysisReport:
        """Build the JSON report consumed by CI."""
        return VersionAnalysisReport(
            current_version=str(self.current_version),
            next_version=str(self.next_version or self.current_version),
            bump=self.bump.value if self.releasable else None,
            tag=self.tag,
            commits=[
                CommitAnalysis(
                    sha=c.id,
                    type=c.type,
                    scope=c.scope,
                    breaking=c.breaking,
                    description=c.description,
                    bump=bump_for(c).value,
                )
                for c in self.commits
            ],
            summary=CommitStats(
                total=self.summary.total,
                breaking=self.summary.breaking,
                features=self.summary.features,
                fixes=self.summary.fixes,
                other=self.summary.other,
            ),
        )


def plan_release(
    records: Sequence[CommitRecord],
    current_version: str | SemanticVersion,
    *,
    date: str | datetime.date | None = None,
    config: ReleaseGateConfig | None = None,
) -> ReleasePlan:
    """Compute the next version and changelog section for a commit range.

    Args:
        records: Commits reachable from ``HEAD`` but not from the base
            reference, in any order.
        current_version: Version from the project manifest.
        date: Release date for the changelog heading; today if ``None``.
        config: Settings; defaults if ``None``.

    Returns:
        The :class:`ReleasePlan`.

    Raises:
        MalformedVersionError: If *current_version* is not a valid
            semantic version.
    """
    cfg = config or ReleaseGateConfig()
    current = parse_version(current_version, 'current')
    release_date = normalize_date(date if date is not None else datetime.date.today())

    commits = tuple(classify_records(records))
    for commit in commits:
        if not commit.is_conventional:
            logger.warning('unclassified_commit', sha=commit.id[:8], subject=commit.description)

    resolved = resolve(commits)
    bump = effective_bump(resolved, len(commits), cfg.default_bump)
    summary = summarize(commits)

    logger.info(
        'bump_resolved',
        commits=len(commits),
        resolved=resolved.value,
        bump=bump.value,
        policy_applied=bump is not resolved,
    )

    if bump is BumpType.NONE:
        logger.info('release_skipped', current_version=str(current), commits=len(commits))
        return ReleasePlan(
            current_version=current,
            next_version=None,
            bump=bump,
            resolved_bump=resolved,
            tag=None,
            date=release_date,
            section='',
            commits=commits,
            summary=summary,
        )

    next_version = apply_bump(current, bump)
    entry = build_entry(
        str(next_version),
        release_date,
        commits,
        commit_url=cfg.commit_url,
        short_sha_length=cfg.short_sha_length,
        breaking_details=cfg.changelog_breaking_details,
    )
    section = render_entry(entry)

    logger.info(
        'release_planned',
        current_version=str(current),
        next_version=str(next_version),
        bump=bump.value,
    )

    return ReleasePlan(
        current_version=current,
        next_version=next_version,
        bump=bump,
        resolved_bump=resolved,
        tag=format_tag(next_version, cfg.tag_prefix),
        date=release_date,
        section=section,
        commits=commits,
        summary=summary,
        entry=entry,
    )


def check_proposed_version(
    proposed: str | SemanticVersion,
    base: str | SemanticVersion,
    required: BumpType,
) -> VersionTransition:
    """Validate a proposed version and check it matches the commits.

    Args:
        proposed: The version someone proposes (e.g. in a PR).
        base: The version on the base branch.
        required: The bump the commit history calls for.

    Returns:
        The :class:`VersionTransition`. A transition that is valid in
        shape but of a different size than *required* is reported as
        invalid with ``component="bump"``.

    Raises:
        MalformedVersionError: If either version is malformed.
    """
    transition = validate_increment(proposed, base)
    if not transition.valid or required is BumpType.NONE or transition.bump is required:
        return transition

    logger.info(
        'proposed_version_mismatch',
        proposed=transition.candidate,
        base=transition.base,
        proposed_bump=transition.bump.value,
        required_bump=required.value,
    )
    return replace(
        transition,
        valid=False,
        component='bump',
        bump=None,
        reason=(
            f'{transition.base} -> {transition.candidate} is a {transition.bump.value} bump '
            f'but the commits require a {required.value} bump'
        ),
    )
