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

"""Insert a rendered section into an existing changelog document.

The document is reverse-chronological: the newest release sits right
below the header boilerplate.

Merge flow::

    existing document
         │
         ├── has a "## [" line? ──yes──▶ insert section right before the
         │                               first such line
         │
         └── no ──────────────────────▶ append section after the
                                         boilerplate, one blank line apart

Only the insertion point changes; every other byte of the document is
kept. Merging the same section twice yields two entries: duplicate
detection is up to the caller (see :func:`has_version_section`).
"""

from __future__ import annotations

import re

from releasegate.logging import get_logger

__all__ = [
    'VERSION_HEADING_PATTERN',
    'has_version_section',
    'merge',
    'version_headings',
]

logger = get_logger(__name__)

VERSION_HEADING_PATTERN: re.Pattern[str] = re.compile(r'^## \[', re.MULTILINE)

_HEADING_VERSION_PATTERN: re.Pattern[str] = re.compile(r'^## \[(?P<version>[^\]]*)\]', re.MULTILINE)


def _separator_after(document: str) -> str:
    """Return what must follow *document* to leave one blank line."""
    if document.endswith('\n\n'):
        return ''
    if document.endswith('\n'):
        return '\n'
    return '\n\n'


def merge(existing_document: str, new_section: str) -> str:
    """Merge *new_section* into *existing_document*.

    Args:
        existing_document: Full text of the current changelog (may be
            empty or header-only boilerplate).
        new_section: A section rendered by
            :func:`releasegate.changelog.render`.

    Returns:
        The updated document text.
    """
    section = new_section.rstrip('\n') + '\n'

    match = VERSION_HEADING_PATTERN.search(existing_document)
    if match is None:
        if not existing_document:
            logger.debug('changelog_merge_empty_document')
            return section
        logger.debug('changelog_merge_append', offset=len(existing_document))
        return existing_document + _separator_after(existing_document) + section

    offset = match.start()
    logger.debug('changelog_merge_insert', offset=offset)
    return existing_document[:offset] + section + '\n' + existing_document[offset:]


def version_headings(document: str) -> list[str]:
    """Return the versions of all ``## [version]`` headings, top to bottom."""
    return [m.group('version') for m in _HEADING_VERSION_PATTERN.finditer(document)]


def has_version_section(document: str, version: str) -> bool:
    """Return ``True`` if *document* already has a section for *version*."""
    return str(version) in version_headings(document)
