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

"""Tests for releasegate.merge."""

from __future__ import annotations

from releasegate.changelog import new_changelog_document, render
from releasegate.commit_parsing import classify
from releasegate.merge import has_version_section, merge, version_headings

_HEADER = '# Changelog\n\nAll notable changes to this project will be documented in this file.\n\n'

_EXISTING = (
    _HEADER
    + '## [1.0.0] - 2024-01-01\n\n### Added\n\n- initial release\n\n'
    + '## [0.9.0] - 2023-12-01\n\n### Fixed\n\n- something\n'
)

_SECTION = '## [1.1.0] - 2024-02-01\n\n### Added\n\n- new thing\n'


class TestMergeIntoExisting:
    """Tests for merging above existing versions."""

    def test_inserts_above_first_version(self) -> None:
        """The new section goes right before the first ## [ heading."""
        result = merge(_EXISTING, _SECTION)
        assert result == _HEADER + _SECTION + '\n' + _EXISTING[len(_HEADER) :]
        assert version_headings(result) == ['1.1.0', '1.0.0', '0.9.0']

    def test_preserves_other_bytes(self) -> None:
        """Removing the inserted text gives back the original document."""
        result = merge(_EXISTING, _SECTION)
        assert result.replace(_SECTION + '\n', '', 1) == _EXISTING

    def test_strictly_above_first_existing(self) -> None:
        """The new heading precedes every pre-existing heading."""
        result = merge(_EXISTING, _SECTION)
        assert result.index('## [1.1.0]') < result.index('## [1.0.0]')

    def test_heading_without_header(self) -> None:
        """A document that starts with a version heading gets the section at the top."""
        doc = '## [1.0.0] - 2024-01-01\n'
        assert merge(doc, _SECTION) == _SECTION + '\n' + doc

    def test_only_level_two_brackets_count(self) -> None:
        """### [ and inline ## [ text are not version headings."""
        doc = _HEADER + 'See ## [notes].\n### [x]\n'
        result = merge(doc, _SECTION)
        assert result.startswith(doc)


class TestMergeWithoutVersions:
    """Tests for documents with no version headings."""

    def test_empty_document(self) -> None:
        """An empty document becomes just the section."""
        assert merge('', _SECTION) == _SECTION

    def test_appends_after_boilerplate(self) -> None:
        """The section follows the boilerplate with one blank line."""
        result = merge(_HEADER, _SECTION)
        assert result == _HEADER + _SECTION

    def test_adds_separator(self) -> None:
        """A blank line is added when the document does not end with one."""
        assert merge('# Changelog\n', _SECTION) == '# Changelog\n\n' + _SECTION
        assert merge('# Changelog', _SECTION) == '# Changelog\n\n' + _SECTION

    def test_twice_gives_adjacent_headings(self) -> None:
        """Merging the same section twice yields two adjacent entries."""
        once = merge(_HEADER, _SECTION)
        twice = merge(once, _SECTION)
        assert version_headings(twice) == ['1.1.0', '1.1.0']
        assert twice == _HEADER + _SECTION + '\n' + _SECTION

    def test_section_newline_normalized(self) -> None:
        """Extra trailing newlines on the section are collapsed."""
        assert merge('', _SECTION + '\n\n') == _SECTION

    def test_new_document_template(self) -> None:
        """A rendered section merges cleanly into the template."""
        section = render('1.0.0', '2024-01-15', [classify('feat: x')])
        result = merge(new_changelog_document(), section)
        assert result.startswith(new_changelog_document())
        assert result.endswith(section)


class TestHasVersionSection:
    """Tests for has_version_section()."""

    def test_detects_existing(self) -> None:
        """Existing versions are found, others are not."""
        assert has_version_section(_EXISTING, '1.0.0')
        assert not has_version_section(_EXISTING, '1.1.0')

    def test_exact_match(self) -> None:
        """Prefixes of a version do not count."""
        assert not has_version_section(_EXISTING, '1.0')
