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

"""Tests for releasegate.config."""

from __future__ import annotations

from pathlib import Path

import pytest
from releasegate.changelog import DEFAULT_COMMIT_URL
from releasegate.commit_parsing import BumpType
from releasegate.config import CONFIG_FILENAME, ReleaseGateConfig, find_config, load_config
from releasegate.errors import ConfigError, E


def _write_toml(path: Path, content: str) -> Path:
    path.write_text(content, encoding='utf-8')
    return path


class TestDefaults:
    """Tests for the default configuration."""

    def test_defaults(self) -> None:
        """Defaults match the documented values."""
        cfg = ReleaseGateConfig()
        assert cfg.tag_prefix == 'v'
        assert cfg.commit_url == DEFAULT_COMMIT_URL
        assert cfg.short_sha_length == 7
        assert cfg.default_bump is BumpType.NONE
        assert cfg.changelog_breaking_details is True

    def test_empty_directory_gives_defaults(self, tmp_path: Path) -> None:
        """A directory without configuration yields defaults."""
        assert load_config(tmp_path) == ReleaseGateConfig()


class TestLoadConfig:
    """Tests for load_config()."""

    def test_releasegate_toml(self, tmp_path: Path) -> None:
        """All keys are read from releasegate.toml."""
        path = _write_toml(
            tmp_path / CONFIG_FILENAME,
            'tag_prefix = "release-"\n'
            'commit_url = "https://github.com/acme/widget/commit/{sha}"\n'
            'short_sha_length = 10\n'
            'default_bump = "patch"\n'
            'changelog_breaking_details = false\n',
        )
        cfg = load_config(path)
        assert cfg.tag_prefix == 'release-'
        assert cfg.commit_url == 'https://github.com/acme/widget/commit/{sha}'
        assert cfg.short_sha_length == 10
        assert cfg.default_bump is BumpType.PATCH
        assert cfg.changelog_breaking_details is False

    def test_pyproject_table(self, tmp_path: Path) -> None:
        """[tool.releasegate] in pyproject.toml is read."""
        path = _write_toml(
            tmp_path / 'pyproject.toml',
            '[project]\nname = "widget"\n\n[tool.releasegate]\ntag_prefix = ""\n',
        )
        assert load_config(path).tag_prefix == ''

    def test_pyproject_without_table(self, tmp_path: Path) -> None:
        """A pyproject.toml without the table gives defaults."""
        path = _write_toml(tmp_path / 'pyproject.toml', '[project]\nname = "widget"\n')
        assert load_config(path) == ReleaseGateConfig()

    def test_directory_search(self, tmp_path: Path) -> None:
        """Passing a directory searches it and its parents."""
        _write_toml(tmp_path / CONFIG_FILENAME, 'short_sha_length = 12\n')
        nested = tmp_path / 'a' / 'b'
        nested.mkdir(parents=True)
        assert load_config(nested).short_sha_length == 12

    def test_missing_file(self, tmp_path: Path) -> None:
        """An explicit path that does not exist raises CONFIG_NOT_FOUND."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / 'nope.toml')
        assert exc_info.value.code is E.CONFIG_NOT_FOUND

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises CONFIG_INVALID."""
        path = _write_toml(tmp_path / CONFIG_FILENAME, 'tag_prefix = \n')
        with pytest.raises(ConfigError, match='not valid TOML') as exc_info:
            load_config(path)
        assert exc_info.value.code is E.CONFIG_INVALID

    def test_pyproject_table_not_a_table(self, tmp_path: Path) -> None:
        """tool.releasegate must be a table."""
        path = _write_toml(tmp_path / 'pyproject.toml', '[tool]\nreleasegate = 1\n')
        with pytest.raises(ConfigError, match='must be a table'):
            load_config(path)


class TestValidation:
    """Tests for key validation."""

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Unknown keys are rejected with the list of valid ones."""
        path = _write_toml(tmp_path / CONFIG_FILENAME, 'tag_prefx = "v"\n')
        with pytest.raises(ConfigError, match='tag_prefx') as exc_info:
            load_config(path)
        assert 'tag_prefix' in exc_info.value.hint

    @pytest.mark.parametrize(
        'content',
        [
            'tag_prefix = 1\n',
            'changelog_breaking_details = "yes"\n',
            'short_sha_length = "7"\n',
            'short_sha_length = true\n',
            'short_sha_length = 3\n',
            'short_sha_length = 41\n',
            'default_bump = "minor"\n',
            'default_bump = "huge"\n',
            'commit_url = "https://x/{commit}"\n',
            'commit_url = "https://x/{0}"\n',
        ],
    )
    def test_bad_values(self, tmp_path: Path, content: str) -> None:
        """Wrong types and out-of-range values are rejected."""
        path = _write_toml(tmp_path / CONFIG_FILENAME, content)
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.code is E.CONFIG_INVALID

    def test_default_bump_case_insensitive(self, tmp_path: Path) -> None:
        """default_bump accepts any casing."""
        path = _write_toml(tmp_path / CONFIG_FILENAME, 'default_bump = "PATCH"\n')
        assert load_config(path).default_bump is BumpType.PATCH


class TestFindConfig:
    """Tests for find_config()."""

    def test_releasegate_toml_wins(self, tmp_path: Path) -> None:
        """releasegate.toml is preferred over pyproject.toml."""
        _write_toml(tmp_path / 'pyproject.toml', '[tool.releasegate]\ntag_prefix = "p"\n')
        expected = _write_toml(tmp_path / CONFIG_FILENAME, 'tag_prefix = "r"\n')
        assert find_config(tmp_path) == expected.resolve()

    def test_pyproject_with_table(self, tmp_path: Path) -> None:
        """A pyproject.toml with [tool.releasegate] is found."""
        expected = _write_toml(tmp_path / 'pyproject.toml', '[tool.releasegate]\n')
        assert find_config(tmp_path) == expected.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        """Parents are searched."""
        expected = _write_toml(tmp_path / CONFIG_FILENAME, '')
        nested = tmp_path / 'pkg' / 'src'
        nested.mkdir(parents=True)
        assert find_config(nested) == expected.resolve()
