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

"""Configuration for releasegate.

Settings live either in a dedicated ``releasegate.toml`` (top-level
keys) or in ``pyproject.toml`` under ``[tool.releasegate]``::

    # releasegate.toml
    tag_prefix = "v"
    commit_url = "https://github.com/acme/widget/commit/{sha}"
    short_sha_length = 7
    default_bump = "patch"          # "none" (default) or "patch"
    changelog_breaking_details = true

``default_bump`` is the caller policy applied when commits exist but
none of them asks for a release: ``"none"`` skips the release,
``"patch"`` still ships a patch release.

Every key is validated on load; unknown keys and wrong types raise
:class:`~releasegate.errors.ConfigError` rather than being ignored.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from releasegate.changelog import DEFAULT_COMMIT_URL
from releasegate.commit_parsing import BumpType
from releasegate.errors import ConfigError, E

__all__ = [
    'CONFIG_FILENAME',
    'ReleaseGateConfig',
    'find_config',
    'load_config',
]

CONFIG_FILENAME = 'releasegate.toml'
PYPROJECT_FILENAME = 'pyproject.toml'

_ALLOWED_DEFAULT_BUMPS: frozenset[BumpType] = frozenset({BumpType.NONE, BumpType.PATCH})


@dataclass(frozen=True)
class ReleaseGateConfig:
    """Validated releasegate settings.

    Attributes:
        tag_prefix: Prefix of release tags (``v`` gives ``v1.2.3``).
        commit_url: Changelog link template with ``{sha}`` and/or
            ``{short_sha}`` placeholders.
        short_sha_length: Characters of the commit id shown in links.
        default_bump: Bump used when commits exist but none is
            releasable: ``NONE`` or ``PATCH``.
        changelog_breaking_details: Render ``BREAKING CHANGE:`` text
            under breaking bullets.
    """

    tag_prefix: str = 'v'
    commit_url: str = DEFAULT_COMMIT_URL
    short_sha_length: int = 7
    default_bump: BumpType = BumpType.NONE
    changelog_breaking_details: bool = True


def _invalid(key: str, message: str, hint: str = '') -> ConfigError:
    return ConfigError(code=E.CONFIG_INVALID, message=f'{key}: {message}', hint=hint)


def _parse_str(raw: dict[str, Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str):
        raise _invalid(key, f'expected a string, got {type(value).__name__}')
    return value


def _parse_bool(raw: dict[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise _invalid(key, f'expected a boolean, got {type(value).__name__}')
    return value


def _parse_short_sha_length(raw: dict[str, Any]) -> int:
    value = raw.get('short_sha_length', 7)
    # bool is a subclass of int.
    if isinstance(value, bool) or not isinstance(value, int):
        raise _invalid('short_sha_length', f'expected an integer, got {type(value).__name__}')
    if not 4 <= value <= 40:
        raise _invalid('short_sha_length', f'{value} is out of range', hint='Use a value between 4 and 40.')
    return value


def _parse_commit_url(raw: dict[str, Any]) -> str:
    value = _parse_str(raw, 'commit_url', DEFAULT_COMMIT_URL)
    try:
        value.format(sha='0' * 40, short_sha='0' * 7)
    except (KeyError, IndexError, ValueError) as exc:
        raise _invalid(
            'commit_url',
            f'invalid template {value!r}',
            hint='Only the {sha} and {short_sha} placeholders are supported.',
        ) from exc
    return value


def _parse_default_bump(raw: dict[str, Any]) -> BumpType:
    value = _parse_str(raw, 'default_bump', BumpType.NONE.value)
    try:
        bump = BumpType(value.lower())
    except ValueError:
        bump = None
    if bump not in _ALLOWED_DEFAULT_BUMPS:
        raise _invalid('default_bump', f'unsupported value {value!r}', hint='Use "none" or "patch".')
    return bump


def _parse_config(raw: dict[str, Any]) -> ReleaseGateConfig:
    """Validate a raw TOML table into a :class:`ReleaseGateConfig`."""
    known = {
        'tag_prefix',
        'commit_url',
        'short_sha_length',
        'default_bump',
        'changelog_breaking_details',
    }
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(
            code=E.CONFIG_INVALID,
            message=f'unknown configuration key(s): {", ".join(unknown)}',
            hint=f'Valid keys: {", ".join(sorted(known))}.',
        )

    return ReleaseGateConfig(
        tag_prefix=_parse_str(raw, 'tag_prefix', 'v'),
        commit_url=_parse_commit_url(raw),
        short_sha_length=_parse_short_sha_length(raw),
        default_bump=_parse_default_bump(raw),
        changelog_breaking_details=_parse_bool(raw, 'changelog_breaking_details', True),
    )


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* looking for a releasegate configuration.

    A ``releasegate.toml`` wins over a ``pyproject.toml`` in the same
    directory; a ``pyproject.toml`` only counts if it has a
    ``[tool.releasegate]`` table.

    Returns:
        The path of the configuration file, or ``None``.
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and 'releasegate' in _read_toml(pyproject).get('tool', {}):
            return pyproject
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open('rb') as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            code=E.CONFIG_INVALID,
            message=f'{path} is not valid TOML: {exc}',
        ) from exc


def load_config(path: Path | None = None) -> ReleaseGateConfig:
    """Load and validate releasegate configuration.

    Args:
        path: A ``releasegate.toml``/``pyproject.toml`` file or a
            directory to search from. When ``None``, the current
            directory and its parents are searched and defaults are
            returned if nothing is found.

    Returns:
        The validated :class:`ReleaseGateConfig`.

    Raises:
        ConfigError: If an explicit *path* does not exist or the
            configuration is invalid.
    """
    if path is None:
        found = find_config()
        if found is None:
            return ReleaseGateConfig()
        path = found
    elif path.is_dir():
        found = find_config(path)
        if found is None:
            return ReleaseGateConfig()
        path = found

    if not path.is_file():
        raise ConfigError(
            code=E.CONFIG_NOT_FOUND,
            message=f'configuration file not found: {path}',
            hint=f'Create {CONFIG_FILENAME} or add a [tool.releasegate] table to {PYPROJECT_FILENAME}.',
        )

    data = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        data = data.get('tool', {}).get('releasegate', {})
        if not isinstance(data, dict):
            raise ConfigError(code=E.CONFIG_INVALID, message=f'[tool.releasegate] in {path} must be a table')
    return _parse_config(data)
