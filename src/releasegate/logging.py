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

"""Structured logging for releasegate.

The library modules only *emit* events (``bump_resolved``,
``release_planned``, ``unclassified_commit``, ``changelog_merge_*``);
the CI job that drives them calls :func:`configure_logging` once.

Events go to stderr so stdout stays free for the JSON reports::

    configure_logging()               bump_resolved  bump=minor commits=2
    configure_logging(json_log=True)  {"event": "bump_resolved", "bump": "minor", ...}

Commit subjects are logged verbatim. A token pasted into a commit
message would therefore reach the CI log, so every string field is
scrubbed of the current values of the pipeline's secret variables.
Set ``RELEASEGATE_REDACT_SECRETS=0`` to turn that off.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
    'redact_sensitive_values',
]

# Secrets a release pipeline typically holds.
_SENSITIVE_ENV_VARS: frozenset[str] = frozenset({
    'GITHUB_TOKEN',
    'GH_TOKEN',
    'NPM_TOKEN',
    'VSCE_PAT',
    'OVSX_PAT',
    'SLACK_WEBHOOK_URL',
    'TEAMS_WEBHOOK_URL',
})

# Shorter values would match ordinary words in commit messages.
_MIN_SECRET_LENGTH = 8

_REDACTED = '[REDACTED]'

_secret_values: frozenset[str] = frozenset()
_redaction_enabled: bool = True


def _build_secret_values() -> frozenset[str]:
    """Return the non-empty values of the sensitive env vars."""
    return frozenset(value for name in _SENSITIVE_ENV_VARS if (value := os.environ.get(name, '')))


def _scrub(value: object) -> object:
    if not isinstance(value, str):
        return value
    for secret in _secret_values:
        if len(secret) >= _MIN_SECRET_LENGTH:
            value = value.replace(secret, _REDACTED)
    return value


def redact_sensitive_values(
    logger: Any,  # noqa: ANN401
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor replacing secret values with ``[REDACTED]``."""
    if not _secret_values:
        return event_dict
    return {key: _scrub(value) for key, value in event_dict.items()}


def _level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.WARNING
    return logging.DEBUG if verbose else logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
    redact_secrets: bool = True,
) -> None:
    """Route releasegate events through structlog to stderr.

    Args:
        verbose: Also show debug events (changelog merge offsets).
        quiet: Only show warnings and errors; wins over *verbose*.
        json_log: One JSON object per line instead of console output.
        redact_secrets: Scrub secret env var values from events.
            ``RELEASEGATE_REDACT_SECRETS=0`` overrides this.
    """
    global _secret_values, _redaction_enabled  # noqa: PLW0603
    _redaction_enabled = redact_secrets and os.environ.get('RELEASEGATE_REDACT_SECRETS', '1') != '0'
    _secret_values = _build_secret_values() if _redaction_enabled else frozenset()

    logging.basicConfig(format='%(message)s', stream=sys.stderr, level=_level(verbose, quiet), force=True)

    renderer: structlog.types.Processor
    if json_log:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            redact_sensitive_values,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'releasegate') -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named *name*."""
    return structlog.get_logger(name)
