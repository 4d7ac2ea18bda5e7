#
# Copyright 2026 ABSA Group Limited
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

"""Immutable action configuration, built once from the environment.

Recognised variables::

    GITHUB_REPOSITORY       owner/repo (required)
    GITHUB_TOKEN            access token (required for the sync run)
    LABEL_PATTERN           checklist regex with two groups: mark, name
    LABEL_WATCH_LIST        comma separated label names the bot manages
    ENABLE_LABEL_MISSING    true/false (default true)
    LABEL_MISSING           sentinel label name (default label-missing)
    ENABLE_LABEL_MULTIPLE   true/false (default false)
    LABEL_MISSING_MESSAGE   comment template override
    LABEL_MULTIPLE_MESSAGE  comment template override
    LABEL_GUIDE_URL         link rendered into the comments
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

from shared.common import parse_bool

from .constants import DEFAULT_LABEL_GUIDE_URL, DEFAULT_LABEL_MISSING, DEFAULT_LABEL_PATTERN
from .templates import MESSAGE_LABEL_MISSING, MESSAGE_LABEL_MULTIPLE


class ConfigError(ValueError):
    """The action configuration is invalid."""


def parse_repo_slug(slug: str | None) -> tuple[str, str]:
    parts = (slug or "").strip().split("/")
    if len(parts) != 2 or not all(parts):
        raise ConfigError(f"GITHUB_REPOSITORY must be in owner/repo format, got {slug!r}")
    return parts[0], parts[1]


def parse_watch_list(raw: str | None) -> frozenset[str]:
    return frozenset(name.strip() for name in (raw or "").split(",") if name.strip())


def compile_label_pattern(raw: str | None) -> re.Pattern[str]:
    source = raw or DEFAULT_LABEL_PATTERN
    try:
        pattern = re.compile(source)
    except re.error as exc:
        raise ConfigError(f"LABEL_PATTERN is not a valid regular expression: {exc}") from exc
    if pattern.groups != 2:
        raise ConfigError(
            f"LABEL_PATTERN must define exactly two capture groups (mark, name), got {pattern.groups}"
        )
    return pattern


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    value = parse_bool(environ.get(name), default=default)
    if value is None:
        raise ConfigError(f"{name} must be 'true' or 'false', got {environ.get(name)!r}")
    return value


@dataclass(frozen=True)
class ActionConfig:
    owner: str
    repo: str
    token: str
    label_pattern: re.Pattern[str]
    label_watch_set: frozenset[str]
    label_missing: str = DEFAULT_LABEL_MISSING
    enable_label_missing: bool = True
    enable_label_multiple: bool = False
    message_label_missing: str = MESSAGE_LABEL_MISSING
    message_label_multiple: str = MESSAGE_LABEL_MULTIPLE
    label_guide_url: str = DEFAULT_LABEL_GUIDE_URL

    def __post_init__(self) -> None:
        if not self.label_watch_set:
            raise ConfigError("LABEL_WATCH_LIST must name at least one label")
        if self.label_missing in self.label_watch_set:
            raise ConfigError(
                f"LABEL_MISSING {self.label_missing!r} must not be part of LABEL_WATCH_LIST"
            )

    @property
    def repo_full(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        require_token: bool = True,
    ) -> ActionConfig:
        env = os.environ if environ is None else environ

        owner, repo = parse_repo_slug(env.get("GITHUB_REPOSITORY"))

        token = (env.get("GITHUB_TOKEN") or "").strip()
        if require_token and not token:
            raise ConfigError("GITHUB_TOKEN is required")

        return cls(
            owner=owner,
            repo=repo,
            token=token,
            label_pattern=compile_label_pattern(env.get("LABEL_PATTERN")),
            label_watch_set=parse_watch_list(env.get("LABEL_WATCH_LIST")),
            label_missing=(env.get("LABEL_MISSING") or "").strip() or DEFAULT_LABEL_MISSING,
            enable_label_missing=_env_bool(env, "ENABLE_LABEL_MISSING", True),
            enable_label_multiple=_env_bool(env, "ENABLE_LABEL_MULTIPLE", False),
            message_label_missing=env.get("LABEL_MISSING_MESSAGE") or MESSAGE_LABEL_MISSING,
            message_label_multiple=env.get("LABEL_MULTIPLE_MESSAGE") or MESSAGE_LABEL_MULTIPLE,
            label_guide_url=(env.get("LABEL_GUIDE_URL") or "").strip() or DEFAULT_LABEL_GUIDE_URL,
        )
