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

"""GitHub Actions event context – reads ``GITHUB_EVENT_NAME`` and the JSON
payload at ``GITHUB_EVENT_PATH`` and decodes pull-request events into a
typed :class:`PullRequestEvent` once, at the boundary.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .constants import PULL_REQUEST_EVENTS


class EventDecodeError(ValueError):
    """The event payload does not have the expected shape."""


@dataclass(frozen=True)
class GithubContext:
    event_name: str
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def is_pull_request(self) -> bool:
        return self.event_name in PULL_REQUEST_EVENTS


@dataclass(frozen=True)
class PullRequestEvent:
    event_name: str
    action: str
    number: int
    body: str
    author: str


def load_github_context(
    environ: Mapping[str, str] | None = None,
    *,
    event_name: str | None = None,
    event_path: str | None = None,
) -> GithubContext:
    env = os.environ if environ is None else environ
    name = event_name or env.get("GITHUB_EVENT_NAME") or ""
    path = event_path or env.get("GITHUB_EVENT_PATH") or ""

    if not name:
        raise EventDecodeError("GITHUB_EVENT_NAME is not set")
    if not path:
        raise EventDecodeError("GITHUB_EVENT_PATH is not set")

    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise EventDecodeError(f"failed to read event payload {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise EventDecodeError(f"event payload is not a JSON object: {path}")

    return GithubContext(event_name=name, payload=payload)


def parse_pull_request_event(context: GithubContext) -> PullRequestEvent:
    payload = context.payload

    action = payload.get("action")
    if not isinstance(action, str):
        raise EventDecodeError(f"action is not a string: {action!r}")

    pull_request = payload.get("pull_request")
    if not isinstance(pull_request, dict):
        raise EventDecodeError("pull_request is not an object")

    number = payload.get("number", pull_request.get("number"))
    if isinstance(number, bool) or not isinstance(number, (int, float)) or int(number) != number:
        raise EventDecodeError(f"number is not an integer: {number!r}")

    # GitHub sends null for an empty description.
    body = pull_request.get("body")
    if body is None:
        body = ""
    if not isinstance(body, str):
        raise EventDecodeError(f"pull_request.body is not a string: {type(body).__name__}")

    user = pull_request.get("user") or {}
    author = user.get("login") if isinstance(user, dict) else None
    if not isinstance(author, str) or not author:
        raise EventDecodeError("pull_request.user.login is missing")

    return PullRequestEvent(
        event_name=context.event_name,
        action=action,
        number=int(number),
        body=body,
        author=author,
    )
