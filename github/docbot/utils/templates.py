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

"""Markdown templates for the author-directed PR comments.

Placeholders: ``author``, ``labels`` (the watch list), ``label_missing`` and
``guide_url``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared.templates import render_markdown_template

if TYPE_CHECKING:
    from .config import ActionConfig


MESSAGE_LABEL_MISSING = """@{{ author }} Please provide a correct documentation label for your PR.
Check exactly one of the following boxes in the PR description: {{ labels }}.
Instructions see [Documentation Label Guide]({{ guide_url }})."""

MESSAGE_LABEL_MULTIPLE = """@{{ author }} Please select only one documentation label for your PR.
Keep exactly one of the following boxes checked in the PR description: {{ labels }}.
Instructions see [Documentation Label Guide]({{ guide_url }})."""


def _template_values(config: ActionConfig, author: str) -> dict[str, object]:
    return {
        "author": author,
        "labels": config.label_watch_set,
        "label_missing": config.label_missing,
        "guide_url": config.label_guide_url,
    }


def render_missing_comment(config: ActionConfig, author: str) -> str:
    return render_markdown_template(config.message_label_missing, _template_values(config, author))


def render_multiple_comment(config: ActionConfig, author: str) -> str:
    return render_markdown_template(config.message_label_multiple, _template_values(config, author))
