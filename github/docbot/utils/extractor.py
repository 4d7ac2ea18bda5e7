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

"""Checklist parsing – turns a PR body into a ``label -> checked`` mapping."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import NamedTuple

from .constants import CHECKED_MARK


class CheckboxEntry(NamedTuple):
    checked: bool
    name: str


def iter_checkbox_entries(text: str | None, pattern: re.Pattern[str]) -> Iterator[CheckboxEntry]:
    """Yield one entry per pattern match, left to right."""
    for match in pattern.finditer(text or ""):
        mark, name = match.group(1), match.group(2)
        yield CheckboxEntry(
            checked=(mark or "").strip().lower() == CHECKED_MARK,
            name=(name or "").strip(),
        )


def extract_labels(
    text: str | None,
    pattern: re.Pattern[str],
    watch_set: Iterable[str],
) -> dict[str, bool]:
    """Return the watched labels found in *text* with their checked state.

    Names outside *watch_set* are ignored. When a label appears more than
    once the last occurrence wins. No match yields an empty dict.
    """
    watched = set(watch_set)
    labels: dict[str, bool] = {}
    for entry in iter_checkbox_entries(text, pattern):
        if entry.name not in watched:
            continue
        labels[entry.name] = entry.checked
    return labels
