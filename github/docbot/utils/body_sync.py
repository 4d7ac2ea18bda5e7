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

"""Checklist write-back – after a label was changed directly on the PR, flip
(or append) the matching ``- [ ] `name``` lines so the body agrees with the
labels again.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .constants import BODY_LINE_SEP, CHECKBOX_LINE, CHECKED_MARK


def checkbox_line(name: str, checked: bool) -> str:
    return CHECKBOX_LINE.format(mark=CHECKED_MARK if checked else " ", name=name)


@dataclass(frozen=True)
class BodyEditPlan:
    substitutions: tuple[tuple[str, str], ...] = ()
    appended_lines: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.substitutions or self.appended_lines)


def pending_changes(
    current: Iterable[str],
    desired: Mapping[str, bool],
    missing_label: str | None = None,
) -> dict[str, bool]:
    """Return ``label -> checked`` for every checkbox that has to flip."""
    current_set = {label for label in current if label != missing_label}
    changes: dict[str, bool] = {}

    for label in current_set:
        if desired.get(label):
            continue
        changes[label] = True

    for label, checked in desired.items():
        if checked and label not in current_set:
            changes[label] = False

    return dict(sorted(changes.items()))


def plan_body_edits(
    body: str | None,
    current: Iterable[str],
    desired: Mapping[str, bool],
    missing_label: str | None = None,
) -> BodyEditPlan:
    text = body or ""
    substitutions: list[tuple[str, str]] = []
    appended: list[str] = []

    for label, checked in pending_changes(current, desired, missing_label).items():
        src = checkbox_line(label, not checked)
        dst = checkbox_line(label, checked)
        if src in text:
            substitutions.append((src, dst))
        else:
            appended.append(dst)

    return BodyEditPlan(substitutions=tuple(substitutions), appended_lines=tuple(appended))


def apply_body_edits(body: str | None, plan: BodyEditPlan) -> str:
    text = body or ""
    for src, dst in plan.substitutions:
        text = text.replace(src, dst, 1)
    for line in plan.appended_lines:
        text = f"{text}{BODY_LINE_SEP}{line}{BODY_LINE_SEP}"
    return text


def sync_body(
    body: str | None,
    current: Iterable[str],
    desired: Mapping[str, bool],
    missing_label: str | None = None,
) -> tuple[str, bool]:
    """Return ``(new_body, changed)`` for the labels now on the PR."""
    plan = plan_body_edits(body, current, desired, missing_label)
    return apply_body_edits(body, plan), bool(plan)
