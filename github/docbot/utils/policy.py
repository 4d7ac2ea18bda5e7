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

"""Label policy – computes which labels to add / remove and whether the
single-selection or missing-label rules are violated.

Two entry points:

* :func:`evaluate` – the PR body is the source of truth (opened / edited).
* :func:`evaluate_label_change` – the PR labels are the source of truth
  (labeled / unlabeled); the body is rewritten afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class ReconciliationPlan:
    to_add: frozenset[str] = frozenset()
    to_remove: frozenset[str] = frozenset()
    violates_multiple: bool = False
    needs_missing_label: bool = False


def current_label_set(
    issue_labels: Iterable[str],
    watch_set: Iterable[str],
    missing_label: str,
) -> set[str]:
    """Restrict the issue labels to the watched ones plus the sentinel."""
    watched = set(watch_set)
    return {label for label in issue_labels if label in watched or label == missing_label}


def split_known_labels(
    desired: Mapping[str, bool],
    repo_labels: Iterable[str],
) -> tuple[dict[str, bool], list[str]]:
    """Split *desired* into labels defined in the repository and unknown names."""
    known_names = set(repo_labels)
    known: dict[str, bool] = {}
    unknown: list[str] = []
    for label, checked in desired.items():
        if label in known_names:
            known[label] = checked
        else:
            unknown.append(label)
    return known, unknown


def evaluate(
    current: Iterable[str],
    desired: Mapping[str, bool],
    repo_labels: Iterable[str],
    watch_set: Iterable[str],
    missing_label: str,
    enable_missing: bool,
    enable_multiple: bool,
) -> ReconciliationPlan:
    current_set = set(current)
    expected, _ = split_known_labels(desired, repo_labels)
    checked_count = sum(1 for checked in expected.values() if checked)

    if not enable_multiple and checked_count > 1:
        return ReconciliationPlan(violates_multiple=True)

    to_remove: set[str] = set()
    if not expected:
        # Nothing recognised in the body clears every managed label.
        to_remove = {label for label in watch_set if label in current_set}
    else:
        for label in current_set:
            if label == missing_label:
                continue
            if expected.get(label):
                continue
            to_remove.add(label)

    if missing_label in current_set and checked_count > 0:
        to_remove.add(missing_label)

    to_add = {label for label, checked in expected.items() if checked and label not in current_set}

    return ReconciliationPlan(
        to_add=frozenset(to_add),
        to_remove=frozenset(to_remove),
        needs_missing_label=enable_missing and checked_count == 0,
    )


def evaluate_label_change(
    current: Iterable[str],
    watch_set: Iterable[str],
    missing_label: str,
    enable_missing: bool,
    enable_multiple: bool,
) -> ReconciliationPlan:
    current_set = set(current)
    watched = set(watch_set)
    selected_count = sum(1 for label in current_set if label in watched and label != missing_label)

    if not enable_multiple and selected_count > 1:
        return ReconciliationPlan(violates_multiple=True)

    to_remove: frozenset[str] = frozenset()
    if missing_label in current_set and selected_count > 0:
        to_remove = frozenset({missing_label})

    return ReconciliationPlan(
        to_remove=to_remove,
        needs_missing_label=enable_missing and selected_count == 0,
    )
