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

"""Event orchestration – routes a pull-request event to the checklist /
label reconciliation and turns the resulting plan into label-store calls.

This is the main business-logic module that ties together all other
``utils.*`` modules. Reads from the label store are fatal when they fail
(:class:`shared.github_labels.LabelStoreError` propagates); individual
writes are logged by the store and the run carries on.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import StrEnum

from shared.common import vprint
from shared.github_labels import GithubLabelStore
from shared.models import PullRequest

from .body_sync import sync_body
from .config import ActionConfig
from .constants import ACTION_EDITED, ACTION_LABELED, ACTION_OPENED, ACTION_UNLABELED
from .events import PullRequestEvent
from .extractor import extract_labels
from .policy import (
    ReconciliationPlan,
    current_label_set,
    evaluate,
    evaluate_label_change,
    split_known_labels,
)
from .templates import render_missing_comment, render_multiple_comment


class Outcome(StrEnum):
    OK = "ok"
    SKIPPED = "skipped"
    LABEL_MISSING = "label-missing"
    LABEL_MULTIPLE = "label-multiple"

    @property
    def failed(self) -> bool:
        return self in (Outcome.LABEL_MISSING, Outcome.LABEL_MULTIPLE)


@dataclass
class LabelState:
    """Everything read from GitHub before any decision is taken."""
    pr: PullRequest
    repo_labels: set[str]
    current: set[str]
    desired: dict[str, bool]


def _fmt(labels) -> str:
    return ", ".join(sorted(labels)) or "(none)"


def load_label_state(
    config: ActionConfig,
    store: GithubLabelStore,
    event: PullRequestEvent,
    *,
    body_from_store: bool = False,
) -> LabelState:
    """Read the PR, repository and issue labels.

    With *body_from_store* the checklist is read from the fetched PR body, the
    same text the body write-back edits, instead of the event payload.
    """
    pr = store.get_pull_request(event.number)

    repo_labels = store.list_repo_labels()
    vprint(f"Repo labels: {_fmt(repo_labels)}")

    issue_labels = store.list_issue_labels(event.number)
    vprint(f"Issue labels: {_fmt(issue_labels)}")

    current = current_label_set(issue_labels, config.label_watch_set, config.label_missing)
    print(f"Current labels on #{event.number}: {_fmt(current)}")

    body = pr.body if body_from_store else event.body
    extracted = extract_labels(body, config.label_pattern, config.label_watch_set)
    desired, unknown = split_known_labels(extracted, repo_labels)
    for label in unknown:
        print(f"WARN: Label {label!r} is checked in the PR body but does not exist in {config.repo_full}", file=sys.stderr)
    print(f"Expected labels: {desired}")

    return LabelState(pr=pr, repo_labels=repo_labels, current=current, desired=desired)


def _notify_multiple(config: ActionConfig, store: GithubLabelStore, state: LabelState) -> Outcome:
    print("Multiple labels detected", file=sys.stderr)
    store.create_comment(state.pr.number, render_multiple_comment(config, state.pr.author))
    return Outcome.LABEL_MULTIPLE


def _notify_missing(config: ActionConfig, store: GithubLabelStore, state: LabelState) -> Outcome:
    print(f"No label selected, adding {config.label_missing!r}", file=sys.stderr)
    if config.label_missing not in state.current:
        store.add_labels(state.pr.number, [config.label_missing])
    store.create_comment(state.pr.number, render_missing_comment(config, state.pr.author))
    return Outcome.LABEL_MISSING


def _remove_labels(store: GithubLabelStore, number: int, labels: frozenset[str]) -> None:
    if not labels:
        return
    print(f"Labels to remove: {_fmt(labels)}")
    for label in sorted(labels):
        store.remove_label(number, label)


def _add_labels(store: GithubLabelStore, number: int, labels: frozenset[str]) -> None:
    if not labels:
        print("No labels to add.")
        return
    print(f"Labels to add: {_fmt(labels)}")
    for label in sorted(labels):
        store.add_labels(number, [label])


def on_opened_or_edited(
    config: ActionConfig,
    store: GithubLabelStore,
    event: PullRequestEvent,
) -> Outcome:
    state = load_label_state(config, store, event)

    plan: ReconciliationPlan = evaluate(
        state.current,
        state.desired,
        state.repo_labels,
        config.label_watch_set,
        config.label_missing,
        config.enable_label_missing,
        config.enable_label_multiple,
    )
    vprint(f"Plan: {plan}")

    if plan.violates_multiple:
        return _notify_multiple(config, store, state)

    _remove_labels(store, event.number, plan.to_remove)
    _add_labels(store, event.number, plan.to_add)

    if plan.needs_missing_label:
        return _notify_missing(config, store, state)

    return Outcome.OK


def on_labeled_or_unlabeled(
    config: ActionConfig,
    store: GithubLabelStore,
    event: PullRequestEvent,
) -> Outcome:
    state = load_label_state(config, store, event, body_from_store=True)

    plan = evaluate_label_change(
        state.current,
        config.label_watch_set,
        config.label_missing,
        config.enable_label_missing,
        config.enable_label_multiple,
    )
    vprint(f"Plan: {plan}")

    if plan.violates_multiple:
        return _notify_multiple(config, store, state)

    _remove_labels(store, event.number, plan.to_remove)

    if plan.needs_missing_label:
        return _notify_missing(config, store, state)

    if event.action == ACTION_UNLABELED:
        return Outcome.OK

    body, changed = sync_body(state.pr.body, state.current, state.desired, config.label_missing)
    if changed:
        print(f"Updating checklist in PR #{event.number} body")
        store.edit_body(event.number, body)
    else:
        vprint("PR body already matches labels")

    return Outcome.OK


def dispatch(
    config: ActionConfig,
    store: GithubLabelStore,
    event: PullRequestEvent,
) -> Outcome:
    if event.action in (ACTION_OPENED, ACTION_EDITED):
        return on_opened_or_edited(config, store, event)
    if event.action in (ACTION_LABELED, ACTION_UNLABELED):
        return on_labeled_or_unlabeled(config, store, event)

    print(f"Ignoring pull request action {event.action!r}")
    return Outcome.SKIPPED
