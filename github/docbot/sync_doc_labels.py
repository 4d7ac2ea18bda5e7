#!/usr/bin/env python3
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

"""Sync pull-request labels with the label checklist in the PR description.

Triggered by ``pull_request`` / ``pull_request_target`` events
(opened, edited, labeled, unlabeled). Other events are accepted and ignored.

Rules:
- The checklist (``- [x] `doc```) decides the labels on opened / edited.
- A label added directly on the PR is written back into the checklist.
- Only one watched label may be selected unless ENABLE_LABEL_MULTIPLE=true.
- No selection adds LABEL_MISSING, comments to the author and fails the run.

Configuration comes from the environment, see ``docbot.utils.config``.

Draft / debug (no writes):
    `python3 -m docbot.sync_doc_labels --dry-run --event-path event.json --event-name pull_request`
"""

from __future__ import annotations

import argparse
import json
import sys

from shared.common import is_verbose, parse_runner_debug, set_verbose_enabled, vprint
from shared.github_labels import GithubLabelStore, LabelStoreError

from docbot.utils.config import ActionConfig, ConfigError
from docbot.utils.dispatcher import Outcome, dispatch
from docbot.utils.events import EventDecodeError, load_github_context, parse_pull_request_event


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Sync PR labels with the label checklist in the PR body")
    p.add_argument("--event-name", default=None, help="Override GITHUB_EVENT_NAME")
    p.add_argument("--event-path", default=None, help="Override GITHUB_EVENT_PATH")
    p.add_argument("--dry-run", action="store_true", help="Print intended label / body changes without writing")
    p.add_argument("--verbose", action="store_true", help="Verbose logging (same as RUNNER_DEBUG=1)")
    return p.parse_args(argv)


def run(args: argparse.Namespace) -> Outcome:
    try:
        config = ActionConfig.from_env()
    except ConfigError as exc:
        raise SystemExit(f"ERROR: {exc}")

    try:
        context = load_github_context(event_name=args.event_name, event_path=args.event_path)
    except EventDecodeError as exc:
        raise SystemExit(f"ERROR: {exc}")

    if is_verbose():
        vprint(f"GitHub context: event={context.event_name} payload={json.dumps(context.payload)}")

    if not context.is_pull_request:
        print(f"Event {context.event_name!r} is not a pull request event, nothing to do")
        return Outcome.SKIPPED

    try:
        event = parse_pull_request_event(context)
    except EventDecodeError as exc:
        raise SystemExit(f"ERROR: invalid {context.event_name} payload: {exc}")

    print(f"Processing {event.event_name}/{event.action} for PR #{event.number} in {config.repo_full}")

    store = GithubLabelStore(config.repo_full, config.token, dry_run=args.dry_run)
    try:
        return dispatch(config, store, event)
    except LabelStoreError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        raise SystemExit(1)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    set_verbose_enabled(args.verbose or parse_runner_debug())

    outcome = run(args)
    print(f"Result: {outcome}")
    if outcome.failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
