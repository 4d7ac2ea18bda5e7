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

"""Check that every label managed by the checklist automation exists in the repository.

Checked labels: all entries of LABEL_WATCH_LIST plus LABEL_MISSING (when
ENABLE_LABEL_MISSING is on). Labels that do not exist are silently skipped by
the sync, so run this once after changing the workflow configuration.

Usage:
  python3 -m docbot.check_labels --repo owner/repo
  python3 -m docbot.check_labels --repo owner/repo --labels doc,doc-required,doc-not-needed
"""

from __future__ import annotations

import argparse
import json
import os
import sys

from shared.common import run_gh

from docbot.utils.config import ActionConfig, ConfigError


def fetch_repo_labels(repo: str) -> set[str]:
    """Return the set of label names defined in *repo*."""
    result = run_gh(["label", "list", "--repo", repo, "--json", "name", "--limit", "1000"])
    if result.returncode != 0:
        print(f"ERROR: failed to list labels for {repo}: {result.stderr}", file=sys.stderr)
        raise SystemExit(1)

    try:
        labels = json.loads(result.stdout or "[]")
    except json.JSONDecodeError as exc:
        print(f"ERROR: failed to parse label JSON: {exc}", file=sys.stderr)
        raise SystemExit(1)

    return {str(item.get("name", "")) for item in labels}


def required_labels(config: ActionConfig) -> list[str]:
    labels = sorted(config.label_watch_set)
    if config.enable_label_missing:
        labels.append(config.label_missing)
    return labels


def missing_labels(required: list[str], existing: set[str]) -> list[str]:
    return [label for label in required if label not in existing]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Verify that all labels managed by the checklist automation exist in the repository",
    )
    parser.add_argument(
        "--repo",
        default=os.getenv("GITHUB_REPOSITORY"),
        help="GitHub repository in owner/repo format (default: GITHUB_REPOSITORY)",
    )
    parser.add_argument(
        "--labels",
        default=None,
        help="Comma separated watch list (default: LABEL_WATCH_LIST)",
    )
    args = parser.parse_args(argv)

    env = dict(os.environ)
    if args.repo:
        env["GITHUB_REPOSITORY"] = args.repo
    if args.labels is not None:
        env["LABEL_WATCH_LIST"] = args.labels

    try:
        config = ActionConfig.from_env(env, require_token=False)
    except ConfigError as exc:
        raise SystemExit(f"ERROR: {exc}")

    required = required_labels(config)
    existing = fetch_repo_labels(config.repo_full)
    missing = missing_labels(required, existing)

    if not missing:
        print(f"All {len(required)} required labels exist in {config.repo_full}")
        raise SystemExit(0)

    print(f"ERROR: {len(missing)} required label(s) missing in {config.repo_full}\n", file=sys.stderr)
    print("Missing labels:", file=sys.stderr)
    for label in missing:
        print(f"  - {label}", file=sys.stderr)
    print(f"\nAll required labels:\n  {', '.join(required)}", file=sys.stderr)
    raise SystemExit(1)


if __name__ == "__main__":
    main()
