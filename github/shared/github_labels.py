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

"""GitHub label / pull-request operations via PyGithub – list repository and
issue labels, add / remove labels, comment, and edit the PR body.

Reads raise :class:`LabelStoreError` (callers treat them as fatal); writes
log a warning and return ``False`` so one failing call never blocks the rest.
"""

from __future__ import annotations

import sys
from typing import Any

import requests
from github import Auth, Github, GithubException

from .common import vprint
from .models import PullRequest

PER_PAGE = 100

_API_ERRORS = (GithubException, requests.RequestException)


class LabelStoreError(RuntimeError):
    """Reading label or pull-request state from GitHub failed."""


class GithubLabelStore:
    def __init__(
        self,
        repo_full: str,
        token: str,
        *,
        dry_run: bool = False,
        client: Any | None = None,
    ) -> None:
        self.repo_full = repo_full
        self.dry_run = dry_run
        self._client = client if client is not None else Github(auth=Auth.Token(token), per_page=PER_PAGE)
        self._repo: Any | None = None
        self._issues: dict[int, Any] = {}

    def _get_repo(self) -> Any:
        if self._repo is None:
            try:
                self._repo = self._client.get_repo(self.repo_full)
            except _API_ERRORS as exc:
                raise LabelStoreError(f"failed to load repository {self.repo_full}: {exc}") from exc
        return self._repo

    def _get_issue(self, number: int) -> Any:
        if number not in self._issues:
            self._issues[number] = self._get_repo().get_issue(number)
        return self._issues[number]

    # -- reads ---------------------------------------------------------------

    def list_repo_labels(self) -> set[str]:
        """Return every label name defined in the repository (all pages)."""
        try:
            return {label.name for label in self._get_repo().get_labels()}
        except _API_ERRORS as exc:
            raise LabelStoreError(f"failed to list labels for {self.repo_full}: {exc}") from exc

    def list_issue_labels(self, number: int) -> set[str]:
        """Return the label names currently attached to issue / PR *number*."""
        try:
            return {label.name for label in self._get_issue(number).get_labels()}
        except _API_ERRORS as exc:
            raise LabelStoreError(f"failed to list labels for #{number}: {exc}") from exc

    def get_pull_request(self, number: int) -> PullRequest:
        try:
            pr = self._get_repo().get_pull(number)
            return PullRequest(number=number, body=pr.body or "", author=pr.user.login)
        except _API_ERRORS as exc:
            raise LabelStoreError(f"failed to get PR #{number}: {exc}") from exc

    # -- writes --------------------------------------------------------------

    def add_labels(self, number: int, labels: list[str]) -> bool:
        if not labels:
            return True

        if self.dry_run:
            print(f"DRY-RUN: would add labels {labels} to #{number}")
            return True

        try:
            self._get_issue(number).add_to_labels(*labels)
        except _API_ERRORS as exc:
            print(f"WARN: Failed to add labels {labels} to #{number}: {exc}", file=sys.stderr)
            return False

        vprint(f"Added labels {labels} to #{number}")
        return True

    def remove_label(self, number: int, label: str) -> bool:
        if self.dry_run:
            print(f"DRY-RUN: would remove label {label!r} from #{number}")
            return True

        try:
            self._get_issue(number).remove_from_labels(label)
        except _API_ERRORS as exc:
            print(f"WARN: Failed to remove label {label!r} from #{number}: {exc}", file=sys.stderr)
            return False

        vprint(f"Removed label {label!r} from #{number}")
        return True

    def create_comment(self, number: int, body: str) -> bool:
        if self.dry_run:
            print(f"DRY-RUN: would comment on #{number}: {body!r}")
            return True

        try:
            self._get_issue(number).create_comment(body)
        except _API_ERRORS as exc:
            print(f"Failed to comment on #{number}: {exc}", file=sys.stderr)
            return False

        return True

    def edit_body(self, number: int, body: str) -> bool:
        if self.dry_run:
            print(f"DRY-RUN: would update PR #{number} body")
            vprint(body)
            return True

        try:
            self._get_repo().get_pull(number).edit(body=body)
        except _API_ERRORS as exc:
            print(f"Failed to edit body for #{number}: {exc}", file=sys.stderr)
            return False

        print(f"Updated PR #{number} body")
        return True
