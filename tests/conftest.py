from __future__ import annotations

import re

import pytest

from docbot.utils.config import ActionConfig
from docbot.utils.constants import DEFAULT_LABEL_PATTERN
from docbot.utils.events import PullRequestEvent
from shared.github_labels import LabelStoreError
from shared.models import PullRequest

WATCH_LIST = frozenset({"doc", "doc-required", "doc-not-needed", "doc-complete"})


class FakeLabelStore:
    """In-memory label store recording every write."""

    def __init__(
        self,
        *,
        repo_labels: set[str] | None = None,
        issue_labels: set[str] | None = None,
        body: str = "",
        author: str = "alice",
        fail_reads: bool = False,
        failing_writes: set[str] | None = None,
    ) -> None:
        self.repo_labels = set(repo_labels if repo_labels is not None else WATCH_LIST | {"label-missing", "bug"})
        self.issue_labels = set(issue_labels or set())
        self.body = body
        self.author = author
        self.fail_reads = fail_reads
        self.failing_writes = set(failing_writes or set())
        self.calls: list[tuple] = []

    def list_repo_labels(self) -> set[str]:
        if self.fail_reads:
            raise LabelStoreError("boom")
        return set(self.repo_labels)

    def list_issue_labels(self, number: int) -> set[str]:
        if self.fail_reads:
            raise LabelStoreError("boom")
        return set(self.issue_labels)

    def get_pull_request(self, number: int) -> PullRequest:
        return PullRequest(number=number, body=self.body, author=self.author)

    def add_labels(self, number: int, labels: list[str]) -> bool:
        self.calls.append(("add", tuple(labels)))
        if "add" in self.failing_writes or self.failing_writes.intersection(labels):
            return False
        self.issue_labels.update(labels)
        return True

    def remove_label(self, number: int, label: str) -> bool:
        self.calls.append(("remove", label))
        if label in self.failing_writes:
            return False
        self.issue_labels.discard(label)
        return True

    def create_comment(self, number: int, body: str) -> bool:
        self.calls.append(("comment", body))
        return "comment" not in self.failing_writes

    def edit_body(self, number: int, body: str) -> bool:
        self.calls.append(("edit", body))
        self.body = body
        return True

    def writes(self, kind: str) -> list:
        return [call[1] for call in self.calls if call[0] == kind]


def make_config(**overrides) -> ActionConfig:
    values = dict(
        owner="apache",
        repo="pulsar",
        token="t0ken",
        label_pattern=re.compile(DEFAULT_LABEL_PATTERN),
        label_watch_set=WATCH_LIST,
    )
    values.update(overrides)
    return ActionConfig(**values)


def make_event(action: str, body: str, *, number: int = 42, author: str = "alice") -> PullRequestEvent:
    return PullRequestEvent(
        event_name="pull_request",
        action=action,
        number=number,
        body=body,
        author=author,
    )


@pytest.fixture
def config() -> ActionConfig:
    return make_config()


@pytest.fixture
def pattern() -> re.Pattern[str]:
    return re.compile(DEFAULT_LABEL_PATTERN)
