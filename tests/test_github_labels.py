from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from github import GithubException

from shared.github_labels import GithubLabelStore, LabelStoreError
from shared.models import PullRequest


def _store(*, dry_run: bool = False) -> tuple[GithubLabelStore, MagicMock]:
    client = MagicMock()
    return GithubLabelStore("apache/pulsar", "t0ken", dry_run=dry_run, client=client), client


def test_list_repo_labels() -> None:
    store, client = _store()
    client.get_repo.return_value.get_labels.return_value = [
        SimpleNamespace(name="doc"),
        SimpleNamespace(name="bug"),
    ]

    assert store.list_repo_labels() == {"doc", "bug"}
    client.get_repo.assert_called_once_with("apache/pulsar")


def test_list_issue_labels() -> None:
    store, client = _store()
    repo = client.get_repo.return_value
    repo.get_issue.return_value.get_labels.return_value = [SimpleNamespace(name="doc")]

    assert store.list_issue_labels(7) == {"doc"}
    repo.get_issue.assert_called_once_with(7)


def test_read_failure_raises_label_store_error() -> None:
    store, client = _store()
    client.get_repo.return_value.get_labels.side_effect = GithubException(500, {"message": "boom"}, None)

    with pytest.raises(LabelStoreError, match="failed to list labels for apache/pulsar"):
        store.list_repo_labels()


def test_get_pull_request() -> None:
    store, client = _store()
    client.get_repo.return_value.get_pull.return_value = SimpleNamespace(
        body=None,
        user=SimpleNamespace(login="alice"),
    )

    assert store.get_pull_request(7) == PullRequest(number=7, body="", author="alice")


def test_writes_call_pygithub() -> None:
    store, client = _store()
    repo = client.get_repo.return_value
    issue = repo.get_issue.return_value

    assert store.add_labels(7, ["doc", "label-missing"]) is True
    assert store.remove_label(7, "doc-required") is True
    assert store.create_comment(7, "@alice hi") is True
    assert store.edit_body(7, "- [x] `doc`") is True

    issue.add_to_labels.assert_called_once_with("doc", "label-missing")
    issue.remove_from_labels.assert_called_once_with("doc-required")
    issue.create_comment.assert_called_once_with("@alice hi")
    repo.get_pull.return_value.edit.assert_called_once_with(body="- [x] `doc`")


def test_write_failure_is_logged_and_returns_false(capsys) -> None:
    store, client = _store()
    issue = client.get_repo.return_value.get_issue.return_value
    issue.remove_from_labels.side_effect = GithubException(404, {"message": "Label does not exist"}, None)

    assert store.remove_label(7, "doc") is False
    assert store.add_labels(7, ["doc-required"]) is True
    assert "WARN: Failed to remove label 'doc' from #7" in capsys.readouterr().err


def test_dry_run_does_not_write(capsys) -> None:
    store, client = _store(dry_run=True)
    issue = client.get_repo.return_value.get_issue.return_value

    store.add_labels(7, ["doc"])
    store.remove_label(7, "doc-required")
    store.create_comment(7, "hello")
    store.edit_body(7, "body")

    issue.add_to_labels.assert_not_called()
    issue.remove_from_labels.assert_not_called()
    issue.create_comment.assert_not_called()
    client.get_repo.return_value.get_pull.return_value.edit.assert_not_called()
    assert capsys.readouterr().out.count("DRY-RUN: would") == 4
