from __future__ import annotations

import re

from conftest import WATCH_LIST

from docbot.utils.body_sync import BodyEditPlan, checkbox_line, plan_body_edits, sync_body
from docbot.utils.extractor import extract_labels

MISSING = "label-missing"

BODY = "Docs:\r\n- [ ] `doc`\r\n- [x] `doc-required`\r\n- [ ] `doc-complete`\r\n"


def test_checkbox_line() -> None:
    assert checkbox_line("doc", True) == "- [x] `doc`"
    assert checkbox_line("doc", False) == "- [ ] `doc`"


def test_added_label_is_checked_and_old_one_unchecked() -> None:
    desired = {"doc": False, "doc-required": True, "doc-complete": False}

    body, changed = sync_body(BODY, {"doc"}, desired, MISSING)

    assert changed is True
    assert body == "Docs:\r\n- [x] `doc`\r\n- [ ] `doc-required`\r\n- [ ] `doc-complete`\r\n"


def test_missing_checklist_line_is_appended() -> None:
    body, changed = sync_body("Some description", {"doc"}, {}, MISSING)

    assert changed is True
    assert body == "Some description\r\n- [x] `doc`\r\n"


def test_only_first_occurrence_is_replaced() -> None:
    body, _ = sync_body("- [ ] `doc`\n- [ ] `doc`\n", {"doc"}, {"doc": False})

    assert body == "- [x] `doc`\n- [ ] `doc`\n"


def test_sentinel_is_never_written_to_body() -> None:
    body, changed = sync_body(BODY, {MISSING, "doc-required"}, {"doc-required": True}, MISSING)

    assert changed is False
    assert body == BODY


def test_in_sync_body_is_unchanged() -> None:
    body, changed = sync_body(BODY, {"doc-required"}, {"doc": False, "doc-required": True})

    assert changed is False
    assert body == BODY


def test_plan_lists_substitutions_and_appends() -> None:
    plan = plan_body_edits(BODY, {"doc", "doc-not-needed"}, {"doc-required": True}, MISSING)

    assert plan == BodyEditPlan(
        substitutions=(
            ("- [ ] `doc`", "- [x] `doc`"),
            ("- [x] `doc-required`", "- [ ] `doc-required`"),
        ),
        appended_lines=("- [x] `doc-not-needed`",),
    )
    assert not BodyEditPlan()


def test_synced_body_extracts_back_to_current_labels(pattern: re.Pattern[str]) -> None:
    current = {"doc", "doc-not-needed"}
    desired = extract_labels(BODY, pattern, WATCH_LIST)

    body, _ = sync_body(BODY, current, desired, MISSING)

    checked = {name for name, is_checked in extract_labels(body, pattern, WATCH_LIST).items() if is_checked}
    assert checked == current
