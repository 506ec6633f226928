"""Audit Entries - tests for pure log-entry draft construction."""

from dataclasses import FrozenInstanceError
from uuid import uuid4

import pytest

from value_audit.core.audit_entries import LogEntryDraft, build_log_entries
from value_audit.core.domain_types import DEFAULT_AUDIT_ACTION_LABEL


def test_one_entry_per_identity_in_order():
    ids = [uuid4(), uuid4(), uuid4()]
    entries = build_log_entries(ids)
    assert [e.record_id for e in entries] == ids


def test_default_action_label():
    entries = build_log_entries([uuid4()])
    assert entries[0].action == "Marked High Value"
    assert DEFAULT_AUDIT_ACTION_LABEL == "Marked High Value"


def test_custom_action_label_applied_to_all():
    entries = build_log_entries([uuid4(), uuid4()], action="Flagged")
    assert {e.action for e in entries} == {"Flagged"}


def test_duplicate_identities_produce_one_entry_each():
    rid = uuid4()
    assert len(build_log_entries([rid, rid])) == 2


def test_empty_input_builds_nothing():
    assert build_log_entries([]) == []


def test_drafts_are_immutable():
    entry = LogEntryDraft(record_id=uuid4())
    with pytest.raises(FrozenInstanceError):
        entry.action = "Changed"
