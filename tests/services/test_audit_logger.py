"""Audit Logger - tests for the bulk-safe audit write.

Tests cover:
    - empty input issues no repository call
    - N identities -> exactly one add_many call with N entries
    - configured action label applied to every entry
    - repository failure propagates unchanged, nothing stored
"""

from uuid import uuid4

import pytest

from value_audit.core.errors import PersistenceError
from value_audit.services.audit_logger import AuditLogger


async def test_empty_events_issue_no_write(audit_logger, audit_repo):
    written = await audit_logger.log_events([])
    assert written == 0
    assert audit_repo.calls == []


async def test_single_event_single_write(audit_logger, audit_repo):
    rid = uuid4()
    written = await audit_logger.log_events([rid])
    assert written == 1
    assert len(audit_repo.calls) == 1
    assert audit_repo.rows[0].record_id == rid
    assert audit_repo.rows[0].action == "Marked High Value"


async def test_many_events_one_write(audit_logger, audit_repo):
    ids = [uuid4() for _ in range(250)]
    await audit_logger.log_events(ids)
    assert len(audit_repo.calls) == 1
    assert [e.record_id for e in audit_repo.calls[0]] == ids


async def test_custom_action_label(audit_repo):
    logger = AuditLogger(audit_repo, action_label="Entered High Value")
    assert logger.action_label == "Entered High Value"
    await logger.log_events([uuid4(), uuid4()])
    assert {e.action for e in audit_repo.rows} == {"Entered High Value"}


async def test_failure_propagates_and_stores_nothing(audit_logger, audit_repo):
    ids = [uuid4(), uuid4()]
    audit_repo.fail_with = PersistenceError(
        "constraint violated", rejected_entries=[ids[1]],
    )
    with pytest.raises(PersistenceError) as exc:
        await audit_logger.log_events(ids)
    assert exc.value.rejected_entries == [ids[1]]
    assert len(audit_repo.calls) == 1
    assert audit_repo.rows == []
