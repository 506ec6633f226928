"""Error Hierarchy - tests for codes, categories and structured output."""

from uuid import uuid4

from value_audit.core.errors import (
    ContractViolationError, ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidInputError, PersistenceError, ValueAuditError,
)


def test_all_errors_share_base():
    assert issubclass(InvalidInputError, ValueAuditError)
    assert issubclass(ContractViolationError, ValueAuditError)
    assert issubclass(PersistenceError, ValueAuditError)


def test_invalid_input_is_validation_error():
    err = InvalidInputError("missing", "batch")
    assert err.code == "INVALID_INPUT"
    assert err.category == ErrorCategory.VALIDATION
    assert err.severity == ErrorSeverity.ERROR


def test_contract_violation_carries_record_ids():
    rid = uuid4()
    err = ContractViolationError("missing prior", record_ids=[rid])
    assert err.code == "CONTRACT_VIOLATION"
    assert err.category == ErrorCategory.CONTRACT
    assert err.record_ids == [rid]


def test_persistence_error_without_rejected_entries():
    err = PersistenceError("capacity limit")
    assert err.code == "PERSISTENCE_ERROR"
    assert err.operation == "bulk_insert"
    assert err.rejected_entries is None
    assert "capacity limit" in err.message


def test_persistence_error_with_rejected_entries():
    err = PersistenceError("constraint", rejected_entries=("a", "b"))
    assert err.rejected_entries == ["a", "b"]


def test_to_dict_includes_context():
    ctx = ErrorContext(phase="after", operation="update", batch_size=3)
    data = PersistenceError("boom", context=ctx).to_dict()
    assert data["code"] == "PERSISTENCE_ERROR"
    assert data["category"] == "database"
    assert data["severity"] == "critical"
    assert data["context"]["phase"] == "after"
    assert data["context"]["operation"] == "update"
    assert data["context"]["batch_size"] == 3
