"""Transition Detection - decides whether a mutation moved a record INTO high-value.

Invariants:
    - Creation (prior_flag is None): event iff new_flag
    - Update: event iff new_flag and not prior_flag
    - true -> false and true -> true never produce an event

Design Decisions:
    - Asymmetric on purpose: the audit trail records entering the high-value
      state only, leaving it is not audited
"""


def is_newly_high_value(prior_flag: bool | None, new_flag: bool) -> bool:
    if not new_flag:
        return False
    if prior_flag is None:
        return True
    return not prior_flag
