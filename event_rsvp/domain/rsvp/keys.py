"""Attendance table key scheme.

All records for one event share the partition key ``EVENT#<event_id>``.
Sort keys tell respondent records (``RESPONDENT#<email>``) apart from
counter records (``RESPONSE#<value>``).
"""

PARTITION_KEY = "pk"
SORT_KEY = "sk"

EVENT_PREFIX = "EVENT#"
RESPONDENT_PREFIX = "RESPONDENT#"
RESPONSE_PREFIX = "RESPONSE#"


def event_partition_key(event_id: str) -> str:
    return f"{EVENT_PREFIX}{event_id}"


def respondent_sort_key(email: str) -> str:
    return f"{RESPONDENT_PREFIX}{email}"


def counter_sort_key(response: str) -> str:
    return f"{RESPONSE_PREFIX}{response}"


def respondent_key(event_id: str, email: str) -> dict[str, str]:
    """Primary key of a respondent record."""
    return {
        PARTITION_KEY: event_partition_key(event_id),
        SORT_KEY: respondent_sort_key(email),
    }


def counter_key(event_id: str, response: str) -> dict[str, str]:
    """Primary key of a counter record."""
    return {
        PARTITION_KEY: event_partition_key(event_id),
        SORT_KEY: counter_sort_key(response),
    }


def _strip_prefix(sort_key: str, prefix: str) -> str:
    if not sort_key.startswith(prefix):
        raise ValueError(f"Sort key {sort_key!r} does not start with {prefix!r}")
    return sort_key[len(prefix):]


def response_from_counter_key(sort_key: str) -> str:
    return _strip_prefix(sort_key, RESPONSE_PREFIX)


def email_from_respondent_key(sort_key: str) -> str:
    return _strip_prefix(sort_key, RESPONDENT_PREFIX)
