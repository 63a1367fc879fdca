"""
Field-level error reports.

Validation rules never mutate a shared error collection. Each rule returns a
fresh mapping from field name to messages and callers merge the results.
"""

from collections.abc import Mapping

FieldErrors = dict[str, list[str]]


def field_error(field: str, message: str) -> FieldErrors:
    """Build a report holding a single error for ``field``."""
    return {field: [message]}


def merge_field_errors(*reports: Mapping[str, list[str]]) -> FieldErrors:
    """Combine reports, keeping message order and first-seen field order."""
    merged: FieldErrors = {}
    for report in reports:
        for field, messages in report.items():
            merged.setdefault(field, []).extend(messages)
    return merged
