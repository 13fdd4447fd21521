# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Runnable demo showing guards over untrusted JSON payloads.

Run with:

    python examples/payload_validation_demo.py

The script shows:

1. A collaborator-written guard built from the structural helpers.
2. Branch-style checks that never raise.
3. Strict checks that raise GuardTypeError with a readable message.
"""

from __future__ import annotations

import json
import logging

from shapeguard import (
    FAILURE,
    GuardTypeError,
    create_type_guard,
    is_null,
    is_number,
    is_string,
    is_tuple,
)

STATUSES = ("open", "closed")

is_bounds_or_null = is_tuple.or_(2, is_null)

PAYLOADS = [
    '{"id": 1, "title": "Fix login", "status": "open", "bounds": [0, 10]}',
    '{"id": 2, "title": "", "status": "open"}',
    '{"id": "3", "title": "Docs", "status": "closed", "bounds": null}',
    '{"id": 4, "title": "Release", "status": "archived"}',
]


def parse_ticket(value, helpers):
    if (
        helpers.has(value, "id", is_number)
        and helpers.has(value, "title", is_string.not_empty)
        and helpers.has(value, "status", lambda s: helpers.includes(STATUSES, s))
        and helpers.has_optional(value, "bounds", is_bounds_or_null)
    ):
        return value
    return FAILURE


is_ticket = create_type_guard(parse_ticket, name="is_ticket")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("--- branch-style checks ---")
    for raw in PAYLOADS:
        payload = json.loads(raw)
        print(f"{'valid  ' if is_ticket(payload) else 'invalid'} {raw}")

    print("\n--- strict checks ---")
    for raw in PAYLOADS:
        try:
            is_ticket.strict(json.loads(raw))
        except GuardTypeError as error:
            print(f"rejected: {error}")
        else:
            print("accepted")


if __name__ == "__main__":
    main()
