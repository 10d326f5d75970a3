"""Response envelopes returned by ``/api/data``."""

from __future__ import annotations

from typing import Any

from ..core.coordinator import WindowResult


def success_payload(result: WindowResult) -> dict[str, Any]:
    window = result.window
    return {
        "success": True,
        "message": "Data fetched successfully.",
        "data": list(result.records),
        "meta": {
            "dataType": result.data_type.value,
            "startTime": window.start_ms,
            "endTime": window.end_ms,
            "requestedEndDate": window.requested_end_date,
            "recordCount": result.record_count,
            "totalUniqueRecordsFetched": result.unique_count,
            "terminationReason": result.termination.value,
            "pagesFetched": result.pages,
            "droppedRecords": result.dropped_records,
            "warning": result.warning,
        },
    }


def failure_payload(message: str, details: str | None = None) -> dict[str, Any]:
    return {"success": False, "message": message, "details": details}
