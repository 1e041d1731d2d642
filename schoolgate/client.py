# schoolgate/client.py
"""Thin client for the entry & exit API.

Mirrors what the front desk screens do: one call per action, the bearer token
read from the session on every request, the {success, data, error} envelope
unwrapped, and failures raised as ApiError with a readable message. Nothing is
retried.
"""
import logging
from datetime import date, datetime, time
from typing import Any, Callable, Iterable, Optional, Union

import httpx

logger = logging.getLogger(__name__)

TIMEOUT = httpx.Timeout(10.0, read=15.0)

TokenSource = Union[str, Callable[[], Optional[str]], None]


class ApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _clean(params: dict) -> dict:
    """Drops unset filters and renders dates the way the API expects."""
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (date, datetime, time)):
            value = value.isoformat()
        elif isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned


def _json_body(payload: dict) -> dict:
    body = {}
    for key, value in payload.items():
        if isinstance(value, (date, datetime, time)):
            value = value.isoformat()
        body[key] = value
    return body


class EntryExitClient:
    def __init__(
        self,
        base_url: str = "",
        token: TokenSource = None,
        http: Optional[httpx.Client] = None,
        prefix: str = "/api/entry-exit",
    ):
        self._http = http or httpx.Client(base_url=base_url, timeout=TIMEOUT)
        self._token = token
        self._prefix = prefix

    def close(self):
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        token = self._token() if callable(self._token) else self._token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(self, method: str, path: str, params: Optional[dict] = None, json: Optional[dict] = None) -> Any:
        url = f"{self._prefix}{path}"
        try:
            response = self._http.request(
                method,
                url,
                params=_clean(params or {}),
                json=_json_body(json) if json is not None else None,
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            logger.error(f"[Client] {method} {url} failed: {e}")
            raise ApiError(f"Network error: {e}") from e

        try:
            body = response.json()
        except ValueError:
            raise ApiError(f"Unexpected response ({response.status_code})", response.status_code)

        if not response.is_success or not body.get("success"):
            raise ApiError(body.get("error") or f"Request failed ({response.status_code})", response.status_code)
        return body.get("data")

    # Checkpoints

    def get_checkpoints(self, school_id: int):
        return self._request("GET", "/checkpoints", params={"school_id": school_id})

    def get_checkpoint(self, checkpoint_id: int):
        return self._request("GET", f"/checkpoints/{checkpoint_id}")

    def create_checkpoint(self, school_id: int, name: str, mode: str = "both", description: Optional[str] = None):
        return self._request("POST", "/checkpoints", json={
            "school_id": school_id,
            "name": name,
            "mode": mode,
            "description": description,
        })

    def update_checkpoint(self, checkpoint_id: int, **changes):
        return self._request("PUT", f"/checkpoints/{checkpoint_id}", json=changes)

    def delete_checkpoint(self, checkpoint_id: int):
        self._request("DELETE", f"/checkpoints/{checkpoint_id}")

    def get_authorized_times(self, checkpoint_id: int):
        return self._request("GET", f"/checkpoints/{checkpoint_id}/times")

    def set_authorized_times(self, checkpoint_id: int, times: Iterable[dict]):
        return self._request("PUT", f"/checkpoints/{checkpoint_id}/times", json={
            "times": [_json_body(t) for t in times],
        })

    # Records

    def create_record(
        self,
        school_id: int,
        checkpoint_id: int,
        person_id: int,
        person_type: str,
        record_type: str,
        description: Optional[str] = None,
        recorded_at: Optional[datetime] = None,
    ):
        return self._request("POST", "/records", json={
            "school_id": school_id,
            "checkpoint_id": checkpoint_id,
            "person_id": person_id,
            "person_type": person_type,
            "record_type": record_type,
            "description": description,
            "recorded_at": recorded_at,
        })

    def create_bulk_records(
        self,
        school_id: int,
        checkpoint_id: int,
        person_ids: Iterable[int],
        person_type: str,
        record_type: str,
        description: Optional[str] = None,
    ):
        return self._request("POST", "/records/bulk", json={
            "school_id": school_id,
            "checkpoint_id": checkpoint_id,
            "person_ids": list(person_ids),
            "person_type": person_type,
            "record_type": record_type,
            "description": description,
        })

    def get_records(self, school_id: int, **filters):
        return self._request("GET", "/records", params={"school_id": school_id, **filters})

    def get_stats(self, school_id: int):
        return self._request("GET", "/stats", params={"school_id": school_id})

    # Evening leaves

    def get_evening_leaves(self, school_id: int, student_id: Optional[int] = None,
                           is_active: Optional[bool] = None, on_date: Optional[date] = None):
        return self._request("GET", "/evening-leaves", params={
            "school_id": school_id,
            "student_id": student_id,
            "is_active": is_active,
            "date": on_date,
        })

    def create_evening_leave(self, **leave):
        return self._request("POST", "/evening-leaves", json=leave)

    def update_evening_leave(self, leave_id: int, **changes):
        return self._request("PUT", f"/evening-leaves/{leave_id}", json=changes)

    def delete_evening_leave(self, leave_id: int):
        self._request("DELETE", f"/evening-leaves/{leave_id}")

    def get_evening_leave_report(self, school_id: int, on_date: Optional[date] = None):
        return self._request("GET", "/evening-leaves/report", params={"school_id": school_id, "date": on_date})

    # Packages

    def get_packages(self, school_id: int, status: Optional[str] = None, student_id: Optional[int] = None):
        return self._request("GET", "/packages", params={
            "school_id": school_id,
            "status": status,
            "student_id": student_id,
        })

    def get_pending_packages(self, school_id: int):
        return self._request("GET", "/packages/pending", params={"school_id": school_id})

    def create_package(self, school_id: int, student_id: int,
                       description: Optional[str] = None, sender: Optional[str] = None):
        return self._request("POST", "/packages", json={
            "school_id": school_id,
            "student_id": student_id,
            "description": description,
            "sender": sender,
        })

    def pickup_package(self, package_id: int):
        return self._request("POST", f"/packages/{package_id}/pickup")

    # Students

    def search_students(self, school_id: int, query: str):
        return self._request("GET", "/students/search", params={"school_id": school_id, "q": query})

    def get_student_notes(self, school_id: int, student_id: int):
        return self._request("GET", f"/students/{student_id}/notes", params={"school_id": school_id})

    def upsert_student_notes(self, school_id: int, student_id: int, notes: str):
        return self._request("PUT", f"/students/{student_id}/notes", json={
            "school_id": school_id,
            "notes": notes,
        })
