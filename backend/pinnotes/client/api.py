"""
PinNotes Client — Notes API Wrapper
=====================================

What:  Thin async wrapper over the /api/notes endpoints.
Why:   Gives the controller one result shape (ApiResult) for every call,
       whatever the status code or body looks like.
How:   httpx.AsyncClient; the JSON envelope is unpacked into ApiResult.
       Transport failures (httpx.HTTPError) are NOT caught here; the
       controller decides how to report them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

API_BASE = "/api/notes"


@dataclass
class ApiResult:
    """
    Unpacked response envelope.

    ok is true only for a 2xx status whose body says `success: true`.
    """

    ok: bool
    status_code: int
    data: Any = None
    message: Optional[str] = None
    errors: List[Dict[str, str]] = field(default_factory=list)

    def messages(self, fallback: str) -> List[str]:
        """Server messages to show the user, verbatim; fallback when there are none."""
        if self.errors:
            return [str(e.get("message", fallback)) for e in self.errors]
        return [self.message or fallback]


class NotesApiClient:
    """
    Async client for the notes resource.

    Usage:
        async with NotesApiClient("http://localhost:3000") as api:
            result = await api.list_notes()
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url)

    async def __aenter__(self) -> "NotesApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def list_notes(self) -> ApiResult:
        return await self._request("GET", API_BASE)

    async def create_note(self, payload: Dict[str, Any]) -> ApiResult:
        return await self._request("POST", API_BASE, json=payload)

    async def update_note(self, note_id: str, payload: Dict[str, Any]) -> ApiResult:
        return await self._request("PUT", f"{API_BASE}/{note_id}", json=payload)

    async def delete_note(self, note_id: str) -> ApiResult:
        return await self._request("DELETE", f"{API_BASE}/{note_id}")

    async def _request(
        self,
        method: str,
        url: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> ApiResult:
        response = await self._client.request(method, url, json=json)

        try:
            body = response.json()
        except ValueError:
            logger.warning("%s %s returned a non-JSON body (%d)", method, url, response.status_code)
            body = {}
        if not isinstance(body, dict):
            body = {}

        ok = response.is_success and body.get("success") is True

        errors = body.get("errors")
        errors = [e for e in errors if isinstance(e, dict)] if isinstance(errors, list) else []

        data = body.get("data")
        if isinstance(data, list) and not all(isinstance(item, dict) for item in data):
            logger.warning("%s %s returned malformed note data", method, url)
            ok = False
            data = None

        message = body.get("message")
        return ApiResult(
            ok=ok,
            status_code=response.status_code,
            data=data,
            message=message if isinstance(message, str) else None,
            errors=errors,
        )
