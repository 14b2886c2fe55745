from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from . import encoder, remote
from .config import ENDPOINTS, ENDPOINT_VARS
from .errors import ValidationError
from .logger import get_logger
from .schemas import (
    CreateEntryPayload, EntryRefPayload, JournalEntry, ListEntriesPayload,
    SelectedFile, UpdateEntryPayload, UploadPayload, UploadResult, Visibility,
)
from .utils import to_iso_now

logger = get_logger("entries")


def normalize_entries(data: Any) -> List[JournalEntry]:
    """
    Collapse the shapes the get endpoint may answer with into one list.

    Accepts a bare array, {"entries": [...]} or {"value": [...]}. Anything
    else yields an empty list.
    """
    if isinstance(data, list):
        raw = data
    elif isinstance(data, dict):
        raw = data.get("entries") or data.get("value") or []
    else:
        raw = []

    if not isinstance(raw, list):
        return []

    entries = []
    for item in raw:
        if not isinstance(item, dict):
            logger.warning(f"Skipping non-object entry in list response: {item!r}")
            continue
        try:
            entries.append(JournalEntry.model_validate(item))
        except PydanticValidationError as e:
            logger.warning(f"Skipping malformed entry {item.get('id')!r}: {e}")
    return entries


class EntryService:
    """
    Builds request payloads for the journal endpoints and normalizes what they return.
    Every method raises a JournalError subclass on failure.
    """

    def __init__(self, endpoints: Optional[Dict[str, str]] = None,
                 client: Optional[httpx.AsyncClient] = None):
        self.endpoints = dict(ENDPOINTS)
        if endpoints:
            self.endpoints.update(endpoints)
        self.client = client

    def _url(self, name: str) -> str:
        return remote.require_endpoint(self.endpoints.get(name), ENDPOINT_VARS[name])

    async def _post(self, name: str, payload: Dict[str, Any]) -> Any:
        url = self._url(name)
        return await remote.call(url, "POST", payload, client=self.client)

    async def upload(self, user_id: str, file: Optional[SelectedFile]) -> UploadResult:
        if not user_id:
            raise ValidationError("userId is required")
        if file is None:
            raise ValidationError("Select a file to upload")

        file_base64 = await encoder.encode(file)
        payload = UploadPayload(
            user_id=user_id,
            filename=file.name,
            filetype=file.type or encoder.DEFAULT_MIME_TYPE,
            file_base64=file_base64,
        )
        result = await self._post("upload", payload.to_payload())
        if not isinstance(result, dict):
            result = {}
        upload = UploadResult(
            blob_name=result.get("blobName") or "",
            file_url=result.get("fileUrl") or "",
        )
        logger.info(f"Uploaded {file.name} for {user_id} as {upload.blob_name or '<unnamed blob>'}")
        return upload

    def build_create_payload(self, user_id: str, text: str, visibility: Visibility = "private",
                             upload: Optional[UploadResult] = None,
                             file: Optional[SelectedFile] = None) -> Dict[str, Any]:
        if not user_id:
            raise ValidationError("userId is required")
        if not text.strip():
            raise ValidationError("Journal text is required")

        payload = CreateEntryPayload(
            user_id=user_id,
            text=text.strip(),
            visibility=visibility,
            upload_date=to_iso_now(),
        )
        if upload is not None and upload.file_url:
            payload.filename = file.name if file else ""
            payload.filetype = file.type if file else ""
            payload.file_url = upload.file_url
        return payload.to_payload()

    async def create(self, user_id: str, text: str, visibility: Visibility = "private",
                     upload: Optional[UploadResult] = None,
                     file: Optional[SelectedFile] = None) -> Any:
        payload = self.build_create_payload(user_id, text, visibility, upload, file)
        result = await self._post("create", payload)
        logger.info(f"Created entry for {user_id} (media: {'fileUrl' in payload})")
        return result

    async def list(self, user_id: str) -> List[JournalEntry]:
        if not user_id:
            raise ValidationError("userId is required")
        data = await self._post("get", ListEntriesPayload(user_id=user_id).to_payload())
        entries = normalize_entries(data)
        logger.info(f"Loaded {len(entries)} entries for {user_id}")
        return entries

    async def update(self, entry_id: Optional[str], text: str, visibility: Visibility = "private") -> Any:
        if not entry_id:
            raise ValidationError("Missing entryId")
        payload = UpdateEntryPayload(id=entry_id, entry_id=entry_id, text=text, visibility=visibility)
        result = await self._post("update", payload.to_payload())
        logger.info(f"Updated entry {entry_id}")
        return result

    async def delete(self, entry_id: Optional[str]) -> Any:
        if not entry_id:
            raise ValidationError("Missing entryId")
        payload = EntryRefPayload(id=entry_id, entry_id=entry_id)
        result = await self._post("delete", payload.to_payload())
        logger.info(f"Deleted entry {entry_id}")
        return result
