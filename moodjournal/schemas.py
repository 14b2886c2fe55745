from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Literal
from datetime import datetime

Visibility = Literal["private", "public"]
Role = Literal["user", "assistant"]

class WireModel(BaseModel):
    """Snake-case fields in Python, camelCase keys on the wire."""
    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

# --- Remote records ---

class JournalEntry(WireModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    id: Optional[str] = None
    user_id: Optional[str] = Field(None, alias="userId")
    text: str = ""
    visibility: str = "private"  # free-form on records from the remote store
    upload_date: Optional[str] = Field(None, alias="uploadDate")
    filename: Optional[str] = None
    filetype: Optional[str] = None
    file_url: Optional[str] = Field(None, alias="fileUrl")

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    @field_validator("visibility", mode="before")
    @classmethod
    def _null_visibility(cls, value):
        return "private" if value is None else value

class UploadResult(WireModel):
    blob_name: str = Field("", alias="blobName")
    file_url: str = Field("", alias="fileUrl")

# --- Request payloads ---

class UploadPayload(WireModel):
    user_id: str = Field(alias="userId")
    filename: str
    filetype: str
    file_base64: str = Field(alias="fileBase64")

class CreateEntryPayload(WireModel):
    user_id: str = Field(alias="userId")
    text: str
    visibility: Visibility = "private"
    upload_date: str = Field(alias="uploadDate")
    # Media fields are only set when an upload completed in this session
    filename: Optional[str] = None
    filetype: Optional[str] = None
    file_url: Optional[str] = Field(None, alias="fileUrl")

class ListEntriesPayload(WireModel):
    user_id: str = Field(alias="userId")

class EntryRefPayload(WireModel):
    # The remote side may read either key, so both are always sent
    id: str
    entry_id: str = Field(alias="entryId")

class UpdateEntryPayload(EntryRefPayload):
    text: str
    visibility: Visibility = "private"

# --- Local state ---

class SelectedFile(BaseModel):
    path: str
    name: str
    type: str = ""

class MoodRecord(BaseModel):
    date: datetime
    mood: int
    notes: str = ""

class AssistantMessage(BaseModel):
    role: Role
    text: str

class EditState(BaseModel):
    entry_id: Optional[str] = None
    text: str = ""
    visibility: Visibility = "private"

class SessionState(BaseModel):
    user_id: str = ""
    text: str = ""
    visibility: Visibility = "private"
    selected_file: Optional[SelectedFile] = None
    upload: Optional[UploadResult] = None
    entries: List[JournalEntry] = []
    loading_entries: bool = False
    edit: EditState = Field(default_factory=EditState)
    status: str = ""
    error: str = ""
    mood: int = 3
    mood_notes: str = ""
