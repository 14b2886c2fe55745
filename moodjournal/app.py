from typing import Callable, Optional

import httpx

from . import encoder
from .assistant import Assistant
from .config import DEFAULT_USER_ID, ASSISTANT_REPLY_DELAY
from .entries import EntryService
from .errors import JournalError, ValidationError
from .logger import get_logger
from .mood import MoodLog
from .schemas import AssistantMessage, EditState, JournalEntry, SessionState

logger = get_logger("app")

VISIBILITIES = ("private", "public")


class JournalApp:
    """
    Session state plus one entry point per user action.

    Network actions never raise: a failure is written to `state.error` and the
    in-progress `state.status` is cleared. Nothing is rolled back, so a failed
    re-list after a successful write leaves the write in place.
    """

    def __init__(self, user_id: str = DEFAULT_USER_ID, service: Optional[EntryService] = None,
                 client: Optional[httpx.AsyncClient] = None, reply_delay: float = ASSISTANT_REPLY_DELAY):
        self.state = SessionState(user_id=user_id)
        self.service = service or EntryService(client=client)
        self.mood_log = MoodLog()
        self.assistant = Assistant(delay=reply_delay)

    # --- Form fields ---

    def set_user_id(self, user_id: str):
        self.state.user_id = user_id.strip()

    def set_text(self, text: str):
        self.state.text = text

    def set_visibility(self, visibility: str):
        if visibility not in VISIBILITIES:
            raise ValidationError(f"Visibility must be one of: {', '.join(VISIBILITIES)}")
        self.state.visibility = visibility

    def select_file(self, path: Optional[str]):
        self.state.selected_file = encoder.select_file(path) if path else None

    def set_mood(self, score: int):
        if isinstance(score, bool) or not isinstance(score, int) or not 1 <= score <= 5:
            raise ValidationError("Mood must be a whole number from 1 to 5")
        self.state.mood = score

    def set_mood_notes(self, notes: str):
        self.state.mood_notes = notes

    @property
    def can_upload(self) -> bool:
        return bool(self.state.user_id and self.state.selected_file)

    def clear_messages(self):
        self.state.status = ""
        self.state.error = ""

    def _fail(self, action: str, error: Exception):
        logger.error(f"{action} failed: {error}")
        self.state.error = str(error)
        self.state.status = ""

    # --- Entries ---

    async def upload_file(self):
        self.clear_messages()
        if not self.can_upload:
            return
        try:
            self.state.status = "Uploading file..."
            self.state.upload = await self.service.upload(self.state.user_id, self.state.selected_file)
            self.state.status = "Upload complete ✅"
        except JournalError as e:
            self._fail("Upload", e)

    async def create_entry(self):
        self.clear_messages()
        try:
            self.state.status = "Creating journal entry..."
            upload = self.state.upload
            await self.service.create(
                self.state.user_id, self.state.text, self.state.visibility,
                upload=upload, file=self.state.selected_file,
            )
            self.state.status = "Entry created ✅"
            self.state.text = ""

            # Media is single-use: the next entry needs a fresh upload
            if upload is not None and upload.file_url:
                self.state.selected_file = None
                self.state.upload = None

            await self.load_entries()
        except JournalError as e:
            self._fail("Create", e)

    async def load_entries(self):
        self.clear_messages()
        try:
            if not self.state.user_id:
                raise ValidationError("userId is required")
            self.state.loading_entries = True
            self.state.status = "Loading entries..."
            self.state.entries = await self.service.list(self.state.user_id)
            self.state.status = "Entries loaded ✅"
        except JournalError as e:
            self._fail("Load entries", e)
        finally:
            self.state.loading_entries = False

    def start_edit(self, entry: JournalEntry):
        self.state.edit = EditState(
            entry_id=entry.id,
            text=entry.text or "",
            visibility=entry.visibility if entry.visibility in VISIBILITIES else "private",
        )

    def cancel_edit(self):
        self.state.edit = EditState()

    def set_edit_text(self, text: str):
        self.state.edit.text = text

    def set_edit_visibility(self, visibility: str):
        if visibility not in VISIBILITIES:
            raise ValidationError(f"Visibility must be one of: {', '.join(VISIBILITIES)}")
        self.state.edit.visibility = visibility

    async def update_entry(self, entry_id: Optional[str] = None):
        self.clear_messages()
        try:
            entry_id = entry_id or self.state.edit.entry_id
            self.state.status = "Updating entry..."
            await self.service.update(entry_id, self.state.edit.text, self.state.edit.visibility)
            self.state.status = "Entry updated ✅"
            self.cancel_edit()
            await self.load_entries()
        except JournalError as e:
            self._fail("Update", e)

    async def delete_entry(self, entry_id: Optional[str]):
        self.clear_messages()
        try:
            self.state.status = "Deleting entry..."
            await self.service.delete(entry_id)
            self.state.status = "Entry deleted ✅"
            await self.load_entries()
        except JournalError as e:
            self._fail("Delete", e)

    def find_entry(self, entry_id: str) -> Optional[JournalEntry]:
        return next((e for e in self.state.entries if e.id == entry_id), None)

    # --- Mood ---

    def save_mood(self):
        record = self.mood_log.append(self.state.mood, self.state.mood_notes)
        self.state.mood_notes = ""
        logger.info(f"Saved mood {record.mood}/5 ({len(self.mood_log)} in history)")
        return record

    # --- Assistant ---

    def send_assistant_message(self, text: str, on_reply: Optional[Callable[[AssistantMessage], None]] = None):
        last_entry_text = self.state.entries[0].text if self.state.entries else ""
        return self.assistant.send(text, self.state.mood, last_entry_text or "", on_reply=on_reply)

    def clear_assistant(self):
        self.assistant.clear()
