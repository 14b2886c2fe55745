"""
Mock reflection assistant.

Replies are canned: the mood score picks one of three prompt buckets, and the
most recent journal entry and the user's message are echoed back (truncated).
No model is involved, so the same inputs always produce the same reply.
"""

import asyncio
from typing import Callable, List, Optional, Set

from .config import ASSISTANT_REPLY_DELAY
from .logger import get_logger
from .schemas import AssistantMessage
from .utils import truncate

logger = get_logger("assistant")

GREETING = (
    "Hi — I’m your journaling assistant. Tell me how you’re feeling, "
    "or paste a journal entry and I’ll help you reflect."
)

GROUNDING = "Try this quick reset: inhale 4s, hold 4s, exhale 6s — repeat 3 times."

PROMPTS_BY_MOOD = {
    "low": [
        "That sounds heavy. What’s one small thing that feels manageable right now?",
        "If a friend felt this way, what would you say to them?",
        GROUNDING,
    ],
    "neutral": [
        "What do you think triggered that feeling today?",
        "What’s one thing you want to carry forward from today — and one thing to release?",
        GROUNDING,
    ],
    "good": [
        "That’s a positive moment — what helped you get here?",
        "How can you make it easier to feel this way again tomorrow?",
        "Would you like to set a small intention for the next 24 hours?",
    ],
}

def mood_bucket(score: int) -> str:
    if score <= 2:
        return "low"
    if score == 3:
        return "neutral"
    return "good"

def build_reply(score: int, user_text: str = "", last_entry_text: str = "") -> str:
    """Compose the multi-line reflection for a mood score."""
    lines = [f"Thanks for sharing. Based on your mood ({score}/5), here are a few gentle reflections:"]
    lines += [f"{i}. {prompt}" for i, prompt in enumerate(PROMPTS_BY_MOOD[mood_bucket(score)], start=1)]
    if last_entry_text:
        lines.append(f"I also noticed your recent entry mentions: “{truncate(last_entry_text)}”")
    if user_text:
        lines.append(f"If you want, tell me more about: “{truncate(user_text)}”")
    return "\n".join(lines)


class Assistant:
    """
    Conversation transcript with delayed mock replies.

    Replies are scheduled as asyncio tasks. clear() cancels any that are still
    pending, so a reply never lands in a transcript that was reset after the
    message it answers.
    """

    def __init__(self, delay: float = ASSISTANT_REPLY_DELAY):
        self.delay = delay
        self.messages: List[AssistantMessage] = [AssistantMessage(role="assistant", text=GREETING)]
        self._pending: Set[asyncio.Task] = set()

    def send(self, text: str, score: int, last_entry_text: str = "",
             on_reply: Optional[Callable[[AssistantMessage], None]] = None) -> Optional[asyncio.Task]:
        """Append the user's message and schedule the reply. Blank input is ignored."""
        text = text.strip()
        if not text:
            return None

        self.messages.append(AssistantMessage(role="user", text=text))
        task = asyncio.get_running_loop().create_task(
            self._reply_later(score, text, last_entry_text, on_reply)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _reply_later(self, score, text, last_entry_text, on_reply):
        await asyncio.sleep(self.delay)
        message = AssistantMessage(role="assistant", text=build_reply(score, text, last_entry_text))
        self.messages.append(message)
        logger.debug(f"Assistant replied for mood {score} ({mood_bucket(score)})")
        if on_reply:
            on_reply(message)
        return message

    def clear(self):
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()
        self.messages = [AssistantMessage(role="assistant", text=GREETING)]

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    async def wait_pending(self):
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
