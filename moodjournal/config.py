import os
import sys
from dotenv import load_dotenv

load_dotenv()

# --- Remote Endpoints ---
# Each one MUST be set in your .env file. A missing URL only fails when the
# matching action is used, never at import.
UPLOAD_URL = os.getenv("JOURNAL_UPLOAD_URL", "").strip()
CREATE_URL = os.getenv("JOURNAL_CREATE_URL", "").strip()
GET_URL = os.getenv("JOURNAL_GET_URL", "").strip()
UPDATE_URL = os.getenv("JOURNAL_UPDATE_URL", "").strip()
DELETE_URL = os.getenv("JOURNAL_DELETE_URL", "").strip()

ENDPOINT_VARS = {
    "upload": "JOURNAL_UPLOAD_URL",
    "create": "JOURNAL_CREATE_URL",
    "get": "JOURNAL_GET_URL",
    "update": "JOURNAL_UPDATE_URL",
    "delete": "JOURNAL_DELETE_URL",
}

ENDPOINTS = {
    "upload": UPLOAD_URL,
    "create": CREATE_URL,
    "get": GET_URL,
    "update": UPDATE_URL,
    "delete": DELETE_URL,
}

_missing = [ENDPOINT_VARS[name] for name, url in ENDPOINTS.items() if not url]
if _missing:
    print(
        f"[Config] WARNING: {', '.join(_missing)} not set in your .env file. "
        "The matching journal actions will fail until configured.",
        file=sys.stderr
    )

# --- Session Defaults ---
DEFAULT_USER_ID = os.getenv("JOURNAL_DEFAULT_USER_ID", "u12345").strip()

# --- Assistant ---
ASSISTANT_REPLY_DELAY = float(os.getenv("ASSISTANT_REPLY_DELAY", "0.4"))  # Seconds of simulated "thinking"

# --- Logging ---
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_CONSOLE_LEVEL = os.getenv("LOG_CONSOLE_LEVEL", "WARNING").upper()  # Keeps the REPL readable
