"""
Mood Journal Diagnostic Script
Run from your project root: python diagnose.py
Checks every subsystem independently so you can see exactly what's working.
"""

import os
import sys
import asyncio
import tempfile

# Add project root to path so moodjournal imports work
sys.path.insert(0, os.path.abspath("."))

PASS = "\033[92m[PASS]\033[0m"
FAIL = "\033[91m[FAIL]\033[0m"
WARN = "\033[93m[WARN]\033[0m"
INFO = "\033[96m[INFO]\033[0m"

results = []

def check(label, passed, detail=""):
    icon = PASS if passed else FAIL
    print(f"  {icon} {label}")
    if detail:
        print(f"         {detail}")
    results.append((label, passed))

def section(title):
    print(f"\n{'='*55}")
    print(f"  {title}")
    print(f"{'='*55}")

# ─────────────────────────────────────────────────────────
# 1. CONFIG
# ─────────────────────────────────────────────────────────
section("1. CONFIG")
try:
    from moodjournal.config import ENDPOINTS, ENDPOINT_VARS, DEFAULT_USER_ID, ASSISTANT_REPLY_DELAY
    check("moodjournal.config imports OK", True)
    for name, url in ENDPOINTS.items():
        check(f"{ENDPOINT_VARS[name]} set", bool(url),
              f"Value: {url or 'EMPTY — the ' + name + ' action will fail'}")
    print(f"  {INFO} DEFAULT_USER_ID = {DEFAULT_USER_ID}")
    print(f"  {INFO} ASSISTANT_REPLY_DELAY = {ASSISTANT_REPLY_DELAY}s")
except Exception as e:
    check("moodjournal.config imports OK", False, str(e))

# ─────────────────────────────────────────────────────────
# 2. FILE ENCODER
# ─────────────────────────────────────────────────────────
section("2. FILE ENCODER")
try:
    from moodjournal.encoder import encode, select_file

    with tempfile.NamedTemporaryFile("wb", suffix=".txt", delete=False) as f:
        f.write(b"hello journal")
        tmp_path = f.name
    try:
        selected = select_file(tmp_path)
        check("select_file() guesses MIME type", selected.type == "text/plain", f"Type: {selected.type}")
        payload = asyncio.run(encode(selected))
        check("encode() returns bare base64", payload == "aGVsbG8gam91cm5hbA==", f"Payload: {payload}")
    finally:
        os.remove(tmp_path)
except Exception as e:
    check("File encoder", False, str(e))

# ─────────────────────────────────────────────────────────
# 3. MOOD LOG
# ─────────────────────────────────────────────────────────
section("3. MOOD LOG")
try:
    from moodjournal.mood import MoodLog
    log = MoodLog()
    for score in [1, 2, 3, 4, 5] * 3:
        log.append(score, "diagnostic")
    check("Mood log is capped", len(log) == log.limit, f"Records kept: {len(log)} / {log.limit}")
    check("Newest record first", log.records[0].mood == 5)
except Exception as e:
    check("Mood log", False, str(e))

# ─────────────────────────────────────────────────────────
# 4. MOCK ASSISTANT
# ─────────────────────────────────────────────────────────
section("4. MOCK ASSISTANT")
try:
    from moodjournal.assistant import build_reply, mood_bucket
    check("Bucketing", [mood_bucket(s) for s in range(1, 6)] == ["low", "low", "neutral", "good", "good"])
    reply = build_reply(4, "a walk", "Sunny day")
    check("Reply is deterministic", reply == build_reply(4, "a walk", "Sunny day"))
    print(f"  {INFO} Sample reply:")
    for line in reply.splitlines():
        print(f"         {line}")
except Exception as e:
    check("Mock assistant", False, str(e))

# ─────────────────────────────────────────────────────────
# 5. REMOTE ENDPOINTS — LIVE (list only, read-only)
# ─────────────────────────────────────────────────────────
section("5. REMOTE ENDPOINTS — LIVE")
try:
    from moodjournal.config import GET_URL, DEFAULT_USER_ID
    from moodjournal.entries import EntryService
    if not GET_URL:
        print(f"  {WARN} JOURNAL_GET_URL not set — skipping live list check")
    else:
        entries = asyncio.run(EntryService().list(DEFAULT_USER_ID))
        check("get endpoint answers", True, f"{len(entries)} entries for {DEFAULT_USER_ID}")
except Exception as e:
    check("get endpoint answers", False, str(e))

# ─────────────────────────────────────────────────────────
# SUMMARY
# ─────────────────────────────────────────────────────────
section("SUMMARY")
passed = sum(1 for _, ok in results if ok)
failed = sum(1 for _, ok in results if not ok)
print(f"  {PASS} {passed} checks passed")
if failed:
    print(f"  {FAIL} {failed} checks FAILED:")
    for label, ok in results:
        if not ok:
            print(f"         - {label}")
else:
    print(f"  All systems nominal.")
print(f"{'='*55}\n")
