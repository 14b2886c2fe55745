import asyncio
import threading
from colorama import init, Fore, Style

from moodjournal.app import JournalApp
from moodjournal.errors import ValidationError

# Initialize colorama
init(autoreset=True)

HELP = """Commands:
  /user <id>              set the user id
  /write <text>           set the journal text for the next entry
  /visibility <vis>       private or public
  /attach [path]          select a media file (no path clears it)
  /upload                 upload the selected file
  /create                 create an entry from the current text
  /list                   load entries
  /edit <id>              start editing an entry
  /edittext <text>        replace the text being edited
  /editvis <vis>          change the visibility being edited
  /save                   save the edit
  /cancel                 cancel the edit
  /delete <id>            delete an entry
  /mood <1-5>             set today's mood
  /note <text>            set the mood note
  /savemood               save the mood to history
  /moods                  show recent moods
  /ask <text>             talk to the assistant (plain text works too)
  /chat                   show the assistant transcript
  /clear                  reset the assistant transcript
  exit                    quit (Ctrl-C or Ctrl-D also work)"""


def print_status(app: JournalApp):
    if app.state.status:
        print(Fore.GREEN + app.state.status)
    if app.state.error:
        print(Fore.RED + f"Error: {app.state.error}")


def print_entries(app: JournalApp):
    if not app.state.entries:
        print(Fore.YELLOW + "No entries loaded yet.")
        return
    for entry in app.state.entries:
        print(Fore.CYAN + f"\n[{entry.id}] {entry.visibility} {entry.upload_date or ''}")
        print(entry.text)
        if entry.file_url:
            print(Fore.BLUE + f"Media: {entry.file_url}")


def print_reply(message):
    print(Fore.MAGENTA + f"\nAssistant: {message.text}")


async def handle(app: JournalApp, command: str, arg: str):
    if command == "/user":
        app.set_user_id(arg)
    elif command == "/write":
        app.set_text(arg)
    elif command == "/visibility":
        app.set_visibility(arg)
    elif command == "/attach":
        app.select_file(arg or None)
        if app.state.selected_file:
            print(Fore.GREEN + f"Selected {app.state.selected_file.name} ({app.state.selected_file.type or 'unknown type'})")
    elif command == "/upload":
        if not app.can_upload:
            print(Fore.YELLOW + "Set a user id and /attach a file first.")
            return
        await app.upload_file()
        print_status(app)
        if app.state.upload:
            print(Fore.BLUE + f"Blob: {app.state.upload.blob_name}  URL: {app.state.upload.file_url}")
    elif command == "/create":
        await app.create_entry()
        print_status(app)
        print_entries(app)
    elif command == "/list":
        await app.load_entries()
        print_status(app)
        print_entries(app)
    elif command == "/edit":
        entry = app.find_entry(arg)
        if entry is None:
            print(Fore.YELLOW + f"No loaded entry with id '{arg}'. Try /list.")
            return
        app.start_edit(entry)
        print(Fore.CYAN + f"Editing {entry.id}: {app.state.edit.text}")
    elif command == "/edittext":
        app.set_edit_text(arg)
    elif command == "/editvis":
        app.set_edit_visibility(arg)
    elif command == "/save":
        await app.update_entry()
        print_status(app)
    elif command == "/cancel":
        app.cancel_edit()
    elif command == "/delete":
        await app.delete_entry(arg)
        print_status(app)
        print_entries(app)
    elif command == "/mood":
        try:
            app.set_mood(int(arg))
        except ValueError:
            raise ValidationError("Mood must be a whole number from 1 to 5")
        print(Fore.GREEN + f"Mood: {app.state.mood} / 5")
    elif command == "/note":
        app.set_mood_notes(arg)
    elif command == "/savemood":
        app.save_mood()
        print(Fore.GREEN + "Mood saved.")
    elif command == "/moods":
        for record in app.mood_log:
            note = f" - {record.notes}" if record.notes else ""
            print(f"{record.date.astimezone():%Y-%m-%d %H:%M}  Mood: {record.mood}/5{note}")
    elif command == "/ask":
        app.send_assistant_message(arg, on_reply=print_reply)
    elif command == "/chat":
        for message in app.assistant.messages:
            who = "You" if message.role == "user" else "Assistant"
            print(Fore.CYAN + who + Style.RESET_ALL + f"\n{message.text}\n")
    elif command == "/clear":
        app.clear_assistant()
    elif command == "/help":
        print(HELP)
    else:
        print(Fore.YELLOW + f"Unknown command {command}. Type /help.")


def read_line(prompt: str) -> "asyncio.Future":
    """Read one line on a daemon thread, resolving a future on the running loop."""
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def _resolve(value=None, error=None):
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(value)

    def _worker():
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt) as e:
            loop.call_soon_threadsafe(_resolve, None, e)
        else:
            loop.call_soon_threadsafe(_resolve, line)

    threading.Thread(target=_worker, daemon=True).start()
    return future


async def repl():
    print(Fore.CYAN + "Starting Mood Journal...")
    app = JournalApp()
    print(Fore.GREEN + f"Ready. User: {app.state.user_id}. Type /help for commands, 'exit' to quit.")

    try:
        while True:
            try:
                # Read off the loop so pending assistant replies can land meanwhile
                user_input = await read_line(Fore.BLUE + "\nYou: " + Style.RESET_ALL)
                user_input = user_input.strip()
                if user_input.lower() in ["exit", "quit"]:
                    break
                if user_input == "":
                    continue

                if user_input.startswith("/"):
                    command, _, arg = user_input.partition(" ")
                    await handle(app, command.lower(), arg.strip())
                else:
                    await handle(app, "/ask", user_input)

            except ValidationError as e:
                print(Fore.RED + f"Error: {e}")
            except (KeyboardInterrupt, EOFError):
                print("\nExiting...")
                break
            except Exception as e:
                print(Fore.RED + f"An error occurred: {e}")
    finally:
        app.clear_assistant()


def main():
    try:
        asyncio.run(repl())
    except KeyboardInterrupt:
        # Ctrl-C cancels the running loop task before the REPL can see it
        print("\nExiting...")

if __name__ == "__main__":
    main()
