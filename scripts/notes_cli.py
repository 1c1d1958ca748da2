#!/usr/bin/env python3
"""Interactive CLI for browsing and editing notes on a Notekeeper server."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from notekeeper.core import Note
from notekeeper.store import NoteStoreConfig, create_note_store
from notekeeper.views import HomeView

HELP = """Commands:
  list                 show notes matching the current search
  search [text]        filter notes (no text clears the search)
  new                  write a new note
  show <id>            show one note
  edit <id>            replace a note's content
  delete <id>          delete a note
  reload               reload notes from the server
  quit                 exit
"""


def print_notes(notes: list[Note]) -> None:
    if not notes:
        print("  (no notes)")
    for note in notes:
        print(f"  [{note.id}] {note.title}: {note.content}")


async def prompt(text: str) -> str:
    return await asyncio.to_thread(input, text)


async def run(home: HomeView) -> None:
    if not await home.refresh():
        print("Warning: Could not load notes from the server. Showing local notes.\n")
    print_notes(home.visible)

    while True:
        try:
            line = (await prompt("\nnotes> ")).strip()
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break

        if not line:
            continue
        command, _, arg = line.partition(" ")
        command = command.lower()
        arg = arg.strip()

        if command in ("quit", "exit", "q"):
            print("Goodbye!")
            break
        elif command == "help":
            print(HELP)
        elif command == "list":
            print_notes(home.visible)
        elif command == "search":
            print_notes(home.set_query(arg))
        elif command == "reload":
            if not await home.refresh():
                print("Error: Could not reach the note server.")
            print_notes(home.visible)
        elif command == "new":
            view = home.new_note()
            view.title = await prompt("Title: ")
            view.content = await prompt("Note: ")
            note = await view.submit()
            if note is None:
                print("Note discarded.")
            else:
                print(f"Created [{note.id}] {note.title}")
        elif command in ("show", "edit", "delete"):
            detail = home.open(arg)
            if detail is None:
                print(f"No note with id '{arg}'")
                continue
            if command == "show":
                print(f"{detail.note.title}\n\n{detail.note.content}")
            elif command == "edit":
                print(f"Current: {detail.note.content}")
                await detail.change_content(await prompt("New content: "))
                print("Saved.")
            else:
                await detail.delete()
                print("Deleted.")
            if arg in home.store.drifted_ids:
                print("Warning: the server did not confirm this change.")
        else:
            print(f"Unknown command '{command}'. Type 'help' for commands.")


async def main_async(config: NoteStoreConfig) -> None:
    store = create_note_store(config)
    try:
        await run(HomeView(store))
    finally:
        await store.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive CLI for Notekeeper")
    parser.add_argument(
        "--url",
        default=None,
        help="API server URL (default: NOTEKEEPER_API_URL or http://localhost:8000)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show client log messages",
    )
    args = parser.parse_args()

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = NoteStoreConfig.from_env()
    if args.url:
        config.api_url = args.url.rstrip("/")

    print("Notekeeper CLI")
    print(f"Connected to {config.api_url}")
    print("Type 'help' for commands, 'quit' to exit\n")

    asyncio.run(main_async(config))


if __name__ == "__main__":
    main()
