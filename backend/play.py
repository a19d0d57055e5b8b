#!/usr/bin/env python3
"""Interactive CLI script to playtest the exploration game in a terminal.

Usage:
    python play.py                 # start at the catalog's start event
    python play.py 5               # start at a specific event id

Features:
    - Walk the event graph until stamina runs out or the path ends
    - Progress is saved to the configured store after every choice
    - At the end of a run, optionally ask the LLM for a journey review
      (needs DASHSCOPE_API_KEY)

No server needed.
"""

import asyncio
import sys

from wildtrail.config import settings
from wildtrail.core.errors import ContentError, InvalidReference
from wildtrail.main import configure_logging
from wildtrail.schemas.content import EventNode
from wildtrail.schemas.session import Resolution
from wildtrail.services.content_service import content_service
from wildtrail.services.game_service import GameService, create_game_service
from wildtrail.services.review_service import review_service

# --- ANSI Colors ---
SCENE_LABELS = {
    "forest": "\033[92m[Forest]\033[0m",
    "mountain": "\033[97m[Mountain]\033[0m",
    "river": "\033[94m[River]\033[0m",
}
RARITY_COLORS = {
    "common": "\033[37m",
    "rare": "\033[94m",
    "epic": "\033[95m",
    "legendary": "\033[93m",
}

DIVIDER = "\033[90m" + "─" * 50 + "\033[0m"
RESET = "\033[0m"
DIM = "\033[90m"
BOLD = "\033[1m"
YELLOW = "\033[93m"
RED = "\033[91m"


def display_status(game: GameService):
    state = game.state()
    print(
        f"  {DIM}stamina {state.stamina}/{state.max_stamina} · "
        f"coins {state.currency} · collected {state.collection.count}/{state.collection.total}{RESET}"
    )


def display_event(event: EventNode):
    """Print an event and its two choices."""
    print()
    print(DIVIDER)
    print(f"{SCENE_LABELS.get(event.scene.value, event.scene.value)} {BOLD}{event.name}{RESET}")
    print(f"  {event.text}")
    print()
    for index, choice in enumerate(event.choices, start=1):
        odds = f" {DIM}({choice.success_probability:.0%}){RESET}" if choice.success_probability < 1 else ""
        print(f"  \033[97m{index}\033[0m. {choice.label}{odds}")
    print()


def ask_choice() -> int:
    while True:
        choice = input("  Choose (1/2): ").strip()
        if choice in ("1", "2"):
            return int(choice) - 1
        print(f"  {RED}Invalid choice, enter 1 or 2{RESET}")


def display_resolution(game: GameService, result: Resolution):
    print(f"\n  {result.outcome_text}")
    if result.currency_delta:
        sign = "+" if result.currency_delta > 0 else ""
        print(f"  {YELLOW}coins {sign}{result.currency_delta} (total: {result.currency}){RESET}")
    if result.unlocked:
        collectible = game.graph.get_collectible(result.unlocked.collectible_id)
        color = RARITY_COLORS.get(collectible.rarity, "")
        print(f"  {BOLD}New discovery:{RESET} {color}{collectible.name} [{collectible.rarity}]{RESET}")
        print(f"  {DIM}{collectible.description}{RESET}")


def play_run(game: GameService, event_id: int):
    """Play until stamina runs out or the path ends."""
    print()
    print(f"{BOLD}" + "=" * 50 + f"{RESET}")
    print(f"{BOLD}  Into the wild{RESET}")
    display_status(game)
    print(f"{BOLD}" + "=" * 50 + f"{RESET}")

    while game.can_explore():
        event = game.graph.get_event(event_id)
        display_event(event)
        result = game.resolve_choice(event.id, ask_choice())
        display_resolution(game, result)
        display_status(game)
        if result.next_event_id is None:
            print(f"\n  {DIM}The path ends here.{RESET}")
            break
        event_id = result.next_event_id
    else:
        print(f"\n  {DIM}You are too tired to go on.{RESET}")


def display_summary(game: GameService):
    snapshot = game.snapshot()
    print()
    print(DIVIDER)
    print(f"\n{BOLD}  ── Run over ──{RESET}")
    for entry in snapshot.journey_log:
        print(f"  {DIM}{entry.encounter}: {entry.choice}{RESET}")
    if snapshot.newly_unlocked:
        print(f"  {YELLOW}New this run: {', '.join(snapshot.unlocked_gallery)}{RESET}")
    print()


def offer_review(game: GameService):
    if not settings.DASHSCOPE_API_KEY:
        print(f"  {DIM}(set DASHSCOPE_API_KEY to get a journey review){RESET}")
        return
    try:
        choice = input("  Get a journey review? (y/n): ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        choice = "n"
    if choice not in ("y", "yes"):
        return

    print(f"\n  {DIM}(writing...){RESET}")
    response = asyncio.run(review_service.request_review(game.snapshot()))
    if response.success:
        print(f"\n{response.review}\n")
    else:
        print(f"  {RED}[Review unavailable] {response.error}{RESET}")


def main():
    configure_logging("WARNING")
    graph = content_service.build_graph()
    game = create_game_service(graph)
    event_id = int(sys.argv[1]) if len(sys.argv) > 1 else graph.start_event_id

    while True:
        if not game.can_explore():
            game.start_new_run()
        play_run(game, event_id)
        display_summary(game)
        offer_review(game)

        try:
            again = input("  Start a new run? (y/n): ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            again = "n"
        if again not in ("y", "yes"):
            break
        game.start_new_run()
        event_id = graph.start_event_id


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n\n{DIM}Game closed.{RESET}")
    except (ContentError, InvalidReference) as e:
        print(f"{RED}{e}{RESET}")
