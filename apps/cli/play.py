# apps/cli/play.py
"""
Play word-chain puzzles in the terminal.

Commands at the prompt:
  <word>     next word (must be one letter away from the current word)
  :hint      steps left to the target
  :reset     back to the start word
  :new       new random puzzle (searched in the background, with backoff)
  :next      continue from the current target (after solving)
  :len N     switch word length (3, 4 or 5)
  :show      reveal one shortest chain
  :quit      exit
"""

from __future__ import annotations

import argparse
import time

from packages.datasets import load_vocabulary
from packages.session import GameSession


def _status(session: GameSession) -> str:
    st = session.state()
    if not st.chain:
        return "(no puzzle yet; try :new)"
    hint = f" | hint: {st.hint_distance}" if st.hint_active else ""
    return (f"[{session.current_length}] {st.user_word} -> {st.chain[-1]} "
            f"| moves {st.changes_made} (best {session.minimum_changes}){hint}")


def _wait_for_puzzle(session: GameSession, timeout: float) -> bool:
    search = session.search_puzzle()
    print("Searching for a puzzle...")
    deadline = time.time() + timeout
    while search.running and time.time() < deadline:
        search.join(0.1)
    if search.running:
        session.cancel_search()
        return False
    return search.result is not None


def main():
    ap = argparse.ArgumentParser(description="wordchains: play in the terminal")
    ap.add_argument("--words", default="data/final_words.csv", help="word list path")
    ap.add_argument("--length", type=int, default=4, choices=[3, 4, 5])
    ap.add_argument("--seed", type=int, help="RNG seed")
    ap.add_argument("--timeout", type=float, default=30.0,
                    help="seconds to keep searching for a new puzzle")
    args = ap.parse_args()

    vocab = load_vocabulary(args.words)
    session = GameSession(lambda n: vocab, initial_length=args.length, seed=args.seed)
    if not vocab:
        raise SystemExit(f"No words loaded from {args.words}")

    try:
        if not _wait_for_puzzle(session, args.timeout):
            print("No puzzle found; try :new again")
        while True:
            print(_status(session))
            try:
                cmd = input("> ").strip()
            except EOFError:
                break
            if not cmd:
                continue
            if cmd == ":quit":
                break
            elif cmd == ":hint":
                d = session.calculate_hint()
                print("Target unreachable from here" if d is None else f"{d} step(s) to go")
            elif cmd == ":reset":
                session.reset_puzzle()
            elif cmd == ":new":
                if not _wait_for_puzzle(session, args.timeout):
                    print("No puzzle found; try again")
            elif cmd == ":next":
                if not session.continue_chain():
                    print("Could not continue from this target")
            elif cmd.startswith(":len"):
                parts = cmd.split()
                if len(parts) != 2 or not parts[1].isdigit() or int(parts[1]) not in (3, 4, 5):
                    print("usage: :len 3|4|5")
                    continue
                session.set_word_length(int(parts[1]))
                if not session.state().chain and not _wait_for_puzzle(session, args.timeout):
                    print("No puzzle found; try :new")
            elif cmd == ":show":
                print(" > ".join(session.state().chain))
            elif session.update_user_word(cmd):
                if session.state().is_completed:
                    st = session.state()
                    print(f"Solved in {st.changes_made} move(s); best possible {session.minimum_changes}.")
            else:
                print(f"{cmd.upper()} is not a word one letter away")
    finally:
        session.close()


if __name__ == "__main__":
    main()
