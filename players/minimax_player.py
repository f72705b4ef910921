"""Alpha-beta minimax player speaking the line protocol.

Usage:
    python minimax_player.py <BLACK|WHITE> [--depth 4] [--max-player root|1|2]

Protocol:
- argv[1]: "BLACK" or "WHITE" (the side to play)
- stdin: one board string per line (row-major X / O / -) or "ping"
- stdout: "row col" of the chosen move, "-1 -1" to pass; "pong" for ping
"""

from __future__ import annotations

import argparse
import sys

from othello_minimax import PASS, PLAYER_ONE, PLAYER_TWO, GameState, MinimaxAI
from othello_minimax.search import DEFAULT_MAX_DEPTH, SearchConfig


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Line-protocol minimax player")
    parser.add_argument("color", choices=["BLACK", "WHITE", "black", "white"])
    parser.add_argument("--depth", type=int, default=DEFAULT_MAX_DEPTH)
    parser.add_argument("--max-player", choices=["root", "1", "2"], default="root")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    turn = PLAYER_ONE if args.color.upper() == "BLACK" else PLAYER_TWO
    max_player = {"root": None, "1": PLAYER_ONE, "2": PLAYER_TWO}[args.max_player]
    player = MinimaxAI(SearchConfig(max_depth=args.depth, max_player=max_player))

    for line in sys.stdin:
        board_str = line.strip()
        if not board_str:
            continue
        if board_str.lower() == "ping":
            print("pong", flush=True)
            continue

        try:
            state = GameState.from_board_str(board_str, turn)
            move = player.decide_move(state)
        except Exception as exc:  # pragma: no cover - fail fast for the caller
            print(exc, file=sys.stderr, flush=True)
            sys.exit(1)

        print(move if move is not None else PASS, flush=True)


if __name__ == "__main__":
    main()
