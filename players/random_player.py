"""Random move player speaking the line protocol."""

import sys

from othello_minimax import PLAYER_ONE, PLAYER_TWO, GameState, RandomAI


def main():
    turn = PLAYER_ONE if sys.argv[1].upper() == "BLACK" else PLAYER_TWO
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else None
    player = RandomAI(seed)

    while True:
        try:
            board_str = input().strip()

            # Handle ping/pong protocol
            if board_str == "ping":
                print("pong", flush=True)
                continue

            state = GameState.from_board_str(board_str, turn)
            print(player.decide_move(state), flush=True)

        except EOFError:
            break
        except Exception as e:
            print(e, file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
