"""
Head-to-head games between two players.

Colours alternate between games: player 1 takes black (moves first) on even
game indices and white on odd ones, so an even number of games is fairer.
"""

from dataclasses import dataclass, field

from .logging import BaseLogger, log_game_result, log_search_stats
from .players import MinimaxAI, OthelloAI
from .state import EMPTY, PASS, PLAYER_ONE, PLAYER_TWO, GameState, Position


@dataclass
class GameResult:
    """Outcome of one arena game."""

    winner: int  # PLAYER_ONE, PLAYER_TWO or EMPTY for a draw (board colours)
    black_tokens: int
    white_tokens: int
    player1_color: int
    moves: list[Position] = field(default_factory=list)
    passes: int = 0

    @property
    def player1_tokens(self) -> int:
        return self.black_tokens if self.player1_color == PLAYER_ONE else self.white_tokens

    @property
    def player2_tokens(self) -> int:
        return self.white_tokens if self.player1_color == PLAYER_ONE else self.black_tokens

    @property
    def player1_won(self) -> bool:
        return self.winner == self.player1_color

    @property
    def player2_won(self) -> bool:
        return self.winner not in (EMPTY, self.player1_color)


class Arena:
    """Plays games between two OthelloAI instances and keeps the tally."""

    def __init__(
        self,
        player1: OthelloAI,
        player2: OthelloAI,
        size: int = 8,
        logger: BaseLogger | None = None,
        log_moves: bool = False,
    ) -> None:
        self.player1 = player1
        self.player2 = player2
        self.size = size
        self.logger = logger
        self.log_moves = log_moves
        self.results: list[GameResult] = []
        self._move_step = 0

    def play(self, black: OthelloAI, white: OthelloAI) -> tuple[GameState, list[Position], int]:
        """Play one game from the standard start position.

        A side without a legal move passes. A player that answers PASS or None
        while it has legal moves also passes. Two passes in a row end the game.

        Returns:
            Final state, moves played, number of passes

        Raises:
            ValueError: If a player returns an illegal move
        """
        state = GameState(size=self.size)
        players = {PLAYER_ONE: black, PLAYER_TWO: white}
        moves: list[Position] = []
        passes = 0
        consecutive_passes = 0

        while not state.is_finished() and consecutive_passes < 2:
            player = players[state.player_in_turn]
            move = player.decide_move(state)
            self._log_move_stats(player)

            if move is None or move == PASS:
                # Forced or not, the turn goes to the opponent
                state = GameState(state.board, state.opponent)
                passes += 1
                consecutive_passes += 1
                continue

            if move not in state.legal_moves():
                raise ValueError(
                    f"{player.name} returned illegal move {tuple(move)} "
                    f"for player {state.player_in_turn}"
                )
            state.insert_token(move)
            consecutive_passes = 0
            moves.append(Position(*move))

        return state, moves, passes

    def play_n(self, n: int) -> list[GameResult]:
        """Play ``n`` games, alternating colours, and record the results."""
        new_results = []
        for game in range(n):
            player1_color = PLAYER_ONE if game % 2 == 0 else PLAYER_TWO
            if player1_color == PLAYER_ONE:
                black, white = self.player1, self.player2
            else:
                black, white = self.player2, self.player1

            state, moves, passes = self.play(black, white)
            black_tokens, white_tokens = state.token_counts()
            result = GameResult(
                winner=state.winner(),
                black_tokens=black_tokens,
                white_tokens=white_tokens,
                player1_color=player1_color,
                moves=moves,
                passes=passes,
            )
            self.results.append(result)
            new_results.append(result)

            if self.logger is not None:
                log_game_result(self.logger, result, step=len(self.results) - 1)

        return new_results

    def get_stats(self) -> tuple[int, int, int]:
        """(player 1 wins, player 2 wins, draws) over every recorded game."""
        wins1 = sum(result.player1_won for result in self.results)
        wins2 = sum(result.player2_won for result in self.results)
        return wins1, wins2, len(self.results) - wins1 - wins2

    def get_pieces(self) -> tuple[int, int]:
        """Total final tokens of player 1 and player 2."""
        return (
            sum(result.player1_tokens for result in self.results),
            sum(result.player2_tokens for result in self.results),
        )

    def _log_move_stats(self, player: OthelloAI) -> None:
        if (
            self.logger is None
            or not self.log_moves
            or not isinstance(player, MinimaxAI)
        ):
            return
        log_search_stats(self.logger, player.last_stats, step=self._move_step)
        self._move_step += 1
