"""
Arena for benchmarking computer players against each other with ELO rating.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np
from tqdm import tqdm

from ..ai import AiAdvisor
from ..game import GameState, Outcome, Player, Position

logger = logging.getLogger(__name__)


class ELORatingSystem:
    """ELO rating system for tracking player strength."""

    def __init__(self, k: float = 32, initial_rating: float = 1500.0):
        """
        Initialize the ELO rating system.

        Args:
            k: K-factor, controls how much ratings change after each game
            initial_rating: Initial rating for new players
        """
        self.k = k
        self.initial_rating = initial_rating
        self.ratings: Dict[str, float] = {}
        self.games_played: Dict[str, int] = {}

    def add_player(self, player_id: str):
        if player_id not in self.ratings:
            self.ratings[player_id] = self.initial_rating
            self.games_played[player_id] = 0

    def get_rating(self, player_id: str) -> float:
        return self.ratings.get(player_id, self.initial_rating)

    @staticmethod
    def expected_score(rating_a: float, rating_b: float) -> float:
        """Expected score of a player rated rating_a against one rated rating_b."""
        return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / 400.0))

    def update_ratings(self, player_a: str, player_b: str, score_a: float):
        """
        Update ratings after a game.

        Args:
            player_a: ID of player A
            player_b: ID of player B
            score_a: Score for player A (1.0 for win, 0.5 for draw, 0.0 for loss)
        """
        self.add_player(player_a)
        self.add_player(player_b)

        expected_a = self.expected_score(self.ratings[player_a], self.ratings[player_b])
        delta = self.k * (score_a - expected_a)
        self.ratings[player_a] += delta
        self.ratings[player_b] -= delta
        self.games_played[player_a] += 1
        self.games_played[player_b] += 1

    def get_leaderboard(self) -> List[Dict]:
        """Get the current leaderboard sorted by rating."""
        leaderboard = [
            {'player_id': pid, 'rating': rating, 'games_played': self.games_played[pid]}
            for pid, rating in self.ratings.items()
        ]
        leaderboard.sort(key=lambda x: x['rating'], reverse=True)
        return leaderboard


class ArenaPlayer:
    """A computer player that can take part in arena games."""

    name = "player"

    def select_move(self, state: GameState) -> Optional[Position]:
        raise NotImplementedError


class HeuristicPlayer(ArenaPlayer):
    """Plays the move chosen by AiAdvisor."""

    def __init__(self, name: str = "heuristic", advisor: Optional[AiAdvisor] = None):
        self.name = name
        self.advisor = advisor or AiAdvisor()

    def select_move(self, state: GameState) -> Optional[Position]:
        return self.advisor.choose_move(state.board, state.current_player)


class RandomPlayer(ArenaPlayer):
    """Plays a uniformly random legal move."""

    def __init__(self, name: str = "random", seed: Optional[int] = None):
        self.name = name
        self.rng = np.random.default_rng(seed)

    def select_move(self, state: GameState) -> Optional[Position]:
        moves = list(state.legal_moves())
        if not moves:
            return None
        return moves[int(self.rng.integers(len(moves)))]


@dataclass
class MatchResult:
    black: str
    white: str
    black_count: int
    white_count: int
    outcome: Outcome
    num_moves: int

    def score_for(self, name: str) -> float:
        """Game score from one player's side: 1 win, 0.5 tie, 0 loss."""
        if self.outcome is Outcome.TIE:
            return 0.5
        winner = self.black if self.outcome is Outcome.BLACK_WINS else self.white
        return 1.0 if winner == name else 0.0


class Arena:
    """Plays games between computer players and tracks their ratings."""

    def __init__(self, elo_system: Optional[ELORatingSystem] = None, show_progress: bool = True):
        self.elo = elo_system if elo_system is not None else ELORatingSystem()
        self.show_progress = show_progress

    def play_game(self, black: ArenaPlayer, white: ArenaPlayer) -> MatchResult:
        """
        Play a single game to the end.

        Args:
            black: Player moving first
            white: Player moving second

        Returns:
            MatchResult with final counts and outcome
        """
        state = GameState()
        players = {Player.BLACK: black, Player.WHITE: white}
        num_moves = 0

        while not state.is_terminal():
            move = players[state.current_player].select_move(state)
            if move is None:
                state.pass_turn()
                continue
            state.apply_move(move)
            num_moves += 1

        score = state.tally()
        return MatchResult(black=black.name, white=white.name,
                           black_count=score.black, white_count=score.white,
                           outcome=state.outcome(), num_moves=num_moves)

    def run_match(self, player_a: ArenaPlayer, player_b: ArenaPlayer, games: int) -> Dict:
        """
        Play a series of games, alternating who plays Black.

        Args:
            player_a: First player (Black in even-numbered games)
            player_b: Second player
            games: Number of games to play

        Returns:
            Dictionary with per-player wins, draws, ratings and the game results
        """
        if player_a.name == player_b.name:
            raise ValueError(f"Players need distinct names, both are {player_a.name!r}")
        if games < 1:
            raise ValueError("Need at least one game")

        self.elo.add_player(player_a.name)
        self.elo.add_player(player_b.name)
        wins = {player_a.name: 0, player_b.name: 0}
        draws = 0
        results: List[MatchResult] = []

        for game_idx in tqdm(range(games), desc=f"{player_a.name} vs {player_b.name}",
                             disable=not self.show_progress):
            if game_idx % 2 == 0:
                black, white = player_a, player_b
            else:
                black, white = player_b, player_a
            result = self.play_game(black, white)
            results.append(result)

            score_a = result.score_for(player_a.name)
            self.elo.update_ratings(player_a.name, player_b.name, score_a)
            if score_a == 1.0:
                wins[player_a.name] += 1
            elif score_a == 0.0:
                wins[player_b.name] += 1
            else:
                draws += 1
            logger.debug("Game %d: %s (B) %d - %d %s (W)", game_idx + 1,
                         result.black, result.black_count, result.white_count, result.white)

        return {
            'games_played': games,
            'wins': wins,
            'draws': draws,
            'ratings': {name: self.elo.get_rating(name) for name in wins},
            'results': results,
        }
