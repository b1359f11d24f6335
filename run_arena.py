"""
Script for benchmarking the heuristic computer player against a random baseline.
"""
import os
import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.arena import Arena, ELORatingSystem, HeuristicPlayer, RandomPlayer
from src.config import Config, get_default_config
from src.logger import setup_logger


def main():
    parser = argparse.ArgumentParser(description='Run heuristic vs random Othello games')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--games', type=int, default=None,
                        help='Number of games to play')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random player')
    args = parser.parse_args()

    if args.config and os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()
    if args.games is not None:
        config.arena.games = args.games
    if args.seed is not None:
        config.arena.seed = args.seed

    logger = setup_logger(config)
    try:
        elo = ELORatingSystem(k=config.arena.elo_k, initial_rating=config.arena.initial_rating)
        arena = Arena(elo_system=elo, show_progress=config.arena.show_progress)
        heuristic = HeuristicPlayer()
        baseline = RandomPlayer(seed=config.arena.seed)

        summary = arena.run_match(heuristic, baseline, config.arena.games)

        logger.log_metrics({
            'games': summary['games_played'],
            'heuristic_wins': summary['wins'][heuristic.name],
            'random_wins': summary['wins'][baseline.name],
            'draws': summary['draws'],
            'heuristic_elo': summary['ratings'][heuristic.name],
            'random_elo': summary['ratings'][baseline.name],
        })

        print("\nLeaderboard:")
        print("Rank  Player      Rating  Games Played")
        print("----  ----------  ------  ------------")
        for i, entry in enumerate(elo.get_leaderboard(), 1):
            print(f"{i:4d}  {entry['player_id']:10s}  {entry['rating']:6.1f}  {entry['games_played']:12d}")
    finally:
        logger.close()


if __name__ == '__main__':
    main()
