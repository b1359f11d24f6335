"""
Play Othello against the computer in the terminal.
"""
import os
import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.config import Config, get_default_config
from src.controller import ConsoleController
from src.logger import setup_logger


def main():
    parser = argparse.ArgumentParser(description='Play Othello against the computer')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--human-color', choices=['black', 'white'], default=None,
                        help='Colour you play (black moves first)')
    parser.add_argument('--delay', type=float, default=None,
                        help='Seconds the computer waits before moving')
    parser.add_argument('--no-hints', action='store_true',
                        help='Do not mark legal moves on the board')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG shows move evaluations)')
    args = parser.parse_args()

    if args.config and os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        if args.config:
            print(f"Config file {args.config} not found, using default configuration")
        config = get_default_config()

    if args.human_color:
        config.play.human_color = args.human_color
    if args.delay is not None:
        config.play.ai_delay = args.delay
    if args.no_hints:
        config.play.show_hints = False
    if args.log_level:
        config.logging.log_level = args.log_level

    logger = setup_logger(config)
    try:
        ConsoleController(config.play).play()
    except KeyboardInterrupt:
        print("\nGame interrupted.")
    finally:
        logger.close()


if __name__ == "__main__":
    main()
