"""
Entry point for the OFC engine.
Plays a full series against the CPU with the human seat on autoplay.
"""

import argparse
import asyncio
import logging
import random

from ofc.config import load_settings
from ofc.game import Game
from ofc.showdown_engine import format_score_summary
from ofc.version import get_version_info


def make_autoplay_actor(bet: int):
    """Actor that stakes a fixed amount and lets the engine place each card."""

    def actor(state: dict) -> dict:
        if state['phase'] == 'BETTING':
            return {'action': 'bet', 'amount': bet}
        return {'action': 'auto'}

    return actor


async def main(rounds, seed, bet, env_file=None, settings=None):
    settings = settings or load_settings(env_file)
    if rounds is not None:
        settings = settings._replace(total_rounds=rounds)
    # no UI to pace, so skip the draw delay
    settings = settings._replace(draw_delay=0)

    game = Game(settings=settings, rng=random.Random(seed))
    game.human.actor = make_autoplay_actor(bet)

    print(f"🃏 OFC series: {settings.total_rounds} rounds, {settings.starting_bankroll} each")
    print("=" * 50)
    results = await game.play_match()
    for result in results:
        s = result['settlement']
        print(f"Round {result['round']}: pot ${s['pot']}")
        print(format_score_summary(result))
        print("-" * 50)

    m = game.match
    print(f"Final bankrolls: Player ${m.human_bankroll} / CPU ${m.ai_bankroll}")
    print(f"Rounds won: Player {m.human_wins} / CPU {m.ai_wins}")
    return game


def run():
    parser = argparse.ArgumentParser(description="Play a heads-up OFC series against the CPU")
    parser.add_argument("--rounds", type=int, default=None, help="Rounds in the series (default from settings)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible series")
    parser.add_argument("--bet", type=int, default=100, help="Autoplay stake per round")
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    args = parser.parse_args()

    if args.version:
        info = get_version_info()
        print(f"ofc {info['version']} ({info['build_date']})")
        return

    try:
        settings = load_settings(args.env_file)
        logging.basicConfig(level=logging.DEBUG if args.debug else settings.log_level)
        asyncio.run(main(args.rounds, args.seed, args.bet, settings=settings))
    except KeyboardInterrupt:
        print("\n👋 Bye")
    except ValueError as e:
        print(f"❌ Error: {e}")


if __name__ == "__main__":
    run()
