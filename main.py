"""Entry point: play a game on stdin/stdout, or compare bots offline.

Usage:
    python main.py                      # Play with SunBot against the judge
    python main.py --bot ShadowBot      # Play with another iteration
    python main.py --list               # Show the available bots
    python main.py --replay game.txt    # Compare all bots on recorded input
    python main.py --verbose            # Debug output on stderr
"""

import argparse
import logging
import os
import sys

from board.protocol import ProtocolError
from framework.replay import (
    compare,
    find_bot,
    format_agreement,
    format_decisions,
    format_summary,
    load_bots_from_directory,
    load_transcript,
)
from framework.runner import DECISION_TIMEOUT_SECONDS, run

DEFAULT_BOT = "SunBot"
BOTS_DIRECTORY = os.path.join(os.path.dirname(os.path.abspath(__file__)), "bots")


def main():
    parser = argparse.ArgumentParser(
        description="Heuristic bots for the forest hex-board puzzle"
    )
    parser.add_argument(
        "--bot", default=DEFAULT_BOT,
        help=f"Bot to play with (default: {DEFAULT_BOT})",
    )
    parser.add_argument(
        "--list", action="store_true",
        help="List the available bots and exit",
    )
    parser.add_argument(
        "--replay", metavar="FILE", default=None,
        help="Replay recorded judge input through every bot and compare",
    )
    parser.add_argument(
        "--timeout", type=float, default=DECISION_TIMEOUT_SECONDS,
        help=f"Seconds allowed per decision, 0 to disable "
             f"(default: {DECISION_TIMEOUT_SECONDS})",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log every decision to stderr",
    )
    args = parser.parse_args()

    # stdout belongs to the judge; all diagnostics go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    bots = load_bots_from_directory(BOTS_DIRECTORY)

    if args.list:
        for bot in bots:
            print(bot.name)
        return

    if args.replay is not None:
        try:
            transcript = load_transcript(args.replay)
        except (OSError, ProtocolError) as e:
            print(f"Error: could not read {args.replay}: {e}", file=sys.stderr)
            sys.exit(1)

        print(f"Replaying {len(transcript)} turns through {len(bots)} bots...")
        results = compare(bots, transcript)
        print(format_decisions(transcript, results))
        print(format_summary(results))
        print(format_agreement(results))

        total_errors = sum(len(r.errors) for r in results)
        if total_errors > 0:
            print(f"\nWarning: {total_errors} errors occurred during replay:")
            for result in results:
                for err in result.errors[:3]:  # show first 3 per bot
                    print(f"  {result.bot_name}: {err}")
                if len(result.errors) > 3:
                    print(f"  ... and {len(result.errors) - 3} more")
        return

    bot, names = find_bot(bots, args.bot)
    if bot is None:
        print(
            f"Error: unknown bot '{args.bot}'. Available: {', '.join(names)}",
            file=sys.stderr,
        )
        sys.exit(1)

    try:
        run(bot, timeout=args.timeout or None)
    except ProtocolError as e:
        logging.getLogger(__name__).error("Bad input from judge: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
