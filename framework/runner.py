"""The judge loop: read a turn, ask the bot, print one move.

The judge never tells a bot the game is over; it simply stops sending
input, so the loop ends at end of input.
"""

import logging
import os
import signal
import sys
from typing import Optional, TextIO

from board.actions import Action
from board.protocol import LineReader, read_cells, read_turn
from board.state import GameState
from framework.bot_interface import Bot

logger = logging.getLogger(__name__)

# Seconds a bot may spend on one decision. The judge allows 100ms a turn.
DECISION_TIMEOUT_SECONDS = 0.08

# Whether signal-based timeouts are available (Unix only)
_HAS_SETITIMER = hasattr(signal, "setitimer") and os.name != "nt"


class BotTimeoutError(Exception):
    """Raised when a bot exceeds the allowed time for a decision."""
    pass


def _call_bot_method(method, state, timeout=DECISION_TIMEOUT_SECONDS):
    """Call a bot method under a wall-clock limit.

    Uses an interval timer on Unix so the limit can be a fraction of a
    second. A timeout of None or 0 disables the limit.
    """
    use_timer = _HAS_SETITIMER and timeout
    if use_timer:
        def _timeout_handler(signum, frame):
            raise BotTimeoutError(
                f"Bot method {method.__name__} exceeded {timeout}s time limit"
            )
        old_handler = signal.signal(signal.SIGALRM, _timeout_handler)
        signal.setitimer(signal.ITIMER_REAL, timeout)

    try:
        result = method(state)
    finally:
        if use_timer:
            signal.setitimer(signal.ITIMER_REAL, 0)
            signal.signal(signal.SIGALRM, old_handler)

    return result


def choose_action(
    bot: Bot,
    state: GameState,
    timeout: Optional[float] = DECISION_TIMEOUT_SECONDS,
) -> Action:
    """Ask the bot for a move and make sure it is one the judge accepts.

    Any failure (exception, timeout, wrong type, illegal move) is logged
    and replaced by WAIT so the game goes on.
    """
    try:
        action = _call_bot_method(bot.decide, state, timeout)
    except Exception as e:
        logger.error(
            "Day %d: %s failed: %s: %s", state.day, bot.name, type(e).__name__, e
        )
        return Action.wait("error")

    if not isinstance(action, Action):
        logger.error(
            "Day %d: %s returned %s, not an Action",
            state.day, bot.name, type(action).__name__,
        )
        return Action.wait("error")

    if not state.is_legal(action):
        logger.error("Day %d: %s chose illegal move %s", state.day, bot.name, action)
        return Action.wait("illegal")

    return action


def run(
    bot: Bot,
    stdin: TextIO = None,
    stdout: TextIO = None,
    timeout: Optional[float] = DECISION_TIMEOUT_SECONDS,
) -> int:
    """Play a whole game over the judge's text protocol.

    Args:
        bot: The bot making the decisions.
        stdin: Stream the judge writes to (defaults to sys.stdin).
        stdout: Stream moves are written to (defaults to sys.stdout).
        timeout: Per-decision limit in seconds, None for no limit.

    Returns:
        The number of turns played before the input ended.

    Raises:
        ProtocolError: If the judge sends something unreadable.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    reader = LineReader(stdin)

    try:
        cells = read_cells(reader)
    except EOFError:
        logger.warning("Input ended before the board was sent")
        return 0

    logger.info("%s playing on a %d-cell board", bot.name, len(cells))
    bot.on_game_start(cells)

    turns = 0
    while True:
        try:
            state = read_turn(reader, cells)
        except EOFError:
            break

        action = choose_action(bot, state, timeout)
        logger.debug("%r -> %s", state, action.to_command())
        stdout.write(action.to_command() + "\n")
        stdout.flush()
        turns += 1

        bot.on_turn_end(state, action)

    logger.info("Input ended after %d turns", turns)
    return turns
