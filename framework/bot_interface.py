"""Abstract base class for forest bots.

Subclass Bot and implement decide(), which receives the state of the
current turn and returns one Action.

Example:
    from board.actions import Action
    from framework.bot_interface import Bot

    class MyBot(Bot):
        @property
        def name(self):
            return "My Bot"

        def decide(self, state):
            for action in state.all_actions():
                return action
            return Action.wait()
"""

from abc import ABC, abstractmethod
from typing import Mapping

from board.actions import Action
from board.cell import Cell
from board.state import GameState


class Bot(ABC):
    """Abstract base class for forest bots.

    The runner calls your methods in this order:
    1. on_game_start() - once, with the board
    2. decide() - every turn
    3. on_turn_end() - every turn, with the action actually sent

    The GameState passed to decide() offers:
    - state.day, state.sun, state.score, state.nutrients
    - state.trees: trees by cell index, state.my_trees()
    - state.actions_of(ActionType.GROW) and friends: the legal moves
    - state.shadows: today's shadows by cell index
    - state.grow_cost(size), state.seed_cost()
    """

    @property
    def name(self) -> str:
        """Return the display name of this bot.

        Defaults to the class name.
        """
        return self.__class__.__name__

    @abstractmethod
    def decide(self, state: GameState) -> Action:
        """Choose this turn's move.

        Args:
            state: The current turn. Only actions listed in
                state.possible_actions (or WAIT) are accepted.

        Returns:
            The Action to send. Attach a debug message with
            action.with_message() to have it shown by the judge.
        """
        pass

    def on_game_start(self, cells: Mapping[int, Cell]) -> None:
        """Called once after the board has been read (optional).

        Args:
            cells: The board, by cell index.
        """
        pass

    def on_turn_end(self, state: GameState, action: Action) -> None:
        """Called after the move for a turn has been sent (optional).

        Args:
            state: The turn the move was made in.
            action: The move that was sent, after any fallback.
        """
        pass
