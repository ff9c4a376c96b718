"""
Menu controller for the Trivia Quiz game.
Drives the interactive menu, runs quiz sessions and keeps the leaderboard.
"""
import logging
from enum import Enum
from typing import Callable, Optional

from .models import Difficulty, Leaderboard, Player
from .quiz_engine import QuizEngine, parse_choice
from .data_manager import DataManager
from .config_manager import ConfigManager


class MenuState(Enum):
    """Enumeration of menu controller states."""
    AWAITING_NAME = "awaiting_name"
    MAIN_MENU = "main_menu"
    PLAYING = "playing"
    REVIEWING = "reviewing"
    EXITED = "exited"


MENU_PLAY = 1
MENU_REVIEW = 2
MENU_EXIT = 3


class QuizController:
    """
    Orchestrates a game run from name entry to exit.

    The controller owns the leaderboard for the whole run. It is loaded once
    after the player's name is captured, updated after every completed quiz
    and written back to disk straight away.
    """

    def __init__(
        self,
        data_manager: DataManager,
        config_manager: ConfigManager,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        quiz_engine: Optional[QuizEngine] = None
    ):
        """
        Initialize the quiz controller.

        Args:
            data_manager: Instance for loading questions and persisting the leaderboard
            config_manager: Instance for file locations
            input_func: Reads one line of input after showing a prompt
            output_func: Writes one line of output
            quiz_engine: Engine that asks the questions; built from the I/O functions if None
        """
        self.logger = logging.getLogger(__name__)
        self.data_manager = data_manager
        self.config_manager = config_manager
        self.input_func = input_func
        self.output_func = output_func
        self.quiz_engine = quiz_engine or QuizEngine(input_func, output_func)

        self.state = MenuState.AWAITING_NAME
        self.player_name: Optional[str] = None
        self.leaderboard = Leaderboard()

    def run(self) -> int:
        """
        Run the game until the player chooses Exit.

        Returns:
            Process exit status (0)
        """
        self.player_name = self.capture_player_name()
        self.leaderboard = self.load_leaderboard()
        self._transition(MenuState.MAIN_MENU)

        while self.state != MenuState.EXITED:
            self.display_main_menu()
            self.handle_menu_choice(self.input_func("\nEnter your choice: "))

        return 0

    def _transition(self, new_state: MenuState) -> None:
        self.logger.debug(f"Menu state {self.state.value} -> {new_state.value}")
        self.state = new_state

    def capture_player_name(self) -> str:
        """
        Prompt until a non-empty name is entered.

        Returns:
            Player name with surrounding whitespace removed
        """
        while True:
            name = self.input_func("Enter your name: ").strip()
            if name:
                self.logger.info(f"Player name captured: {name}")
                return name
            self.output_func("Invalid name. Please try again.")

    def load_leaderboard(self) -> Leaderboard:
        """
        Load the saved leaderboard, falling back to an empty one.

        Returns:
            Saved Leaderboard, or an empty Leaderboard if none could be read
        """
        path = self.config_manager.get_leaderboard_path()
        leaderboard = self.data_manager.load_leaderboard(path)
        if leaderboard is not None:
            return leaderboard

        if self.data_manager.leaderboard_missing:
            self.output_func(f"\nNo saved leaderboard found at {path}. Starting a new one.")
        else:
            self.output_func(f"\n{self.data_manager.get_last_error()}")
            self.logger.warning("Starting with an empty leaderboard after load failure")
        return Leaderboard()

    def display_main_menu(self) -> None:
        """Print the main menu banner."""
        self.output_func("\n**********************")
        self.output_func("*      Quiz Game     *")
        self.output_func("*    1-Play Game     *")
        self.output_func("*    2-Review Scores *")
        self.output_func("*      3-Exit        *")
        self.output_func("**********************")

    def handle_menu_choice(self, user_input: str) -> None:
        """
        Dispatch one main menu selection.

        Args:
            user_input: Raw line entered at the menu prompt
        """
        option = parse_choice(user_input)
        if option is None:
            self.output_func("\nInvalid input. Please enter a number.")
            return

        if option == MENU_PLAY:
            self._transition(MenuState.PLAYING)
            self.start_game()
            self._transition(MenuState.MAIN_MENU)
        elif option == MENU_REVIEW:
            self._transition(MenuState.REVIEWING)
            self.display_leaderboard()
            self._transition(MenuState.MAIN_MENU)
        elif option == MENU_EXIT:
            self._transition(MenuState.EXITED)
            self.output_func("\nExiting the game. Goodbye!")
        else:
            self.output_func("\nInvalid choice. Please enter a number.")

    def choose_difficulty(self) -> Optional[Difficulty]:
        """
        Ask for a difficulty level.

        Returns:
            Chosen Difficulty, or None if the input was invalid
        """
        self.output_func("\nChoose difficulty level:")
        self.output_func("1. Easy")
        self.output_func("2. Medium")
        self.output_func("3. Hard")

        choice = parse_choice(self.input_func("\nEnter your choice (1-3): "))
        if choice is None or not 1 <= choice <= 3:
            self.output_func("\nInvalid difficulty level. Please enter a number between 1 and 3.")
            return None

        return Difficulty.from_menu_choice(choice)

    def start_game(self) -> Optional[int]:
        """
        Play one quiz session and record the result.

        Returns:
            Final score, or None if the session could not start
        """
        difficulty = self.choose_difficulty()
        if difficulty is None:
            return None

        questions = self.data_manager.load_questions(self.config_manager.get_questions_path())
        if questions is None:
            self.output_func(f"\n{self.data_manager.get_last_error()}")
            self.output_func("\nFailed to load questions.")
            return None

        final_score = self.quiz_engine.play(questions, difficulty)
        self.output_func(f"\nYour final score: {final_score}")

        self.record_score(Player(name=self.player_name, score=final_score))
        return final_score

    def record_score(self, player: Player) -> bool:
        """
        Add a result to the leaderboard and write it to disk.

        The in-memory leaderboard keeps the result even if saving fails.

        Returns:
            True if the leaderboard file was written
        """
        self.leaderboard.update(player)
        self.logger.info(f"Recorded score {player.score} for {player.name}")

        if self.data_manager.save_leaderboard(self.leaderboard, self.config_manager.get_leaderboard_path()):
            self.output_func("\nLeaderboard updated successfully.")
            return True

        self.output_func(f"\n{self.data_manager.get_last_error()}")
        return False

    def display_leaderboard(self) -> None:
        """Print every leaderboard entry in ranked order."""
        self.output_func("Leaderboard:")
        if not self.leaderboard.entries:
            self.output_func("No scores recorded yet.")
            return

        for rank, player in enumerate(self.leaderboard.entries, start=1):
            self.output_func(f"{rank}. {player.name} - Score: {player.score}")
