"""
Quiz engine core logic for the Trivia Quiz game.
Handles question filtering, ordering, asking and scoring.
"""
import re
import random
import logging
from typing import Callable, List, Optional

from .models import Difficulty, Question

logger = logging.getLogger(__name__)

# Plain ASCII decimal numbers only
_CHOICE_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_choice(user_input: str) -> Optional[int]:
    """
    Parse a typed menu or answer number.

    Args:
        user_input: Raw line entered by the player

    Returns:
        The integer, or None if the input is not a plain decimal number
    """
    text = user_input.strip()
    if not _CHOICE_PATTERN.fullmatch(text):
        return None
    return int(text)


class QuizEngine:
    """Runs a quiz session against injected terminal I/O."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the quiz engine.

        Args:
            input_func: Reads one line of input after showing a prompt
            output_func: Writes one line of output
            rng: Randomness source used to shuffle questions; a fresh,
                unseeded random.Random if None
        """
        self.input_func = input_func
        self.output_func = output_func
        self.rng = rng if rng is not None else random.Random()

    def filter_by_difficulty(self, questions: List[Question], difficulty: Difficulty) -> List[Question]:
        """
        Keep only questions at the requested difficulty.

        Args:
            questions: Full question bank
            difficulty: Level to keep

        Returns:
            New list of matching questions in bank order
        """
        return [q for q in questions if q.difficulty_level == difficulty]

    def shuffle_questions(self, questions: List[Question]) -> List[Question]:
        """
        Shuffle questions randomly.

        Args:
            questions: List of questions to shuffle

        Returns:
            New list with questions in random order
        """
        shuffled = questions.copy()
        self.rng.shuffle(shuffled)
        return shuffled

    def play(self, questions: List[Question], difficulty: Difficulty) -> int:
        """
        Ask every question of one difficulty in random order.

        Args:
            questions: Full question bank
            difficulty: Level chosen by the player

        Returns:
            Number of correctly answered questions; 0 when no question
            matches the difficulty
        """
        selected = self.shuffle_questions(self.filter_by_difficulty(questions, difficulty))
        logger.info(f"Starting {difficulty.value} quiz with {len(selected)} questions")

        score = 0
        for question in selected:
            if self.ask_question(question):
                score += 1

        logger.info(f"Quiz finished with score {score}/{len(selected)}")
        return score

    def ask_question(self, question: Question) -> bool:
        """
        Present one question and read a single answer.

        Invalid or out-of-range input counts as incorrect and is not
        re-prompted.

        Args:
            question: Question to ask

        Returns:
            True if the player picked the correct answer
        """
        answer_count = len(question.possible_answers)

        self.output_func(question.question_text)
        for number, answer in enumerate(question.possible_answers, start=1):
            self.output_func(f"{number}. {answer}")

        user_input = self.input_func(f"\nEnter your answer (1-{answer_count}): ")
        choice = parse_choice(user_input)
        if choice is None:
            logger.debug(f"Unparseable answer {user_input!r}")
            self.output_func("\nInvalid input.")
            return False

        if not 1 <= choice <= answer_count:
            logger.debug(f"Answer {choice} out of range 1-{answer_count}")
            self.output_func(f"\nInvalid answer. Please enter a number between 1 and {answer_count}.")
            return False

        if question.is_correct(choice - 1):
            self.output_func("\nCorrect!\n")
            return True

        self.output_func("\nIncorrect!\n")
        return False
