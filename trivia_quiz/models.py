"""
Core data models for the Trivia Quiz game.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


class QuizError(Exception):
    """Base exception for trivia quiz errors."""
    pass


class QuizDataError(QuizError):
    """Raised when JSON data does not have the expected shape."""
    pass


class InvalidDifficultyError(QuizError):
    """Raised when a difficulty value outside the known levels is constructed."""
    pass


class Difficulty(Enum):
    """Question difficulty levels, serialized as lowercase strings."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def from_menu_choice(cls, choice: int) -> "Difficulty":
        """
        Map a difficulty menu number (1-3) to a Difficulty.

        Raises:
            InvalidDifficultyError: If choice is not a menu number
        """
        menu = {1: cls.EASY, 2: cls.MEDIUM, 3: cls.HARD}
        if choice not in menu:
            raise InvalidDifficultyError(f"Invalid difficulty level: {choice}")
        return menu[choice]


@dataclass(frozen=True)
class Player:
    """A finished session's result as stored on the leaderboard."""
    name: str
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "score": self.score}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        if not isinstance(data, dict):
            raise QuizDataError("Leaderboard entry must be an object")
        name = data.get("name")
        score = data.get("score")
        if not isinstance(name, str):
            raise QuizDataError("Leaderboard entry 'name' must be a string")
        if not isinstance(score, int) or isinstance(score, bool):
            raise QuizDataError("Leaderboard entry 'score' must be an integer")
        return cls(name=name, score=score)


@dataclass(frozen=True)
class Question:
    """Represents a single multiple-choice quiz question."""
    question_text: str
    possible_answers: Tuple[str, ...]
    correct_answer_index: int
    difficulty_level: Difficulty
    category: str

    def is_correct(self, answer_index: int) -> bool:
        """Check a 0-based answer index against the correct one."""
        return answer_index == self.correct_answer_index

    def to_dict(self) -> Dict[str, Any]:
        return {
            "questionText": self.question_text,
            "possibleAnswers": list(self.possible_answers),
            "correctAnswerIndex": self.correct_answer_index,
            "difficultyLevel": self.difficulty_level.value,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        """
        Build a Question from its JSON representation.

        Args:
            data: Dictionary using the question bank's camelCase keys

        Returns:
            Question instance

        Raises:
            QuizDataError: If a field is missing, has the wrong type, or the
                correct answer index does not point into possibleAnswers
        """
        if not isinstance(data, dict):
            raise QuizDataError("Question must be an object")

        for key in ("questionText", "possibleAnswers", "correctAnswerIndex",
                    "difficultyLevel", "category"):
            if key not in data:
                raise QuizDataError(f"Question missing '{key}' field")

        if not isinstance(data["questionText"], str):
            raise QuizDataError("'questionText' field must be a string")
        if not isinstance(data["category"], str):
            raise QuizDataError("'category' field must be a string")

        answers = data["possibleAnswers"]
        if not isinstance(answers, list) or not all(isinstance(a, str) for a in answers):
            raise QuizDataError("'possibleAnswers' field must be an array of strings")

        index = data["correctAnswerIndex"]
        if not isinstance(index, int) or isinstance(index, bool):
            raise QuizDataError("'correctAnswerIndex' field must be an integer")
        if not 0 <= index < len(answers):
            raise QuizDataError(
                f"'correctAnswerIndex' {index} is out of range for {len(answers)} answers"
            )

        try:
            difficulty = Difficulty(data["difficultyLevel"])
        except ValueError:
            raise QuizDataError(f"Unknown difficultyLevel: {data['difficultyLevel']!r}")

        return cls(
            question_text=data["questionText"],
            possible_answers=tuple(answers),
            correct_answer_index=index,
            difficulty_level=difficulty,
            category=data["category"],
        )


@dataclass
class Leaderboard:
    """Score-sorted list of past players, highest score first."""
    entries: List[Player] = field(default_factory=list)

    def update(self, player: Player) -> None:
        """Add a player and keep entries sorted by score, descending."""
        self.entries.append(player)
        # list.sort is stable, so equal scores keep their insertion order
        self.entries.sort(key=lambda p: p.score, reverse=True)

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        return {"leaderboard": [player.to_dict() for player in self.entries]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Leaderboard":
        if not isinstance(data, dict) or "leaderboard" not in data:
            raise QuizDataError("Leaderboard data must contain a 'leaderboard' key")
        if not isinstance(data["leaderboard"], list):
            raise QuizDataError("'leaderboard' value must be an array")
        return cls(entries=[Player.from_dict(entry) for entry in data["leaderboard"]])


@dataclass
class GameSettings:
    """Configuration settings for a game run."""
    leaderboard_path: str = "Leaderboard.json"
    questions_path: str = "Question.json"
    log_directory: str = "./logs/"
    log_level: str = "WARNING"
