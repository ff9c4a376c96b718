"""
Data manager for JSON file operations: question bank loading and
leaderboard persistence.
"""
import json
import logging
from typing import Any, Dict, List, Optional
from pathlib import Path

from .models import Difficulty, Leaderboard, Question, QuizDataError


class DataManager:
    """Loads question banks and loads/saves the leaderboard as JSON files."""

    def __init__(self):
        """Initialize DataManager with no recorded errors."""
        self.logger = logging.getLogger(__name__)
        self.last_error: Optional[str] = None  # Most recent failure, for user feedback
        self.leaderboard_missing = False  # Set when the leaderboard file does not exist yet

    def load_leaderboard(self, path: str) -> Optional[Leaderboard]:
        """
        Load the leaderboard from a JSON file.

        Args:
            path: Path to the leaderboard file

        Returns:
            Leaderboard, or None if the file is missing, unreadable or invalid
        """
        self.last_error = None
        self.leaderboard_missing = False
        file_path = Path(path)

        if not file_path.exists():
            self.leaderboard_missing = True
            self.logger.info(f"No leaderboard file at {file_path}, starting empty")
            return None

        data = self._load_single_file(file_path)
        if data is None:
            return None

        if not self.validate_leaderboard_structure(data):
            self._record_error(f"Error reading leaderboard from {file_path}: invalid leaderboard structure")
            return None

        leaderboard = Leaderboard.from_dict(data)
        self.logger.info(f"Loaded leaderboard with {len(leaderboard)} entries from {file_path}")
        return leaderboard

    def save_leaderboard(self, leaderboard: Leaderboard, path: str) -> bool:
        """
        Write the leaderboard to a JSON file, replacing its contents.

        Args:
            leaderboard: Leaderboard to persist
            path: Destination file path

        Returns:
            True if the file was written, False otherwise
        """
        self.last_error = None
        file_path = Path(path)
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(leaderboard.to_dict(), f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            self._record_error(f"Error writing leaderboard to {file_path}: {e}")
            return False

        self.logger.info(f"Saved leaderboard with {len(leaderboard)} entries to {file_path}")
        return True

    def load_questions(self, path: str) -> Optional[List[Question]]:
        """
        Load the question bank from a JSON file.

        Args:
            path: Path to the question bank file

        Returns:
            List of Question objects, or None if loading failed
        """
        self.last_error = None
        file_path = Path(path)

        data = self._load_single_file(file_path)
        if data is None:
            return None

        if not self.validate_question_bank(data):
            self._record_error(f"Error reading questions from {file_path}: invalid question bank structure")
            return None

        try:
            questions = self._parse_questions(data)
        except QuizDataError as e:
            self._record_error(f"Error reading questions from {file_path}: {e}")
            return None

        self.logger.info(f"Loaded {len(questions)} questions from {file_path}")
        return questions

    def _load_single_file(self, file_path: Path) -> Optional[Any]:
        """
        Load and parse a single JSON file.

        Args:
            file_path: Path to the JSON file

        Returns:
            Parsed JSON data or None if loading failed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            self._record_error(f"Error reading {file_path}: invalid JSON ({e})")
            return None
        except FileNotFoundError:
            self._record_error(f"Error reading {file_path}: file not found")
            return None
        except RecursionError:
            self._record_error(f"Error reading {file_path}: invalid JSON (nested too deeply)")
            return None
        except (OSError, UnicodeDecodeError) as e:
            self._record_error(f"Error reading {file_path}: {e}")
            return None

    def validate_question_bank(self, data: Any) -> bool:
        """
        Validate that JSON data has the question bank structure.

        Expected structure:
        {
            "questions": [
                {
                    "questionText": str,
                    "possibleAnswers": [str, ...],
                    "correctAnswerIndex": int,
                    "difficultyLevel": "easy" | "medium" | "hard",
                    "category": str
                }
            ]
        }

        Args:
            data: Parsed JSON data to validate

        Returns:
            True if structure is valid, False otherwise
        """
        if not isinstance(data, dict):
            self.logger.error("Question bank must be a JSON object")
            return False

        if "questions" not in data:
            self.logger.error("Question bank must contain a 'questions' key")
            return False

        questions = data["questions"]
        if not isinstance(questions, list):
            self.logger.error("'questions' value must be an array")
            return False

        valid_levels = {level.value for level in Difficulty}
        for i, question_data in enumerate(questions):
            if not isinstance(question_data, dict):
                self.logger.error(f"Question {i} must be an object")
                return False

            for key in ("questionText", "possibleAnswers", "correctAnswerIndex",
                        "difficultyLevel", "category"):
                if key not in question_data:
                    self.logger.error(f"Question {i} missing '{key}' field")
                    return False

            answers = question_data["possibleAnswers"]
            if not isinstance(answers, list):
                self.logger.error(f"Question {i} 'possibleAnswers' field must be an array")
                return False

            index = question_data["correctAnswerIndex"]
            if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(answers):
                self.logger.error(f"Question {i} 'correctAnswerIndex' must index into 'possibleAnswers'")
                return False

            if question_data["difficultyLevel"] not in valid_levels:
                self.logger.error(f"Question {i} has unknown difficultyLevel "
                                  f"{question_data['difficultyLevel']!r}")
                return False

        return True

    def validate_leaderboard_structure(self, data: Any) -> bool:
        """Validate that JSON data has the leaderboard structure."""
        if not isinstance(data, dict) or not isinstance(data.get("leaderboard"), list):
            self.logger.error("Leaderboard data must be an object with a 'leaderboard' array")
            return False

        for i, entry in enumerate(data["leaderboard"]):
            if not isinstance(entry, dict):
                self.logger.error(f"Leaderboard entry {i} must be an object")
                return False
            if not isinstance(entry.get("name"), str):
                self.logger.error(f"Leaderboard entry {i} 'name' must be a string")
                return False
            score = entry.get("score")
            if not isinstance(score, int) or isinstance(score, bool):
                self.logger.error(f"Leaderboard entry {i} 'score' must be an integer")
                return False

        return True

    def _parse_questions(self, bank_data: Dict[str, Any]) -> List[Question]:
        """
        Parse validated question bank data into Question objects.

        Args:
            bank_data: Validated question bank dictionary

        Returns:
            List of Question objects
        """
        return [Question.from_dict(question_data) for question_data in bank_data["questions"]]

    def _record_error(self, message: str) -> None:
        self.logger.error(message)
        self.last_error = message

    def get_last_error(self) -> Optional[str]:
        """
        Get the message of the most recent failed operation.

        Returns:
            Error message, or None if the last operation succeeded
        """
        return self.last_error
