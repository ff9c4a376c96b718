"""
Unit tests for ConfigManager class.
"""
import json
import logging
import shutil
import tempfile
import unittest
from pathlib import Path

from trivia_quiz.config_manager import ConfigManager
from trivia_quiz.models import GameSettings


class TestConfigManager(unittest.TestCase):
    """Test cases for ConfigManager functionality."""

    def setUp(self):
        """Set up test fixtures before each test method."""
        self.config_manager = ConfigManager()
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = Path(self.temp_dir) / "config.json"

        # Suppress logging during tests
        logging.disable(logging.CRITICAL)

    def tearDown(self):
        """Clean up after each test method."""
        logging.disable(logging.NOTSET)
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write_config(self, data):
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f)

    def test_initialization_with_defaults(self):
        """Test that ConfigManager initializes with correct default values."""
        settings = self.config_manager.get_settings()

        self.assertIsInstance(settings, GameSettings)
        self.assertEqual(settings.leaderboard_path, "Leaderboard.json")
        self.assertEqual(settings.questions_path, "Question.json")
        self.assertEqual(settings.log_directory, "./logs/")
        self.assertEqual(settings.log_level, "WARNING")

    def test_get_settings_returns_copy(self):
        settings = self.config_manager.get_settings()
        settings.leaderboard_path = "changed.json"

        self.assertEqual(self.config_manager.get_leaderboard_path(), "Leaderboard.json")

    def test_set_paths_valid(self):
        result = self.config_manager.set_leaderboard_path("scores/board.json")
        self.assertTrue(result['success'])
        self.assertEqual(self.config_manager.get_leaderboard_path(), "scores/board.json")

        result = self.config_manager.set_questions_path("bank.json")
        self.assertTrue(result['success'])
        self.assertEqual(self.config_manager.get_questions_path(), "bank.json")

    def test_set_paths_invalid(self):
        """Test that empty and non-string paths are rejected."""
        for bad_value in ("", "   ", 42, None):
            result = self.config_manager.set_leaderboard_path(bad_value)
            self.assertFalse(result['success'])
            self.assertIn('user_message', result)

            result = self.config_manager.set_questions_path(bad_value)
            self.assertFalse(result['success'])

        self.assertEqual(self.config_manager.get_leaderboard_path(), "Leaderboard.json")
        self.assertEqual(self.config_manager.get_questions_path(), "Question.json")

    def test_set_log_level(self):
        result = self.config_manager.set_log_level("debug")

        self.assertTrue(result['success'])
        self.assertEqual(self.config_manager.get_log_level(), "DEBUG")

    def test_set_log_level_invalid(self):
        for bad_value in ("verbose", 10):
            result = self.config_manager.set_log_level(bad_value)
            self.assertFalse(result['success'])

        self.assertEqual(self.config_manager.get_log_level(), "WARNING")

    def test_set_log_directory(self):
        self.assertTrue(self.config_manager.set_log_directory("/tmp/quiz-logs")['success'])
        self.assertEqual(self.config_manager.get_log_directory(), "/tmp/quiz-logs")
        self.assertFalse(self.config_manager.set_log_directory("")['success'])

    def test_load_config_file_missing_keeps_defaults(self):
        result = self.config_manager.load_config_file(str(self.config_path))

        self.assertTrue(result['success'])
        self.assertEqual(result['issues'], [])
        self.assertEqual(self.config_manager.get_leaderboard_path(), "Leaderboard.json")

    def test_load_config_file_valid(self):
        self._write_config({
            "files": {"leaderboard": "board.json", "questions": "bank.json"},
            "logging": {"level": "info", "log_directory": "./quiz-logs/"}
        })

        result = self.config_manager.load_config_file(str(self.config_path))

        self.assertTrue(result['success'])
        self.assertEqual(self.config_manager.get_leaderboard_path(), "board.json")
        self.assertEqual(self.config_manager.get_questions_path(), "bank.json")
        self.assertEqual(self.config_manager.get_log_level(), "INFO")
        self.assertEqual(self.config_manager.get_log_directory(), "./quiz-logs/")

    def test_load_config_file_partial(self):
        self._write_config({"files": {"questions": "bank.json"}})

        result = self.config_manager.load_config_file(str(self.config_path))

        self.assertTrue(result['success'])
        self.assertEqual(self.config_manager.get_questions_path(), "bank.json")
        self.assertEqual(self.config_manager.get_leaderboard_path(), "Leaderboard.json")

    def test_load_config_file_invalid_json(self):
        with open(self.config_path, 'w') as f:
            f.write("{ invalid json }")

        result = self.config_manager.load_config_file(str(self.config_path))

        self.assertFalse(result['success'])
        self.assertEqual(len(result['issues']), 1)
        self.assertEqual(self.config_manager.get_settings(), GameSettings())

    def test_load_config_file_deeply_nested(self):
        with open(self.config_path, 'w') as f:
            f.write("[" * 100000 + "]" * 100000)

        result = self.config_manager.load_config_file(str(self.config_path))

        self.assertFalse(result['success'])
        self.assertEqual(self.config_manager.get_settings(), GameSettings())

    def test_load_config_file_not_an_object(self):
        self._write_config(["files"])

        result = self.config_manager.load_config_file(str(self.config_path))

        self.assertFalse(result['success'])

    def test_load_config_file_skips_invalid_values(self):
        self._write_config({
            "files": {"leaderboard": "", "questions": "bank.json"},
            "logging": {"level": "loud"}
        })

        result = self.config_manager.load_config_file(str(self.config_path))

        self.assertFalse(result['success'])
        self.assertEqual(len(result['issues']), 2)
        self.assertEqual(self.config_manager.get_questions_path(), "bank.json")
        self.assertEqual(self.config_manager.get_leaderboard_path(), "Leaderboard.json")
        self.assertEqual(self.config_manager.get_log_level(), "WARNING")

    def test_reset_to_defaults(self):
        self.config_manager.set_leaderboard_path("other.json")
        self.config_manager.set_log_level("ERROR")

        self.config_manager.reset_to_defaults()

        self.assertEqual(self.config_manager.get_settings(), GameSettings())

    def test_validate_settings(self):
        validation = self.config_manager.validate_settings()
        self.assertTrue(validation["valid"])
        self.assertEqual(validation["issues"], [])

        self.config_manager._settings.log_level = "LOUD"
        validation = self.config_manager.validate_settings()
        self.assertFalse(validation["valid"])
        self.assertEqual(len(validation["issues"]), 1)

    def test_get_settings_summary(self):
        self.config_manager.set_questions_path("bank.json")

        summary = self.config_manager.get_settings_summary()

        self.assertIn("bank.json", summary)
        self.assertIn("Leaderboard.json", summary)
        self.assertIn("WARNING", summary)


if __name__ == '__main__':
    unittest.main()
