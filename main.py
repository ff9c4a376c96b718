#!/usr/bin/env python3
"""
Trivia Quiz - Main Entry Point

This script runs the terminal trivia quiz. Questions are read from
Question.json and results are kept in Leaderboard.json, both in the
current directory unless config.json says otherwise.

Usage:
    python main.py

Configuration (optional config.json):
    {
        "files": {"leaderboard": "Leaderboard.json", "questions": "Question.json"},
        "logging": {"level": "WARNING", "log_directory": "./logs/"}
    }
"""

import sys
import logging
from pathlib import Path

from trivia_quiz.config_manager import ConfigManager
from trivia_quiz.data_manager import DataManager
from trivia_quiz.quiz_controller import QuizController

CONFIG_PATH = "config.json"


def load_config(config_path=CONFIG_PATH):
    """Load configuration from config.json, keeping defaults on any problem."""
    config_manager = ConfigManager()
    result = config_manager.load_config_file(config_path)
    if not result['success']:
        print(result['user_message'])
        for issue in result['issues']:
            print(f"  - {issue}")

    validation = config_manager.validate_settings()
    if not validation['valid']:
        print("Warning: configuration is inconsistent, using default settings")
        for issue in validation['issues']:
            print(f"  - {issue}")
        config_manager.reset_to_defaults()

    return config_manager


def setup_logging_from_config(config_manager):
    """Set up file logging based on configuration."""
    settings = config_manager.get_settings()
    log_level = getattr(logging, settings.log_level)
    log_directory = Path(settings.log_directory)

    try:
        log_directory.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(log_directory / "quiz.log", encoding='utf-8')]
    except OSError as e:
        print(f"Warning: cannot write logs to {log_directory}: {e}")
        handlers = [logging.NullHandler()]

    # Standard output belongs to the game, so logs only go to the file
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    logging.getLogger(__name__).info(config_manager.get_settings_summary())


def run_game(config_path=CONFIG_PATH):
    """Run the game with configuration."""
    config_manager = load_config(config_path)
    setup_logging_from_config(config_manager)

    controller = QuizController(
        DataManager(),
        config_manager,
        input_func=input,
        output_func=print
    )
    return controller.run()


def main(config_path=CONFIG_PATH):
    """
    Run the game, treating Ctrl-C and end of input as a normal exit.

    Returns:
        Process exit status
    """
    try:
        return run_game(config_path)
    except (KeyboardInterrupt, EOFError):
        print("\n\nExiting the game. Goodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
