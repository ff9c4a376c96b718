"""
Configuration manager for Trivia Quiz file locations and logging settings.
"""
import json
import logging
from typing import Any, Dict, List
from pathlib import Path

from .models import GameSettings


class ConfigManager:
    """Manages game configuration settings."""

    # Default configuration values
    DEFAULT_LEADERBOARD_PATH = "Leaderboard.json"
    DEFAULT_QUESTIONS_PATH = "Question.json"
    DEFAULT_LOG_DIRECTORY = "./logs/"
    DEFAULT_LOG_LEVEL = "WARNING"

    VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    def __init__(self):
        """Initialize ConfigManager with default settings."""
        self.logger = logging.getLogger(__name__)
        self._settings = GameSettings()
        self.reset_to_defaults()

    def get_settings(self) -> GameSettings:
        """
        Get current game settings.

        Returns:
            Copy of the current GameSettings
        """
        return GameSettings(
            leaderboard_path=self._settings.leaderboard_path,
            questions_path=self._settings.questions_path,
            log_directory=self._settings.log_directory,
            log_level=self._settings.log_level
        )

    def _validate_file_path(self, path: Any, label: str) -> Dict[str, Any]:
        if not isinstance(path, str):
            error_msg = f"{label} must be a string, got {type(path).__name__}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"Invalid {label.lower()}: expected a path, got {type(path).__name__}"
            }

        if not path.strip():
            error_msg = f"{label} cannot be empty"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"{label} cannot be empty"
            }

        return {'success': True}

    def set_leaderboard_path(self, path: str) -> Dict[str, Any]:
        """
        Set the leaderboard file path.

        Args:
            path: Path to the leaderboard JSON file

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        result = self._validate_file_path(path, "Leaderboard path")
        if not result['success']:
            return result

        self._settings.leaderboard_path = path
        self.logger.info(f"Leaderboard path set to {path}")
        return {
            'success': True,
            'message': f"Leaderboard path set to {path}",
            'user_message': f"Leaderboard will be saved to {path}"
        }

    def get_leaderboard_path(self) -> str:
        return self._settings.leaderboard_path

    def set_questions_path(self, path: str) -> Dict[str, Any]:
        """
        Set the question bank file path.

        Args:
            path: Path to the question bank JSON file

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        result = self._validate_file_path(path, "Questions path")
        if not result['success']:
            return result

        self._settings.questions_path = path
        self.logger.info(f"Questions path set to {path}")
        return {
            'success': True,
            'message': f"Questions path set to {path}",
            'user_message': f"Questions will be loaded from {path}"
        }

    def get_questions_path(self) -> str:
        return self._settings.questions_path

    def set_log_level(self, level: str) -> Dict[str, Any]:
        """
        Set the logging level by name.

        Args:
            level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL (case-insensitive)

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        if not isinstance(level, str):
            error_msg = f"Log level must be a string, got {type(level).__name__}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"Invalid log level: expected a name, got {type(level).__name__}"
            }

        normalized = level.strip().upper()
        if normalized not in self.VALID_LOG_LEVELS:
            error_msg = f"Unknown log level: {level}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"Unknown log level '{level}'. Use one of {', '.join(self.VALID_LOG_LEVELS)}"
            }

        self._settings.log_level = normalized
        self.logger.info(f"Log level set to {normalized}")
        return {
            'success': True,
            'message': f"Log level set to {normalized}",
            'user_message': f"Log level set to {normalized}"
        }

    def get_log_level(self) -> str:
        return self._settings.log_level

    def set_log_directory(self, directory: str) -> Dict[str, Any]:
        """Set the directory that receives the log file."""
        result = self._validate_file_path(directory, "Log directory")
        if not result['success']:
            return result

        self._settings.log_directory = directory
        self.logger.info(f"Log directory set to {directory}")
        return {
            'success': True,
            'message': f"Log directory set to {directory}",
            'user_message': f"Logs will be written to {directory}"
        }

    def get_log_directory(self) -> str:
        return self._settings.log_directory

    def load_config_file(self, path: str) -> Dict[str, Any]:
        """
        Apply settings from a JSON config file.

        Expected structure (every key optional):
        {
            "files": {"leaderboard": str, "questions": str},
            "logging": {"level": str, "log_directory": str}
        }

        A missing file is not an error; defaults stay in effect. Invalid
        values are skipped and reported in 'issues'.

        Args:
            path: Path to the config file

        Returns:
            Dictionary with success status, list of issues, and user-friendly message
        """
        config_path = Path(path)
        if not config_path.exists():
            self.logger.info(f"No config file at {config_path}, using defaults")
            return {
                'success': True,
                'issues': [],
                'user_message': "Using default settings"
            }

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (json.JSONDecodeError, RecursionError) as e:
            error_msg = f"Invalid JSON in {config_path}: {e}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'issues': [error_msg],
                'user_message': f"Warning: {config_path} is not valid JSON, using default settings"
            }
        except OSError as e:
            error_msg = f"Failed to read {config_path}: {e}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'issues': [error_msg],
                'user_message': f"Warning: could not read {config_path}, using default settings"
            }

        if not isinstance(config, dict):
            error_msg = f"{config_path} must contain a JSON object"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'issues': [error_msg],
                'user_message': f"Warning: {config_path} must contain a JSON object, using default settings"
            }

        issues: List[str] = []
        files = config.get('files', {})
        log_config = config.get('logging', {})
        setters = [
            (files, 'leaderboard', self.set_leaderboard_path),
            (files, 'questions', self.set_questions_path),
            (log_config, 'level', self.set_log_level),
            (log_config, 'log_directory', self.set_log_directory),
        ]
        for section, key, setter in setters:
            if isinstance(section, dict) and key in section:
                result = setter(section[key])
                if not result['success']:
                    issues.append(result['user_message'])

        if issues:
            return {
                'success': False,
                'issues': issues,
                'user_message': "Warning: some settings in config were invalid and were ignored"
            }

        self.logger.info(f"Loaded configuration from {config_path}")
        return {
            'success': True,
            'issues': [],
            'user_message': f"Loaded settings from {config_path}"
        }

    def reset_to_defaults(self) -> None:
        """Reset all settings to their default values."""
        self._settings = GameSettings(
            leaderboard_path=self.DEFAULT_LEADERBOARD_PATH,
            questions_path=self.DEFAULT_QUESTIONS_PATH,
            log_directory=self.DEFAULT_LOG_DIRECTORY,
            log_level=self.DEFAULT_LOG_LEVEL
        )
        self.logger.info("All settings reset to default values")

    def validate_settings(self) -> Dict[str, Any]:
        """
        Validate current settings and return validation results.

        Returns:
            Dictionary with validation results and any issues found
        """
        validation_result = {
            "valid": True,
            "issues": []
        }

        for label, value in (("leaderboard path", self._settings.leaderboard_path),
                             ("questions path", self._settings.questions_path),
                             ("log directory", self._settings.log_directory)):
            if not isinstance(value, str) or not value.strip():
                validation_result["valid"] = False
                validation_result["issues"].append(f"Invalid {label}: {value}")

        if self._settings.log_level not in self.VALID_LOG_LEVELS:
            validation_result["valid"] = False
            validation_result["issues"].append(f"Invalid log level: {self._settings.log_level}")

        return validation_result

    def get_settings_summary(self) -> str:
        """
        Get a formatted summary of current settings.

        Returns:
            Human-readable string describing current settings
        """
        return (
            f"Game Settings:\n"
            f"• Leaderboard: {self._settings.leaderboard_path}\n"
            f"• Questions: {self._settings.questions_path}\n"
            f"• Log Directory: {self._settings.log_directory}\n"
            f"• Log Level: {self._settings.log_level}"
        )
