"""
Game Logger Module for the Wordle rules engine

This module provides logging for player actions, round events and errors.
Entries are written as one JSON document per line so they are easy to parse.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path
from ..config import Config


class GameLogger:
    """
    Centralized logging system for the rules engine.

    Features:
    - Player action tracking (typing, erasing, submitting)
    - Round event logging (start, guesses, wins, losses)
    - Error logging with exception type and message
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: Optional[str] = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the engine logger with an optional file handler."""
        logger = logging.getLogger('wordle_engine')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
            file_handler.setLevel(self.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        action: str,
                        round_id: Optional[str] = None,
                        **kwargs):
        """
        Log player input forwarded by the driver.

        Args:
            action: Type of action (e.g., 'type_letter', 'backspace', 'submit')
            round_id: Round identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'round_id': round_id, **kwargs}
        self.logger.debug(self._create_log_entry('USER_ACTION', action, details))

    def log_round_event(self,
                        round_id: Optional[str],
                        event: str,
                        **kwargs):
        """
        Log round-specific events (start, guesses, wins, losses).

        Args:
            round_id: Round identifier
            event: Type of round event (e.g., 'round_started', 'round_won')
            **kwargs: Additional round details
        """
        details = {'round_id': round_id, **kwargs}
        self.logger.info(self._create_log_entry('ROUND_EVENT', event, details))

    def log_warning(self, action: str, message: str, **kwargs):
        """Log a recoverable problem, such as falling back to the default word."""
        details = {'message': message, **kwargs}
        self.logger.warning(self._create_log_entry('WARNING', action, details))

    def log_error(self,
                  error: Exception,
                  action: str,
                  round_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            round_id: Round identifier if applicable
        """
        details = {
            'round_id': round_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events."""
        if self.log_dir is None:
            return {'error': 'File logging is disabled'}

        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'round_events': 0,
            'warnings': 0,
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if line.strip():
                    stats['total_entries'] += 1
                    if 'USER_ACTION' in line:
                        stats['user_actions'] += 1
                    elif 'ROUND_EVENT' in line:
                        stats['round_events'] += 1
                    elif '"WARNING"' in line:
                        stats['warnings'] += 1
                    elif '"ERROR"' in line:
                        stats['errors'] += 1

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR if Config.LOG_TO_FILE else None, Config.LOG_LEVEL)
