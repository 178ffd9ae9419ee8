"""
Configuration Management Module

Centralized configuration for the rules engine and its collaborators.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))

# Load environment variables from config.env (existing variables win)
load_dotenv(os.path.join(CONFIG_DIR, 'config.env'))


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


def _env_seed():
    raw = os.getenv('RANDOM_SEED')
    return int(raw) if raw not in (None, '') else None


class Config:
    """Base configuration class with all settings."""

    DEBUG = _env_flag('DEBUG', 'False')

    # Word Source Settings
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH', os.path.join(CONFIG_DIR, 'wordles.json'))
    FALLBACK_WORD = os.getenv('FALLBACK_WORD', 'HELLO').upper()
    STRICT_WORD_SOURCE = _env_flag('STRICT_WORD_SOURCE', 'False')
    RANDOM_SEED = _env_seed()

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    LOG_TO_FILE = _env_flag('LOG_TO_FILE', 'True')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    LOG_TO_FILE = False
    RANDOM_SEED = 1234


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
