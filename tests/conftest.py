"""Shared fixtures for the engine tests."""

import os
import random

# Keep test runs from writing dated log files into the working directory
os.environ.setdefault('LOG_TO_FILE', 'false')

import pytest

from wordle_engine.services.round_engine import RoundEngine
from wordle_engine.services.round_service import RoundService
from wordle_engine.services.word_source import StaticWordSource


def fill_row(engine: RoundEngine, word: str) -> None:
    row = engine.current_row
    for col, letter in enumerate(word):
        engine.place_letter(row, col, letter)


def play(engine: RoundEngine, word: str):
    fill_row(engine, word)
    return engine.submit_guess()


@pytest.fixture
def hello_engine() -> RoundEngine:
    return RoundEngine("HELLO")


@pytest.fixture
def service() -> RoundService:
    return RoundService(StaticWordSource(["crane"]), rng=random.Random(0))
