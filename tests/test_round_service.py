import pytest

from wordle_engine.config import app_config
from wordle_engine.config.game_settings import EMPTY_CELL
from wordle_engine.exceptions import GridEditError, InvalidStateError
from wordle_engine.models.game import MatchClass, RoundPhase, RoundStatus, match_class
from wordle_engine.services import round_service as round_service_module
from wordle_engine.services.round_service import (
    RoundService, create_round_service, get_round_service, initialize_round_service
)
from wordle_engine.services.word_source import FileWordSource, StaticWordSource


def type_word(service, word):
    for letter in word:
        service.type_letter(letter)


def test_new_round_uses_word_source(service):
    round_id = service.new_round()
    assert round_id == service.round_id
    assert service.engine.answer == "CRANE"
    assert service.cursor == [0, 0]
    assert service.get_round_state().status == RoundStatus.not_started()


def test_new_round_with_fixed_answer(service):
    service.new_round("hello")
    assert service.engine.answer == "HELLO"


def test_no_round_started(service):
    with pytest.raises(InvalidStateError):
        service.type_letter("A")
    with pytest.raises(InvalidStateError):
        service.get_round_state()


def test_typing_moves_cursor_and_stops_at_end_of_row(service):
    service.new_round()
    type_word(service, "slate")
    assert service.cursor == [0, 5]
    assert service.type_letter("X") is False
    assert service.get_round_state().guesses[0] == "SLATE"


def test_backspace_clears_previous_cell(service):
    service.new_round()
    type_word(service, "SLA")
    assert service.backspace() is True
    assert service.cursor == [0, 2]
    assert service.get_round_state().guesses[0] == f"SL{EMPTY_CELL * 3}"


def test_backspace_at_row_start_clears_first_cell(service):
    service.new_round()
    service.type_letter("S")
    service.backspace()
    service.backspace()
    assert service.cursor == [0, 0]
    assert service.get_round_state().guesses[0] == EMPTY_CELL * 5


def test_select_column_overwrites_cell(service):
    service.new_round()
    type_word(service, "SLATE")
    assert service.select_column(1) is True
    service.type_letter("P")
    assert service.get_round_state().guesses[0] == "SPATE"
    assert service.cursor == [0, 2]
    assert service.select_column(5) is False


def test_bad_letter_propagates(service):
    service.new_round()
    with pytest.raises(GridEditError):
        service.type_letter("7")
    assert service.cursor == [0, 0]


def test_incomplete_row_is_not_submitted(service):
    service.new_round()
    type_word(service, "CRA")
    assert service.submit() is None
    assert service.get_round_state().status == RoundStatus.not_started()


def test_submit_advances_cursor_and_scores(service):
    service.new_round()
    type_word(service, "TRACE")
    codes = service.submit()
    assert [match_class(code) for code in codes] == [
        MatchClass.ABSENT, MatchClass.CORRECT, MatchClass.CORRECT,
        MatchClass.PRESENT, MatchClass.CORRECT,
    ]
    assert service.cursor == [1, 0]
    state = service.get_round_state()
    assert state.status == RoundStatus.in_progress(0)
    assert state.cursor == (1, 0)
    assert state.round_id == service.round_id


def test_win_message(service):
    service.new_round()
    type_word(service, "TRACE")
    service.submit()
    assert service.get_result_message() == ""
    type_word(service, "CRANE")
    service.submit()
    assert service.get_round_state().status == RoundStatus.won(1)
    assert service.get_result_message() == "You have won in 2 tries!"
    assert service.type_letter("A") is False
    assert service.backspace() is False


def test_loss_reveals_answer_and_rejects_more_submissions(service):
    service.new_round()
    for word in ["BLIMP", "FUDGE", "STORK", "WHIZZ", "GUMBO", "DUTCH"]:
        type_word(service, word)
        service.submit()
    state = service.get_round_state()
    assert state.status.phase == RoundPhase.LOST
    assert state.answer == "CRANE"
    assert service.cursor == [5, 0]
    assert service.get_result_message() == "You have lost! The word was CRANE."

    with pytest.raises(InvalidStateError):
        service.submit()
    assert service.get_round_state() == state


def test_falls_back_when_word_source_empty():
    service = RoundService(StaticWordSource([]), fallback_word="hello")
    service.new_round()
    assert service.engine.answer == "HELLO"


def test_create_round_service_from_config(tmp_path):
    word_file = tmp_path / "words.txt"
    word_file.write_text("plumb\n", encoding="utf-8")

    class Config(app_config.TestingConfig):
        WORD_LIST_PATH = str(word_file)

    service = create_round_service(Config)
    assert isinstance(service.word_source, FileWordSource)
    service.new_round()
    assert service.engine.answer == "PLUMB"


def test_global_service(monkeypatch):
    monkeypatch.setattr(round_service_module, "_round_service", None)
    assert get_round_service() is None
    service = initialize_round_service(app_config.TestingConfig)
    assert get_round_service() is service
    service.new_round()
    assert len(service.engine.answer) == 5
