from wordle_engine.models.game import MatchClass, match_class, occurrence_rank, pack_code
from wordle_engine.services.round_engine import score_guess


def classes(answer, guess):
    return [match_class(code) for code in score_guess(answer, guess)]


def test_exact_guess_scores_all_correct():
    assert classes("HELLO", "HELLO") == [MatchClass.CORRECT] * 5


def test_hello_world():
    assert classes("HELLO", "WORLD") == [
        MatchClass.ABSENT,   # W
        MatchClass.PRESENT,  # O, the answer has it at position 4
        MatchClass.ABSENT,   # R
        MatchClass.CORRECT,  # L
        MatchClass.ABSENT,   # D
    ]


def test_repeated_letter_codes_carry_extra_occurrences():
    codes = score_guess("HELLO", "WORLD")
    # L occurs twice in HELLO: one extra copy folded into the code
    assert codes[3] == 8
    assert occurrence_rank(codes[3]) == 1
    assert occurrence_rank(codes[1]) == 0
    assert codes == (1, 2, 1, 8, 1)


def test_duplicate_guess_letters_are_not_capped():
    # SPEED has two Es, ERASE uses them in columns 0 and 4, neither in place.
    codes = score_guess("SPEED", "ERASE")
    assert classes("SPEED", "ERASE") == [
        MatchClass.PRESENT,  # E
        MatchClass.ABSENT,   # R
        MatchClass.ABSENT,   # A
        MatchClass.PRESENT,  # S
        MatchClass.PRESENT,  # E
    ]
    assert codes[0] == codes[4] == pack_code(MatchClass.PRESENT, 1)


def test_more_guessed_copies_than_answer_copies():
    # Only one O in HUMOR, yet both Os of HONOR are credited.
    assert classes("HUMOR", "HONOR") == [
        MatchClass.CORRECT,
        MatchClass.PRESENT,
        MatchClass.ABSENT,
        MatchClass.CORRECT,
        MatchClass.CORRECT,
    ]


def test_absent_everywhere():
    assert score_guess("HELLO", "CRAMP") == (1, 1, 1, 1, 1)


def test_pack_code_round_trip_for_reserved_class():
    code = pack_code(MatchClass.ERROR, 2)
    assert code == 14
    assert match_class(code) == MatchClass.ERROR
    assert occurrence_rank(code) == 2
