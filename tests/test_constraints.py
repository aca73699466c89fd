import itertools

import pytest
from boundle.engine import ALL_EXACT, ConstraintState, WordArray, feedback, parse_feedback
from boundle.errors import ContradictoryFeedbackError

WORDS = ["sassy", "glass", "level", "belle", "lemon", "proxy", "brood", "dippy", "yucky",
         "scoop", "cools", "robot", "rotor", "eerie", "geese", "sugar", "shire", "tangy",
         "crane", "raise"]


def test_initial_state_has_no_information():
    s = ConstraintState()
    assert s.is_default()
    assert all(s.allowed_letters(p) == "abcdefghijklmnopqrstuvwxyz" for p in range(5))
    assert s.count_bounds("q") == (0, 6)
    assert all(s.is_possible(w) for w in WORDS)


def test_raise_with_single_exact_a():
    s = ConstraintState()
    s.update("raise", parse_feedback("-G---"))

    assert s.allowed_letters(1) == "a"
    for pos in (0, 2, 3, 4):
        allowed = s.allowed_letters(pos)
        for ch in "rise":
            assert ch not in allowed
        # one exact 'a' says nothing about a second one
        assert "a" in allowed
    assert s.count_bounds("a") == (1, 6)
    for ch in "rise":
        assert s.count_bounds(ch) == (0, 1)


def test_repeated_letter_counts():
    s = ConstraintState()
    s.update("sassy", feedback("sassy", "glass"))  # YY-G-

    assert s.count_bounds("s") == (2, 3)
    assert s.count_bounds("a") == (1, 4)
    assert s.count_bounds("y") == (0, 1)
    assert s.allowed_letters(3) == "s"
    assert "s" not in s.allowed_letters(0)
    assert "s" not in s.allowed_letters(2)
    assert all("y" not in s.allowed_letters(p) for p in range(5))
    assert s.is_possible("glass")
    assert not s.is_possible("sassy")
    # exactly two s's: one is too few
    assert not s.is_possible("abcsd")


def test_absent_repeat_fixes_the_count():
    s = ConstraintState().then("level", parse_feedback("YY---"))

    assert s.count_bounds("l") == (1, 2)
    assert s.count_bounds("e") == (1, 2)
    assert not s.is_possible("candy")
    assert s.partition(["early", "candy", "ample", "elbow"])[0] == ["early", "ample", "elbow"]


def test_single_remaining_slot_is_locked():
    actual = "qqqqa"
    s = ConstraintState()
    for guess in ("azzzz", "zazzz", "zzazz"):
        s.update(guess, feedback(guess, actual))
    assert "a" in s.allowed_letters(4) and len(s.allowed_letters(4)) > 1

    s.update("zzzaz", feedback("zzzaz", actual))
    assert s.count_bounds("a") == (1, 2)
    assert s.allowed_letters(4) == "a"
    assert s.is_possible(actual)


def test_then_does_not_mutate():
    s0 = ConstraintState()
    s1 = s0.then("crane", parse_feedback("-G---"))
    assert s0.is_default()
    assert not s1.is_default()
    assert s1 == ConstraintState().then("crane", parse_feedback("-G---"))


def test_actual_word_stays_possible():
    for guessed, actual in itertools.product(WORDS, repeat=2):
        s = ConstraintState().then(guessed, feedback(guessed, actual))
        assert s.is_possible(actual), (guessed, actual, s)


def test_actual_word_stays_possible_over_two_guesses():
    for g1, g2, actual in itertools.product(WORDS[:10], WORDS[:10], WORDS[10:]):
        s = ConstraintState()
        s.update(g1, feedback(g1, actual))
        s.update(g2, feedback(g2, actual))
        assert s.is_possible(actual), (g1, g2, actual, s)


def test_possible_words_reproduce_the_feedback():
    for guessed, actual in itertools.product(WORDS, repeat=2):
        fb = feedback(guessed, actual)
        s = ConstraintState().then(guessed, fb)
        for w in WORDS:
            if s.is_possible(w):
                assert feedback(guessed, w) == fb, (guessed, actual, w, s)


def test_contradictory_feedback_raises():
    s = ConstraintState()
    s.update("raise", parse_feedback("-G---"))
    with pytest.raises(ContradictoryFeedbackError):
        s.update("crane", parse_feedback("-----"))


def test_exact_on_excluded_letter_raises():
    s = ConstraintState()
    s.update("crane", parse_feedback("-----"))
    with pytest.raises(ContradictoryFeedbackError):
        s.update("slate", parse_feedback("--G--"))


def test_partition_keeps_order():
    s = ConstraintState().then("raise", parse_feedback("YY--G"))
    words = ["scoop", "trace", "crane", "stare", "racer"]
    possible, impossible = s.partition(words)
    assert possible == ["trace", "crane"]
    assert impossible == ["scoop", "stare", "racer"]


def test_possible_mask_matches_scalar_check():
    arr = WordArray(WORDS)
    for guessed, actual in [("raise", "crane"), ("sassy", "glass"), ("eerie", "geese"),
                            ("rotor", "robot"), ("crane", "crane")]:
        s = ConstraintState().then(guessed, feedback(guessed, actual))
        assert list(s.possible_mask(arr)) == [s.is_possible(w) for w in WORDS]
        assert s.count_possible(arr) == sum(s.is_possible(w) for w in WORDS)


def test_all_exact_leaves_only_the_word():
    s = ConstraintState().then("crane", ALL_EXACT)
    assert [w for w in WORDS if s.is_possible(w)] == ["crane"]
