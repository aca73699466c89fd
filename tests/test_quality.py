import logging

import pytest
from boundle.engine import ALL_EXACT, ConstraintState, WordArray, parse_feedback
from boundle.solvers import expected_quality, expected_quality_bounded, quality

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]


def test_quality_endpoints():
    assert quality(ConstraintState(), WORDS) == 0.0
    assert quality(ConstraintState().then("crane", ALL_EXACT), WORDS) == 1.0


def test_quality_after_feedback():
    s = ConstraintState().then("raise", parse_feedback("YY--G"))
    # crane and trace survive: (7 - 2) / (7 - 1)
    assert quality(s, WORDS) == pytest.approx(5 / 6)


def test_quality_needs_two_candidates():
    with pytest.raises(ValueError):
        quality(ConstraintState(), ["crane"])


def test_expected_quality_in_unit_interval():
    arr = WordArray(WORDS)
    for g in WORDS:
        q = expected_quality(ConstraintState(), g, arr)
        # guessing a candidate always fully solves the case where it is the answer
        assert 1 / len(WORDS) <= q <= 1.0


def test_bounded_matches_unbounded_exactly():
    arr = WordArray(WORDS)
    for g in WORDS:
        q = expected_quality(ConstraintState(), g, arr)
        assert expected_quality_bounded(ConstraintState(), g, arr, 0.0) == q
        assert expected_quality_bounded(ConstraintState(), g, arr, q - 1e-9) == q


def test_bounded_abandons_hopeless_guess():
    arr = WordArray(WORDS)
    assert expected_quality_bounded(ConstraintState(), "scoop", arr, 2.0) is None


def test_bounded_logs_where_it_stopped(caplog):
    arr = WordArray(WORDS)
    with caplog.at_level(logging.DEBUG, logger="boundle.solvers.quality"):
        assert expected_quality_bounded(ConstraintState(), "scoop", arr, 2.0) is None
    assert "word = scoop early reject after 1 of 7" in caplog.text
