import csv
import json

import pytest
from boundle.errors import ContradictoryFeedbackError, InvalidFeedbackError, NoCandidatesError
from boundle.harness import Session, replay_trace, run_batch, run_case, write_csv, \
    write_manifest, write_replay_csv
from boundle.solvers import create_solver

ANSWERS = ["crane", "raise", "stare", "trace", "cared"]
TRACE_WORDS = ["proxy", "crane", "brood", "groom", "prize", "robot", "broad"]
PROXY_TRACE = [("saner", "----Y"), ("court", "-Y-Y-"), ("brood", "-GG--")]


@pytest.mark.parametrize("solver_id", ["branch_bound", "exhaustive", "positional_freq"])
def test_run_case_smoke(solver_id):
    solver = create_solver(solver_id)
    r = run_case(solver, "crane", words=ANSWERS, max_turns=6, seed=42)
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "GGGGG")
    assert len(r["pool"]) == r["guesses"]
    assert r["pool"][0] == len(ANSWERS)


def test_run_case_counts_search_work():
    r = run_case(create_solver("exhaustive"), "cared", words=ANSWERS, seed=1)
    assert r["rejected"] == 0
    assert r["evaluated"] >= len(ANSWERS)
    assert run_case(create_solver("positional_freq"), "cared", words=ANSWERS)["evaluated"] == 0


def test_run_case_rejects_other_turn_budgets():
    with pytest.raises(ValueError):
        run_case(create_solver("branch_bound"), "crane", words=ANSWERS, max_turns=7)


def test_run_batch_solves_every_answer():
    results = run_batch(create_solver("branch_bound"), ANSWERS, words=ANSWERS, seed=1)
    assert len(results) == len(ANSWERS)
    assert all(r["success"] for r in results)
    assert all(r["solver_id"] == "branch_bound" for r in results)


def test_replay_trace_narrows_to_answer():
    steps = replay_trace(PROXY_TRACE, words=TRACE_WORDS)
    assert [s["remaining"] for s in steps] == [4, 3, 1]
    assert steps[-1]["recommended"] == "proxy"
    assert steps[-1]["quality"] is None
    assert steps[0]["pattern"] == "----Y"


def test_replay_trace_eliminating_every_word():
    with pytest.raises(NoCandidatesError):
        replay_trace([("proxy", "-----")], words=TRACE_WORDS)


def test_replay_trace_contradictory_history():
    with pytest.raises(ContradictoryFeedbackError):
        replay_trace([("proxy", "-----"), ("brood", "GGGGG")], words=["field", "crane"])


def test_session_lifecycle():
    session = Session(TRACE_WORDS)
    assert not session.solved
    assert sorted(session.candidates) == sorted(TRACE_WORDS)
    session.apply("saner", "----Y")
    assert sorted(session.candidates) == ["brood", "groom", "proxy", "robot"]
    assert session.recommend().word in session.candidates
    session.apply("COURT", "-y-y-")
    session.apply("brood", "-GG--")
    assert session.solved
    assert session.candidates == ["proxy"]
    assert [g for g, _ in session.history] == ["saner", "court", "brood"]


def test_session_rejects_bad_feedback():
    with pytest.raises(InvalidFeedbackError):
        Session(TRACE_WORDS).apply("saner", "--Y")


def test_session_empty_after_feedback():
    session = Session(["crane", "trace"])
    with pytest.raises(NoCandidatesError):
        session.apply("slate", "GGGGG")
    assert session.state.is_default()
    assert session.history == []
    assert sorted(session.candidates) == ["crane", "trace"]


def test_session_unchanged_after_contradictory_feedback():
    session = Session(["field", "crane"])
    session.apply("proxy", "-----")
    state = session.state.copy()
    with pytest.raises(ContradictoryFeedbackError):
        session.apply("brood", "GGGGG")
    assert session.state == state
    assert [g for g, _ in session.history] == ["proxy"]
    assert session.candidates == ["field"]


def test_io_writers(tmp_path):
    results = run_batch(create_solver("branch_bound"), ANSWERS[:2], words=ANSWERS)
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == ANSWERS[:2]
    for r in rows:
        assert r["patt_1"].startswith("'")
        assert r["pool_1"] == str(len(ANSWERS))
        # the opening search alone looks at every candidate once
        assert int(r["evaluated"]) + int(r["rejected"]) >= len(ANSWERS)
        assert r["guess_6"] == "" or r["guesses"] == "6"

    steps = replay_trace(PROXY_TRACE, words=TRACE_WORDS)
    rp = write_replay_csv([steps], str(tmp_path / "replay.csv"))
    with open(rp, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["remaining"] for r in rows] == ["4", "3", "1"]

    mp = write_manifest({"num_cases": 2}, str(tmp_path / "m.json"))
    assert json.loads(open(mp, encoding="utf-8").read())["num_cases"] == 2
