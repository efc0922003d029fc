# FILE: tests/test_summary.py
from grouping_core.constants import IMPERFECT_BALANCE_NOTE, SUMMARY_CRITERIA
from grouping_core.optimizer import optimize
from grouping_core.split_test_helpers import quick_person, random_people
from grouping_core.summary import build_notes, build_summary, describe_partition, unmet_note

def test_summary_consistency():
    people = random_people(9, seed=1)
    result = optimize(people)
    assert list(result.summary) == SUMMARY_CRITERIA
    for stat in result.summary.values():
        assert stat.balance == abs(stat.group_a - stat.group_b)
    s = result.summary
    assert s["people"].group_a + s["people"].group_b == len(people)
    assert s["boys"].group_a + s["boys"].group_b == sum(p.category == "boy" for p in people)
    assert s["girls"].group_a + s["girls"].group_b == sum(p.category == "girl" for p in people)
    assert s["special_needs"].group_a + s["special_needs"].group_b == sum(p.special_needs for p in people)
    assert s["behavior_notes"].group_a + s["behavior_notes"].group_b == sum(p.behavior_note for p in people)
    assert s["level_sum"].group_a + s["level_sum"].group_b == sum(p.level for p in people)
    met = s["met_preferences"].group_a + s["met_preferences"].group_b
    assert met == len(people) - len(result.unmet_in_a) - len(result.unmet_in_b)

def test_summary_values():
    a = [quick_person(1, "A", "boy", level=3, special=True)]
    b = [quick_person(2, "B", "girl", level=1), quick_person(3, "C", "girl", level=2, prefs=["A"])]
    s = build_summary(a, b)
    assert (s["people"].group_a, s["people"].group_b, s["people"].balance) == (1, 2, 1)
    assert (s["boys"].group_a, s["boys"].group_b) == (1, 0)
    assert (s["girls"].group_a, s["girls"].group_b) == (0, 2)
    assert s["level_sum"].balance == 0
    assert (s["met_preferences"].group_a, s["met_preferences"].group_b) == (1, 1)

def test_no_notes_for_perfect_split():
    a = [quick_person(1, "A", prefs=["B"]), quick_person(2, "B")]
    b = [quick_person(3, "C"), quick_person(4, "D")]
    assert build_notes(a, b, score=0) == []

def test_balance_note_only_when_score_positive():
    a = [quick_person(1, "A", level=4)]
    b = [quick_person(2, "B", level=1)]
    assert build_notes(a, b, score=9) == [IMPERFECT_BALANCE_NOTE]

def test_unmet_note_names_everyone_in_group_order():
    a = [quick_person(1, "Ann", prefs=["Zed"]), quick_person(2, "Bo")]
    b = [quick_person(3, "Cy", prefs=["Ann"]), quick_person(4, "Di")]
    notes = build_notes(a, b, score=0)
    assert notes == [unmet_note(["Ann", "Cy"])]
    assert "Ann, Cy" in notes[0]

def test_people_without_preferences_never_listed():
    a = [quick_person(1, "Ann"), quick_person(2, "Bo", prefs=["Zed"])]
    b = [quick_person(3, "Cy"), quick_person(4, "Di")]
    notes = build_notes(a, b, score=1)
    assert notes[-1] == unmet_note(["Bo"])

def test_manual_edit_recomputes_without_balance_note():
    a = [quick_person(1, "A", level=4), quick_person(2, "B", level=4)]
    b = [quick_person(3, "C", level=1)]
    result = describe_partition(a, b)
    assert result.score == result.breakdown.total > 0
    assert IMPERFECT_BALANCE_NOTE not in result.notes
