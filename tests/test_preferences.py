# FILE: tests/test_preferences.py
from grouping_core.preferences import is_preference_met, satisfied_companions, unmet_preference_ids
from grouping_core.split_test_helpers import quick_person

def test_no_preferences_is_vacuously_met():
    p = quick_person(1, "Ann")
    assert is_preference_met(p, [])
    assert is_preference_met(p, [quick_person(2, "Bob")])

def test_met_when_any_preferred_name_present():
    p = quick_person(1, "Ann", prefs=["Zoe", "Bob"])
    group = [p, quick_person(2, "Bob")]
    assert is_preference_met(p, group)
    assert satisfied_companions(p, group) == ["Bob"]

def test_unmet_when_no_preferred_name_present():
    p = quick_person(1, "Ann", prefs=["Zoe"])
    assert not is_preference_met(p, [p, quick_person(2, "Bob")])

def test_matching_is_by_name_not_id():
    p = quick_person(1, "Ann", prefs=["Bob"])
    # a different record that happens to be named Bob still counts
    other_bob = quick_person(99, "Bob")
    assert is_preference_met(p, [p, other_bob])

def test_unmet_preference_ids():
    a = quick_person(1, "Ann", prefs=["Bob"])
    c = quick_person(3, "Cat", prefs=["Ann"])
    d = quick_person(4, "Dan")
    assert unmet_preference_ids([a, c, d]) == {1}
