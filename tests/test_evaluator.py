# FILE: tests/test_evaluator.py
import numpy as np
from grouping_core.combinations import index_combinations
from grouping_core.evaluator import evaluate_partition, PeopleArena
from grouping_core.split_test_helpers import quick_person, random_people

def test_breakdown_terms():
    a = [
        quick_person(1, "A", "boy", level=4, special=True),
        quick_person(2, "B", "boy", level=3, prefs=["Z"]),
    ]
    b = [
        quick_person(3, "C", "girl", level=1, behavior=True),
        quick_person(4, "D", "boy", level=1),
    ]
    br = evaluate_partition(a, b)
    assert br.category == (2 - 1) ** 2 + (0 - 1) ** 2
    assert br.special_needs == 1
    assert br.behavior == 1
    assert br.level == (7 - 2) ** 2
    assert br.preference == 1
    assert br.total == 2 + 1 + 1 + 25 + 1

def test_no_preferences_scores_zero_preference_term():
    a = [quick_person(1, "A"), quick_person(2, "B", "girl")]
    b = [quick_person(3, "C"), quick_person(4, "D", "girl")]
    assert evaluate_partition(a, b).total == 0

def test_preference_term_squares_unmet_count():
    a = [quick_person(1, "A", prefs=["C"]), quick_person(2, "B", prefs=["D"])]
    b = [quick_person(3, "C"), quick_person(4, "D")]
    assert evaluate_partition(a, b).preference == 4

def test_arena_matches_pure_evaluator():
    people = random_people(8, seed=3)
    arena = PeopleArena(people)
    for idx in index_combinations(len(people), 4):
        chosen = set(idx)
        a = [people[i] for i in idx]
        b = [p for i, p in enumerate(people) if i not in chosen]
        assert arena.score_indices(idx) == evaluate_partition(a, b).total

def test_arena_batch_scores():
    people = random_people(6, seed=11)
    arena = PeopleArena(people)
    combos = list(index_combinations(6, 3))
    masks = np.array([arena.mask_for(c) for c in combos])
    scores = arena.score_masks(masks)
    assert list(scores) == [arena.score_indices(c) for c in combos]
