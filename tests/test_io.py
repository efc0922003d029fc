# FILE: tests/test_io.py
import json
import pandas as pd
import pytest
from grouping_core.io import (
    dataframe_to_people, generate_template_csv_bytes, load_config_yaml, load_people_csv,
    load_store, result_to_json_bytes, save_people_csv_bytes, save_store,
)
from grouping_core.config import DEFAULT_CONFIG
from grouping_core.models import AppConfig, RosterState
from grouping_core.optimizer import optimize
from grouping_core.split_test_helpers import quick_person

def test_load_people_csv_with_aliases():
    csv = (
        "Student_ID,Name,Sex,Special,Behaviour_Note,Knowledge,Companions\n"
        "1,ann  puig,F,yes,,3,\"Bob, Cy\"\n"
        "2,Bob,boy,false,true,1,\n"
        ",,,,,,\n"
        ",Cy,girl,0,1,4,Ann Puig\n"
    ).encode("utf-8")
    people = load_people_csv(csv)
    assert [p.name for p in people] == ["ann puig", "Bob", "Cy"]
    ann, bob, cy = people
    assert ann.category == "girl" and ann.special_needs and not ann.behavior_note
    assert ann.level == 3 and ann.preferred_names == ["Bob", "Cy"]
    assert bob.behavior_note and bob.preferred_names == []
    assert cy.id == 3  # missing id gets the next free one

def test_csv_requires_name_column():
    with pytest.raises(ValueError):
        load_people_csv(b"id,level\n1,2\n")

def test_csv_bad_level_is_reported():
    with pytest.raises(ValueError, match="Row 1"):
        load_people_csv(b"name,category,level\nAnn,girl,7\n")

def test_csv_export_reimports():
    people = [quick_person(1, "Ann", "girl", level=2, prefs=["Bob", "Cy"]), quick_person(2, "Bob", special=True)]
    assert load_people_csv(save_people_csv_bytes(people)) == people

def test_template_has_headers_only():
    text = generate_template_csv_bytes().decode("utf-8").strip()
    assert text == "id,name,category,special_needs,behavior_note,level,preferred_names"

def test_dataframe_from_editor_rows():
    df = pd.DataFrame([
        {"id": 4, "name": "Ann", "category": "girl", "special_needs": True,
         "behavior_note": False, "level": 2, "preferred_names": "Bob"},
        {"id": None, "name": "Bob", "category": "boy", "special_needs": False,
         "behavior_note": False, "level": 1, "preferred_names": ""},
    ])
    people = dataframe_to_people(df)
    assert [p.id for p in people] == [4, 5]

def test_store_roundtrip(tmp_path):
    path = str(tmp_path / "data" / "people.json")
    state = RosterState(people=[quick_person(3, "Ann", prefs=["Bob"])], next_id=7)
    save_store(path, state)
    loaded = load_store(path)
    assert loaded.people == state.people
    assert loaded.next_id == 7

def test_store_missing_or_corrupt_falls_back(tmp_path):
    assert load_store(str(tmp_path / "nope.json")) == RosterState()
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert load_store(str(bad)).people == []
    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps({"people": [{"id": 1, "name": "Ann"}], "next_id": 2}), encoding="utf-8")
    assert load_store(str(invalid)).people == []
    good = quick_person(1, "Ann").model_dump()
    for broken in ({**good, "id": 0}, {**good, "name": ""}, {**good, "name": "   "}):
        invalid.write_text(json.dumps({"people": [broken], "next_id": 2}), encoding="utf-8")
        assert load_store(str(invalid)) == RosterState()
    invalid.write_text(json.dumps({"people": [good, good], "next_id": 2}), encoding="utf-8")
    assert load_store(str(invalid)) == RosterState()

def test_store_bad_next_id_uses_max_id(tmp_path):
    path = tmp_path / "people.json"
    person = quick_person(5, "Ann").model_dump()
    path.write_text(json.dumps({"people": [person], "next_id": 0}), encoding="utf-8")
    assert load_store(str(path)).next_id == 6

def test_load_config_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("max_people: 12\ntime_limit_s: 2.5\n", encoding="utf-8")
    cfg = load_config_yaml(str(path))
    assert cfg.max_people == 12 and cfg.time_limit_s == 2.5
    assert cfg.batch_size == 4096
    path.write_text("bogus: 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config_yaml(str(path))

def test_result_json():
    result = optimize([quick_person(1, "Ann", prefs=["Bob"]), quick_person(2, "Bob")])
    data = json.loads(result_to_json_bytes(result))
    assert data["unmet_in_a"] == [1]
    assert data["score"] == data["breakdown"]["total"] == 1
    assert data["summary"]["people"] == {"group_a": 1, "group_b": 1, "balance": 0}

def test_csv_duplicate_ids_rejected():
    with pytest.raises(ValueError, match="Row 2 \\(Bob\\): duplicate id 1"):
        load_people_csv(b"id,name,category,level\n1,Ann,girl,1\n1,Bob,boy,4\n")

def test_csv_generated_ids_skip_existing():
    people = load_people_csv(b"id,name,category,level\n,Ann,girl,1\n1,Bob,boy,4\n")
    assert [p.id for p in people] == [2, 1]

def test_default_people_limit():
    # the sidebar caps the search size at this default
    assert DEFAULT_CONFIG["max_people"] == AppConfig().max_people == 26
