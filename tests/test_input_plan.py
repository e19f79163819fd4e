import json

import pytest

from agronomy_engine.exceptions import DivisionByZero, InvalidInput
from agronomy_engine.fertilizer_dose import SourceMode
from agronomy_engine.input_plan import (
    InputPlan,
    generate_input_plan,
    load_input_plan,
    validate_plan_dict,
)

PLAN = {
    "name": "North field maize",
    "area": 2,
    "fertilizer": {"nitrogen": 100, "phosphorus": 50, "potassium": 75, "source": "dap"},
    "seed": {
        "tsw": 76,
        "row_spacing": 60,
        "plant_spacing": 25,
        "germination": 90,
        "purity": 96,
    },
    "herbicides": [
        {"product": "atrazine", "recommended_rate": 2, "active_ingredient_pct": 50},
        {"recommended_rate": 1, "active_ingredient_pct": 25, "area": 1},
    ],
}


def test_from_dict_applies_plan_area():
    plan = InputPlan.from_dict(PLAN)
    assert plan.fertilizer.area_ha == 2
    assert plan.fertilizer.source_mode is SourceMode.DAP
    assert plan.seed.area_ha == 2
    assert plan.seed.purity_pct == 96
    assert plan.seed.gap_filling_pct == 0
    assert [h.area_ha for h in plan.herbicides] == [2, 1]


def test_generate_input_plan():
    report = generate_input_plan(PLAN)
    assert report.name == "North field maize"
    assert report.fertilizer.products_kg["urea"] == 264.65
    assert report.seed.seed_mass_kg == 11.73
    assert [h.amount for h in report.herbicides] == [8.0, 4.0]
    assert report.herbicides[0].product == "atrazine"


def test_report_as_dict_is_json_serializable():
    data = generate_input_plan(PLAN).as_dict()
    assert json.loads(json.dumps(data)) == data
    assert data["fertilizer"]["mode"] == "dap"
    assert data["herbicides"][1]["product"] is None


def test_report_summary_lines():
    lines = generate_input_plan(PLAN).summary().splitlines()
    assert lines[0] == "North field maize"
    assert lines[2].startswith("The required seed rate is 11.73")
    assert lines[3] == "atrazine: The required amount of herbicide is 8.0 liter/Kg for 2 ha"
    assert len(lines) == 5


def test_partial_plan():
    report = generate_input_plan({"herbicides": [{"recommended_rate": 2, "active_ingredient_pct": 50}]})
    assert report.fertilizer is None
    assert report.seed is None
    assert report.herbicides[0].amount == 4.0
    assert report.as_dict()["fertilizer"] is None


def test_empty_plan():
    report = generate_input_plan(InputPlan())
    assert report.summary() == ""


def test_schema_errors():
    issues = validate_plan_dict({"fertilizer": {"nitrogen": 10, "phosphorus": 5}})
    assert issues and issues[0].startswith("fertilizer:")
    assert "potassium" in issues[0]

    with pytest.raises(InvalidInput) as err:
        InputPlan.from_dict({"fertiliser": {}})
    assert err.value.type_errors


def test_unknown_source_rejected():
    plan = {"fertilizer": {"nitrogen": 1, "phosphorus": 1, "potassium": 1, "source": "manure"}}
    with pytest.raises(InvalidInput):
        InputPlan.from_dict(plan)


def test_non_mapping_document():
    with pytest.raises(InvalidInput):
        InputPlan.from_dict(["not", "a", "plan"])


def test_calculator_errors_propagate():
    plan = {"herbicides": [{"recommended_rate": 2, "active_ingredient_pct": 0}]}
    with pytest.raises(DivisionByZero):
        generate_input_plan(plan)

    plan = {"seed": {"tsw": 76, "row_spacing": 60, "plant_spacing": 25}, "area": -1}
    with pytest.raises(InvalidInput):
        generate_input_plan(plan)


def test_load_input_plan_yaml(tmp_path):
    path = tmp_path / "plan.yaml"
    path.write_text(
        "name: Trial plot\n"
        "fertilizer:\n"
        "  nitrogen: 120\n"
        "  phosphorus: 60\n"
        "  potassium: 60\n"
        "herbicides:\n"
        "  - product: pendimethalin\n"
        "    recommended_rate: 1\n"
        "    active_ingredient_pct: 30\n"
    )
    plan = load_input_plan(path)
    report = generate_input_plan(plan)
    assert report.fertilizer.products_kg["ssp"] == 375.0
    assert report.herbicides[0].amount == 3.33


def test_load_input_plan_json(tmp_path):
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(PLAN))
    assert load_input_plan(path) == InputPlan.from_dict(PLAN)


def test_load_input_plan_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_input_plan(tmp_path / "missing.yaml")
