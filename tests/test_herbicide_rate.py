import pytest

from agronomy_engine.exceptions import DivisionByZero, InvalidInput
from agronomy_engine.herbicide_rate import HerbicidePlan, compute_herbicide_rate


def test_herbicide_rate():
    result = compute_herbicide_rate(recommended_rate=2, area=2, active_ingredient_pct=50)
    assert result.amount == 8.0
    assert result.area_ha == 2


def test_herbicide_rate_default_area():
    assert compute_herbicide_rate(2, active_ingredient_pct=35).amount == 5.71


def test_zero_active_ingredient():
    with pytest.raises(DivisionByZero) as err:
        compute_herbicide_rate(2, 2, active_ingredient_pct=0)
    assert err.value.parameter == "active_ingredient_pct"


@pytest.mark.parametrize(
    "args, kwargs",
    [
        ((2, 0), {"active_ingredient_pct": 50}),
        ((-1, 1), {"active_ingredient_pct": 50}),
        ((2, 1), {"active_ingredient_pct": -5}),
        ((2, 1), {"active_ingredient_pct": 150}),
        ((2, 1), {"active_ingredient_pct": float("nan")}),
    ],
)
def test_invalid_herbicide_inputs(args, kwargs):
    with pytest.raises(InvalidInput):
        compute_herbicide_rate(*args, **kwargs)


def test_boolean_is_not_a_rate():
    with pytest.raises(InvalidInput) as err:
        compute_herbicide_rate(True, active_ingredient_pct=50)
    assert err.value.type_errors == ["recommended_rate: must be numeric"]


def test_plan_carries_product_label():
    plan = HerbicidePlan(recommended_rate=1.5, active_ingredient_pct=48, area_ha=4, product="glyphosate")
    result = plan.compute()
    assert result.amount == 12.5
    assert result.product == "glyphosate"
    assert result.as_dict() == {"amount": 12.5, "area_ha": 4, "product": "glyphosate"}


def test_summary():
    result = compute_herbicide_rate(2, 2, active_ingredient_pct=50)
    assert result.summary() == "The required amount of herbicide is 8.0 liter/Kg for 2 ha"
