"""Tests for parameter presets and validation."""

import pytest
from quadtree_lib.ops.refine import RefinementParams, RefinementDriver
from quadtree_lib.core.result import OperationStatus, ErrorCode
from quadtree_lib.params import get_preset, list_presets, validate_params, check_params, PRESETS


def test_list_presets():
    presets = list_presets()
    assert isinstance(presets, list)
    assert "default_world" in presets
    assert "shallow_debug" in presets


def test_get_preset():
    params = get_preset("default_world")
    assert params.world_half_length == 16.0
    assert params.target_depth == 5
    assert params.tie_break == "canonical"


def test_get_unknown_preset():
    with pytest.raises(ValueError, match="Unknown preset"):
        get_preset("no_such_world")


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_are_valid(name):
    is_valid, warnings = validate_params(get_preset(name))
    assert is_valid is True, warnings


def test_default_preset_reaches_target_depth():
    params = get_preset("default_world")
    assert params.reachable_depth() == 5

    driver = RefinementDriver(params=params)
    driver.step(position=(10.3, -3.7))
    assert driver.current_bounds.get_depth() == 5


def test_validate_unreachable_target_depth():
    params = RefinementParams(target_depth=8, min_half_length=0.5)
    is_valid, warnings = validate_params(params)

    assert is_valid is False
    assert any("cannot be reached" in w for w in warnings)


def test_validate_non_power_of_two_world():
    params = RefinementParams(world_half_length=12.0, target_depth=2)
    is_valid, warnings = validate_params(params)

    assert is_valid is False
    assert any("power of two" in w for w in warnings)


def test_validate_bounds_and_policies():
    params = RefinementParams(target_depth=20, speed=-1.0, tie_break="random", rebuild_policy="lazy")
    is_valid, warnings = validate_params(params)

    assert is_valid is False
    assert any(w.startswith("target_depth") for w in warnings)
    assert any(w.startswith("speed") for w in warnings)
    assert any("tie_break" in w for w in warnings)
    assert any("rebuild_policy" in w for w in warnings)


def test_params_create_root():
    params = RefinementParams(world_center=(2.0, -2.0), world_half_length=8.0, min_half_length=1.0)
    root = params.create_root()

    assert root.center.to_tuple() == (2.0, -2.0)
    assert root.half_length == 8.0
    assert root.depth == 0
    assert root.min_half_length == 1.0


def test_params_from_dict_defaults():
    params = RefinementParams.from_dict({"target_depth": 3})
    assert params.target_depth == 3
    assert params.world_half_length == 16.0
    assert RefinementParams.from_dict(params.to_dict()) == params


def test_check_params_valid():
    """Test valid parameters produce a success result."""
    result = check_params(get_preset("default_world"))

    assert result.status == OperationStatus.SUCCESS
    assert result.errors == []


def test_check_params_reports_invalid_parameter():
    """Test each validation problem becomes an INVALID_PARAMETER error."""
    params = RefinementParams(target_depth=20, tie_break="random")

    result = check_params(params)
    _, warnings = validate_params(params)

    assert result.is_failure()
    assert result.errors == warnings
    assert len(result.error_codes) == len(warnings)
    assert set(result.error_codes) == {ErrorCode.INVALID_PARAMETER.value}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
