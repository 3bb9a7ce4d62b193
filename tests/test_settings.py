import pytest

from hexworld.settings import WorldGenConfig


def test_defaults():
    config = WorldGenConfig()
    assert (config.width, config.height) == (120, 120)
    assert config.num_cities == 3
    assert config.separation_for("city") == 20
    assert config.separation_for("village") == 12
    assert config.separation_for("hamlet") == 6


def test_invalid_values_rejected():
    with pytest.raises(ValueError):
        WorldGenConfig(width=0)
    with pytest.raises(ValueError):
        WorldGenConfig(num_villages=-1)
    with pytest.raises(ValueError):
        WorldGenConfig(rough_threshold=1.5)


def test_invalid_types_rejected():
    with pytest.raises(TypeError):
        WorldGenConfig(width=10.5)
    with pytest.raises(TypeError):
        WorldGenConfig(seed="abc")
    with pytest.raises(TypeError):
        WorldGenConfig(seed=True)


def test_unknown_settlement_type():
    with pytest.raises(ValueError):
        WorldGenConfig().separation_for("metropolis")


def test_with_overrides_returns_copy():
    base = WorldGenConfig(seed=1)
    changed = base.with_overrides(seed=5, terrain_scale=1, not_a_setting=3)
    assert changed.seed == 5
    assert changed.terrain_scale == 1.0
    assert isinstance(changed.terrain_scale, float)
    assert base.seed == 1
    assert not hasattr(changed, "not_a_setting")


def test_with_overrides_type_mismatch():
    with pytest.raises(TypeError):
        WorldGenConfig().with_overrides(width="big")
    with pytest.raises(TypeError):
        WorldGenConfig().with_overrides(num_cities=2.0)
