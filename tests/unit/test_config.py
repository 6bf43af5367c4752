import pytest

from token_traveler.config import TravelerConfig


def test_defaults() -> None:
    config = TravelerConfig()
    assert config.keyword == "Traveler"
    assert config.cooldown_ms == 1500
    assert config.unnamed_name == "Unnamed Token"
    assert config.notifications_default is True


def test_from_mapping_ignores_unknown_keys() -> None:
    config = TravelerConfig.from_mapping({"cooldown_ms": 200, "colour": "red"})
    assert config.cooldown_ms == 200
    assert config.keyword == "Traveler"


@pytest.mark.parametrize(
    "values",
    [
        {"keyword": ""},
        {"keyword": "A:B"},
        {"keyword": 5},
        {"cooldown_ms": -1},
        {"cooldown_ms": "200"},
        {"cooldown_ms": True},
        {"camera_delay_ms": -5},
        {"camera_delay_ms": 1.5},
        {"placeholder_imgsrc": None},
        {"unnamed_name": 3},
        {"notifications_default": "yes"},
    ],
)
def test_invalid_values(values) -> None:
    with pytest.raises(ValueError):
        TravelerConfig.from_mapping(values)
