# tests/unit/test_config.py

import dataclasses
from typing import Any, Dict

import pytest

from grid_texture.config import MAX_SEED, SynthesisConfig, format_number, parse_seed
from tests.test_utils import make_config


def test_valid_config() -> None:
    config = make_config()
    assert config.size == 8
    assert config.noise_schedule()[0] == 255.0
    assert config.exchange_schedule() == [40, 20, 10]


def test_filename_encodes_parameters() -> None:
    config = SynthesisConfig(
        initial_noise=255, final_noise=4, rounds=10, outerp=0.1, exchange_rate=1000, seed=0
    )
    assert config.filename() == "img-255-4-10-0.1-1000-0.png"


def test_filename_formats_floats_compactly() -> None:
    config = make_config(initial_noise=255.0, final_noise=2.5, outerp=0.25, seed=7)
    assert config.filename() == "img-255-2.5-3-0.25-10-7.png"


def test_filename_distinguishes_close_floats() -> None:
    first = make_config(outerp=0.1234567)
    second = make_config(outerp=0.1234568)
    assert first.filename() != second.filename()
    assert first.filename() == "img-255-4-3-0.1234567-10-42.png"
    assert make_config(final_noise=4.0000001).filename() != make_config().filename()


@pytest.mark.parametrize(
    "value, expected",
    [(255, "255"), (255.0, "255"), (0.1, "0.1"), (2.5, "2.5"), (1e-05, "1e-05"), (1e16, "1e+16")],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_infinite_noise_is_rejected_before_scheduling() -> None:
    with pytest.raises(ValueError, match="finite"):
        make_config(initial_noise=float("inf"), final_noise=4.0, exchange_rate=0)


def test_identical_configs_share_filename() -> None:
    assert make_config().filename() == make_config().filename()
    assert make_config(seed=1).filename() != make_config(seed=2).filename()


def test_config_is_frozen() -> None:
    config = make_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.seed = 3  # type: ignore[misc]


def test_final_noise_above_initial_is_rejected() -> None:
    with pytest.raises(ValueError, match="final_noise .* must not exceed initial_noise"):
        make_config(initial_noise=4.0, final_noise=255.0)


def test_equal_noise_is_accepted() -> None:
    assert make_config(initial_noise=8.0, final_noise=8.0).noise_schedule() == [8.0] * 3


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"initial_noise": 0.0}, "initial_noise"),
        ({"initial_noise": -1.0}, "initial_noise"),
        ({"initial_noise": float("nan")}, "initial_noise"),
        ({"initial_noise": float("inf")}, "initial_noise"),
        ({"final_noise": float("inf")}, "final_noise"),
        ({"final_noise": float("nan")}, "final_noise"),
        ({"outerp": float("inf")}, "outerp"),
        ({"final_noise": 0.0}, "final_noise"),
        ({"final_noise": -2.0}, "final_noise"),
        ({"rounds": 0}, "rounds"),
        ({"rounds": 2.0}, "rounds"),
        ({"outerp": -0.1}, "outerp"),
        ({"exchange_rate": -1}, "exchange_rate"),
        ({"exchange_rate": 1.5}, "exchange_rate"),
        ({"seed": -1}, "seed"),
        ({"seed": 2**64}, "seed"),
        ({"seed": True}, "seed"),
    ],
)
def test_invalid_parameters_are_rejected(overrides: Dict[str, Any], field: str) -> None:
    with pytest.raises(ValueError, match=field):
        make_config(**overrides)


def test_max_seed_is_accepted() -> None:
    assert make_config(seed=2**64 - 1).seed == 2**64 - 1


@pytest.mark.parametrize(
    "text, expected",
    [("0", 0), (" 42 ", 42), (str(2**63), 2**63), (str(MAX_SEED - 1), MAX_SEED - 1)],
)
def test_parse_seed(text: str, expected: int) -> None:
    assert parse_seed(text) == expected
    assert make_config(seed=parse_seed(text)).seed == expected


@pytest.mark.parametrize("text", ["-1", str(MAX_SEED), "1.5", "seed", ""])
def test_parse_seed_rejects_out_of_range(text: str) -> None:
    with pytest.raises(ValueError):
        parse_seed(text)
