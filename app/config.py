from dataclasses import replace
from typing import Tuple

import streamlit as st

from grid_texture.config import MAX_SEED, SynthesisConfig, parse_seed

DEFAULT_CONFIG = SynthesisConfig(
    initial_noise=255.0,
    final_noise=4.0,
    rounds=6,
    outerp=0.1,
    exchange_rate=10,
    seed=0,
)


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = DEFAULT_CONFIG
        st.session_state["seed_counter"] = 0


def noise_section(config: SynthesisConfig) -> Tuple[float, float]:
    st.subheader("Noise")
    initial_noise: float = st.slider(
        "Initial noise (stddev)",
        1.0,
        255.0,
        float(config.initial_noise),
        step=1.0,
        key="initial_noise",
    )
    final_noise: float = st.slider(
        "Final noise (stddev)",
        0.5,
        initial_noise,
        min(float(config.final_noise), initial_noise),
        step=0.5,
        key="final_noise",
    )
    return initial_noise, final_noise


def exchange_section(config: SynthesisConfig) -> Tuple[int, float, int]:
    st.subheader("Rounds & Exchanges")
    rounds: int = st.slider(
        "Rounds (output side = 2^rounds)", 1, 9, config.rounds, key="rounds"
    )
    outerp: float = st.slider(
        "Energy exponent (outerp)",
        0.01,
        1.0,
        float(config.outerp),
        step=0.01,
        key="outerp",
    )
    exchange_rate: int = st.number_input(
        "Exchanges per pixel (last round)",
        min_value=0,
        value=config.exchange_rate,
        key="exchange_rate",
    )
    return rounds, outerp, exchange_rate


def seed_section(config: SynthesisConfig) -> int:
    st.subheader("Random seed")
    text = st.text_input(
        "Random seed",
        value=str(config.seed),
        help=f"Integer in [0, {MAX_SEED - 1}]",
        key="seed",
    )
    return parse_seed(text)


def get_config_from_widgets() -> SynthesisConfig:
    current: SynthesisConfig = st.session_state["config"]
    initial_noise, final_noise = noise_section(current)
    rounds, outerp, exchange_rate = exchange_section(current)
    seed = seed_section(current)
    return replace(
        current,
        initial_noise=initial_noise,
        final_noise=final_noise,
        rounds=int(rounds),
        outerp=outerp,
        exchange_rate=int(exchange_rate),
        seed=int(seed),
    )
