from dataclasses import replace
from typing import Optional

import streamlit as st

from config import set_default_config, get_config_from_widgets
from grid_texture.config import MAX_SEED, SynthesisConfig
from grid_texture.logging_config import setup_logging
from grid_texture.renderer.texture import render, to_png_bytes
from grid_texture.synthesize import synthesize
from grid_texture.trace import SynthesisResult

st.set_page_config(layout="wide", page_title="Grid Texture")
setup_logging()


def run_synthesis(config: SynthesisConfig) -> None:
    with st.spinner(f"Synthesizing {config.size}x{config.size} texture..."):
        st.session_state["result"] = synthesize(config)


# --------- Main App ---------

set_default_config()
tab_texture, tab_config, tab_rounds = st.tabs(["Texture", "Config", "Rounds"])

with tab_config:
    try:
        config: SynthesisConfig = get_config_from_widgets()
    except ValueError as e:
        st.error(f"Invalid parameters: {e}")
        st.stop()
    st.session_state["config"] = config

    if st.button("Generate", key="generate_config_btn", use_container_width=True):
        st.session_state["seed_counter"] = 0
        run_synthesis(config)
    st.divider()

with tab_texture:
    left_col, right_col = st.columns([0.75, 0.25])

    with right_col:
        current_cfg: SynthesisConfig = st.session_state["config"]
        if st.button("🔁 New Seed", key="new_seed_btn", use_container_width=True):
            st.session_state["seed_counter"] += 1
            new_seed = (current_cfg.seed + st.session_state["seed_counter"]) % MAX_SEED
            run_synthesis(replace(current_cfg, seed=new_seed))

    result: Optional[SynthesisResult] = st.session_state.get("result")
    if result is None:
        run_synthesis(st.session_state["config"])
        result = st.session_state["result"]

    with left_col:
        st.image(render(result), use_container_width=True)

    with right_col:
        st.info(f"**Size:** {result.size} x {result.size}", icon="🖼️")
        st.info(f"**Seed:** {result.config.seed}", icon="🎲")
        st.info(
            f"**Accepted swaps:** {result.trace.total_accepted} / {result.trace.total_trials}",
            icon="🔀",
        )
        st.download_button(
            "⬇️ Download PNG",
            data=to_png_bytes(result),
            file_name=result.config.filename(),
            mime="image/png",
            use_container_width=True,
        )

with tab_rounds:
    result = st.session_state.get("result")
    if result is not None:
        st.dataframe(result.trace.as_records(), use_container_width=True)
