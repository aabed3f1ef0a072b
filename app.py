from dataclasses import dataclass, replace
from typing import List, Optional

import random
import streamlit as st

from pixel_sprites.examples.masks import get_mask_preset, preset_names
from pixel_sprites.generator import Sprite, SpriteGenerator
from pixel_sprites.options import DEFAULT_RENDER_OPTIONS, RenderOptions
from pixel_sprites.renderer.sheet import compose_sheet

st.set_page_config(layout="wide", page_title="Pixel Sprites")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


@dataclass(frozen=True)
class ViewerConfig:
    preset: str
    options: RenderOptions
    count: int
    columns: int
    scale: int
    padding: int
    seed: Optional[int]


def set_default_config() -> None:
    if "viewer_config" not in st.session_state:
        st.session_state["viewer_config"] = ViewerConfig(
            preset=preset_names()[0],
            options=DEFAULT_RENDER_OPTIONS,
            count=48,
            columns=8,
            scale=4,
            padding=4,
            seed=0,
        )
        st.session_state["seed_counter"] = 0


def get_config_from_widgets() -> ViewerConfig:
    config: ViewerConfig = st.session_state["viewer_config"]

    st.subheader("Mask")
    names: List[str] = preset_names()
    preset: str = st.selectbox(
        "Preset", names, index=names.index(config.preset), key="preset"
    )

    st.subheader("Colors")
    colored: bool = st.checkbox("Colored", value=config.options.colored, key="colored")
    edge_brightness: float = st.slider(
        "Edge brightness",
        0.0,
        1.0,
        config.options.edge_brightness,
        step=0.01,
        key="edge_brightness",
    )
    color_variations: float = st.slider(
        "Color variations",
        0.0,
        1.0,
        config.options.color_variations,
        step=0.01,
        key="color_variations",
    )
    brightness_noise: float = st.slider(
        "Brightness noise",
        0.0,
        1.0,
        config.options.brightness_noise,
        step=0.01,
        key="brightness_noise",
    )
    saturation: float = st.slider(
        "Saturation", 0.0, 1.0, config.options.saturation, step=0.01, key="saturation"
    )

    st.subheader("Sheet")
    count: int = st.slider("Sprites", 1, 200, config.count, key="count")
    columns: int = st.slider("Columns", 1, 20, config.columns, key="columns")
    scale: int = st.slider("Scale", 1, 16, config.scale, key="scale")
    padding: int = st.slider("Padding", 0, 16, config.padding, key="padding")

    st.subheader("Random seed")
    seed: int = st.number_input("Random seed", min_value=0, value=0, key="seed")

    return ViewerConfig(
        preset=preset,
        options=RenderOptions(
            colored=colored,
            edge_brightness=edge_brightness,
            color_variations=color_variations,
            brightness_noise=brightness_noise,
            saturation=saturation,
        ),
        count=count,
        columns=columns,
        scale=scale,
        padding=padding,
        seed=seed,
    )


def generate_sprites(config: ViewerConfig) -> List[Sprite]:
    generator = SpriteGenerator(
        options=config.options,
        rng=random.Random(config.seed) if config.seed is not None else None,
    )
    sprites = generator.generate_many(get_mask_preset(config.preset), config.count)
    st.session_state["sprites"] = sprites
    return sprites


# --------- Main App ---------
set_default_config()
tab_sheet, tab_config, tab_grid = st.tabs(["Sprites", "Config", "Grid"])

with tab_config:
    config: ViewerConfig = get_config_from_widgets()
    st.session_state["viewer_config"] = config

    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["seed_counter"] = 0
        generate_sprites(config)
    st.divider()

with tab_sheet:
    if "sprites" not in st.session_state:
        generate_sprites(st.session_state["viewer_config"])

    if st.button("🔁 New Sprites", key="generate_btn", use_container_width=True):
        st.session_state["seed_counter"] += 1
        current: ViewerConfig = st.session_state["viewer_config"]
        base_seed = current.seed if current.seed is not None else 0
        generate_sprites(
            replace(current, seed=base_seed + st.session_state["seed_counter"])
        )

    current = st.session_state["viewer_config"]
    sheet = compose_sheet(
        [sprite.buffer for sprite in st.session_state["sprites"]],
        columns=current.columns,
        scale=current.scale,
        padding=current.padding,
    )
    st.image(sheet)

with tab_grid:
    sprites: List[Sprite] = st.session_state["sprites"]
    if sprites:
        st.code(str(sprites[0]), language=None)
