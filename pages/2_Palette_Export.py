import streamlit as st
from colorlerp.color_utils import color_swatch_html
from colorlerp.errors import ShadeError
from colorlerp.persistence import load_json, save_json
from colorlerp.shades import DEFAULT_COLORS, DEFAULT_STEPS, SHADES_DIR, ShadeConfig, ShadeGenerator, export_palette

st.set_page_config(page_title="Palette Export", page_icon="\U0001f4e6", layout="wide")
st.title("\U0001f4e6 Palette Export")

palette: dict = load_json("palette.json", default={"colors": dict(DEFAULT_COLORS)})

# picker keys carry a version that Reset bumps
if "palette_version" not in st.session_state:
    st.session_state.palette_version = 0
version = st.session_state.palette_version

# ── Sidebar: edit palette ──
st.sidebar.header("Palette")
for name in list(palette["colors"]):
    col1, col2 = st.sidebar.columns([4, 1])
    with col1:
        palette["colors"][name] = st.color_picker(name, palette["colors"][name], key=f"pick_{version}_{name}")
    with col2:
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("✖", key=f"rm_{name}"):
            del palette["colors"][name]
            save_json("palette.json", palette)
            st.rerun()

new_name = st.sidebar.text_input("New color name")
new_hex = st.sidebar.color_picker("New color", "#4488cc")
if st.sidebar.button("Add Color") and new_name:
    palette["colors"][new_name.strip().upper()] = new_hex
    save_json("palette.json", palette)
    st.rerun()

sb1, sb2 = st.sidebar.columns(2)
with sb1:
    if st.button("Save Palette"):
        save_json("palette.json", palette)
        st.sidebar.success("Saved!")
with sb2:
    if st.button("Reset"):
        save_json("palette.json", {"colors": dict(DEFAULT_COLORS)})
        st.session_state.palette_version += 1
        st.rerun()

# ── Preview all scales ──
steps = st.select_slider("Steps", options=[2, 4, 6, 8, 10], value=DEFAULT_STEPS)
config = ShadeConfig(colors=dict(palette["colors"]), steps=steps, output_dir=SHADES_DIR)

try:
    scales = ShadeGenerator(config).generate_all()
except ShadeError as exc:
    st.error(str(exc))
    st.stop()

if not scales:
    st.info("The palette is empty. Add a color in the sidebar.")
    st.stop()

for name, shades in scales.items():
    st.markdown(f"**{name}**")
    st.markdown(
        "".join(color_swatch_html(hex_val, 40) for hex_val in shades.values()),
        unsafe_allow_html=True,
    )
    st.caption(" · ".join(f"{k}: {v}" for k, v in shades.items()))

# ── Export ──
st.markdown("---")
if st.button("Export all scales"):
    paths = export_palette(config)
    st.success(f"Exported {len(paths)} files to `{SHADES_DIR}`.")
    for p in paths:
        st.write(f"`{p.name}`")
