import streamlit as st
from colorlerp.color_utils import color_swatch_html, hex_to_hsl, readable_text_color
from colorlerp.errors import ShadeError
from colorlerp.persistence import export_shades, shade_filename, shades_to_json
from colorlerp.shades import DEFAULT_STEPS, SHADES_DIR, generate_shades
from colorlerp.swatch_image import image_to_png_bytes, scale_strip_image

st.set_page_config(page_title="Shade Generator", page_icon="\U0001f308", layout="wide")
st.title("\U0001f308 Shade Generator")

# ── Base color ──
col1, col2 = st.columns([1, 2])
with col1:
    picked = st.color_picker("Pick a base color", "#1e9e3c")
with col2:
    typed = st.text_input("...or type a hex value (#RGB or #RRGGBB)", "")
base = typed.strip() or picked

steps = st.select_slider("Steps", options=[2, 4, 6, 8, 10], value=DEFAULT_STEPS)

try:
    shades = generate_shades(base, steps)
except ShadeError as exc:
    st.error(str(exc))
    st.stop()

h, s, l = hex_to_hsl(base)
st.markdown(
    f'{color_swatch_html(base, 35)} `{base}` &nbsp; H {h:.1f}° &nbsp; S {s:.1f}% &nbsp; L {l:.1f}%',
    unsafe_allow_html=True,
)

# ── Scale ──
st.subheader("Scale")
cols = st.columns(len(shades))
for i, (key, hex_val) in enumerate(shades.items()):
    with cols[i]:
        st.markdown(
            f'<div style="background:{hex_val};color:{readable_text_color(hex_val)};'
            f'padding:28px 4px;border-radius:6px;text-align:center;font-size:0.8rem;">'
            f'<b>{key}</b><br>{hex_val}</div>',
            unsafe_allow_html=True,
        )

# ── Download / export ──
st.markdown("---")
json_text = shades_to_json(shades)
st.code(json_text, language="json")

dcol1, dcol2 = st.columns(2)
with dcol1:
    st.download_button("Download JSON", json_text, "shades.json", "application/json")
with dcol2:
    png = image_to_png_bytes(scale_strip_image(shades))
    st.download_button("Download PNG", png, "shades.png", "image/png")

name = st.text_input("Export name", "CUSTOM")
if st.button("Export to shades folder") and name:
    try:
        path = export_shades(shades, SHADES_DIR / shade_filename(name))
    except ShadeError as exc:
        st.error(str(exc))
    else:
        st.success(f"Saved {path}")
