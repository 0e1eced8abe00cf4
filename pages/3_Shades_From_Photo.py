import streamlit as st
from PIL import Image
from colorlerp.color_utils import color_swatch_html
from colorlerp.extract import dominant_colors
from colorlerp.persistence import shades_to_json
from colorlerp.shades import DEFAULT_STEPS, generate_shades
from colorlerp.swatch_image import image_to_png_bytes, scale_strip_image

st.set_page_config(page_title="Shades From Photo", page_icon="\U0001f4f7", layout="wide")
st.title("\U0001f4f7 Shades From Photo")
st.markdown("Upload a photo to extract its dominant colors and turn one into a shade scale.")

uploaded = st.file_uploader("Upload a photo", type=["png", "jpg", "jpeg"])

if uploaded:
    image = Image.open(uploaded).convert("RGB")
    st.image(image, caption="Uploaded image", use_container_width=True)

    n_colors = st.slider("Number of colors to extract", 3, 10, 5)

    if st.button("Extract Colors"):
        with st.spinner("Analyzing image..."):
            st.session_state.photo_colors = dominant_colors(image, n_colors)

    extracted = st.session_state.get("photo_colors", [])
    if extracted:
        st.subheader("Extracted Colors")
        cols = st.columns(len(extracted))
        for i, (hex_val, pct) in enumerate(extracted):
            with cols[i]:
                st.markdown(
                    f'{color_swatch_html(hex_val, 50)}<br>`{hex_val}`<br>{pct:.1f}%',
                    unsafe_allow_html=True,
                )

        st.markdown("---")
        base = st.radio(
            "Base color",
            [hex_val for hex_val, _ in extracted],
            horizontal=True,
        )
        steps = st.select_slider("Steps", options=[2, 4, 6, 8, 10], value=DEFAULT_STEPS)
        shades = generate_shades(base, steps)
        st.image(scale_strip_image(shades), use_container_width=True)

        dcol1, dcol2 = st.columns(2)
        with dcol1:
            st.download_button("Download JSON", shades_to_json(shades), "shades.json", "application/json")
        with dcol2:
            st.download_button(
                "Download PNG", image_to_png_bytes(scale_strip_image(shades)), "shades.png", "image/png"
            )
else:
    st.info("Drag & drop or click to upload a photo, logo or inspiration image.")
