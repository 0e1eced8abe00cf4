import streamlit as st
from colorlerp.log import setup_default_logging

setup_default_logging()

st.set_page_config(page_title="ColorLerper", page_icon="\U0001f3a8", layout="wide")

st.markdown("""<style>
    .block-container { max-width: 1000px; }
    @media (max-width: 640px) {
        .block-container { padding: 1rem; }
    }
</style>""", unsafe_allow_html=True)

st.title("\U0001f3a8 ColorLerper")
st.markdown("Turn a single base color into a 100–900 scale of tonal shades for your design system.")

st.markdown("---")

col1, col2 = st.columns(2)

with col1:
    st.subheader("\U0001f308 Shade Generator")
    st.write("Pick a base color, preview its shade scale and download it as JSON or PNG.")

    st.subheader("\U0001f4f7 Shades From Photo")
    st.write("Upload an image, pull out its dominant colors and build a scale from any of them.")

with col2:
    st.subheader("\U0001f4e6 Palette Export")
    st.write("Edit your named palette (success, info, warn, ...) and export every scale at once.")

st.markdown("---")
st.caption("Use the sidebar to navigate between pages.")
