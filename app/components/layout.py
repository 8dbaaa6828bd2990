import streamlit as st

_GLOBAL_CSS = """
<style>
.block-container { max-width: 900px; }
button[kind="primary"] { padding: 0.6rem 1rem; }
</style>
"""

def apply_global_style():
    st.markdown(_GLOBAL_CSS, unsafe_allow_html=True)

def header_nav(title: str, subtitle: str = ""):
    """Título padrão de páginas."""
    apply_global_style()
    st.title(title)
    if subtitle:
        st.caption(subtitle)
    st.divider()

def footer():
    st.markdown("---")
    st.caption("Freelancer Now • conectando freelancers e empresas de hospitalidade")
