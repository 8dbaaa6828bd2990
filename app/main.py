# app/main.py — página de edição de perfil
from __future__ import annotations
import streamlit as st
from pydantic import ValidationError

from app.components.forms import profile_form
from app.components.layout import header_nav, footer
from app.models.user_profile import UserProfile

st.set_page_config(page_title="Freelancer Now • Perfil", layout="centered")
header_nav("👤 Meu perfil", "Freelancers informam CPF; empresas informam CNPJ")

# perfil corrente (persistência fica fora deste app)
st.session_state.setdefault("profile", {})

data, submitted = profile_form(st.session_state["profile"])

if submitted:
    try:
        profile = UserProfile(**data)
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err.get("loc", ()))
            st.error(f"{field}: {err.get('msg')}")
    else:
        if not profile.document_matches_user_type():
            st.warning(f"Contas do tipo '{profile.user_type.value}' normalmente usam "
                       f"{profile.user_type.document_label}.")
        st.session_state["profile"] = profile.as_dict()
        st.success("Perfil atualizado com sucesso!")

footer()
