import streamlit as st

from app.models.user_profile import UserType
from app.utils.validators_br import ValidationResult, format_document, validate_document

USER_TYPE_LABELS = {
    UserType.FREELANCER: "Freelancer",
    UserType.COMPANY: "Empresa",
}

def _reformat(key: str):
    st.session_state[key] = format_document(st.session_state.get(key, ""))

def document_input(label: str, key: str, help: str | None = None) -> str:
    """
    Campo de CPF/CNPJ que reaplica a máscara a cada edição (on_change).
    Retorna o valor atual (já formatado).
    """
    st.session_state.setdefault(key, "")
    st.text_input(label, key=key, help=help, max_chars=18,
                  on_change=_reformat, args=(key,))
    return st.session_state.get(key, "")

def document_feedback(value: str | None) -> ValidationResult | None:
    """Mensagem verde/vermelha abaixo do campo; nada se estiver vazio."""
    if not value:
        return None
    result = validate_document(value)
    (st.success if result.valid else st.error)(result.message)
    return result

def profile_form(initial: dict | None = None, key_prefix: str = "perfil"):
    """
    Formulário de edição de perfil (freelancer ou empresa).
    Retorna (profile_dict, submitted: bool)
    """
    profile = dict(initial or {})
    doc_key = f"{key_prefix}_cpf_cnpj"
    if doc_key not in st.session_state:
        st.session_state[doc_key] = format_document(profile.get("cpf_cnpj") or "")

    options = list(USER_TYPE_LABELS)
    try:
        current = UserType(profile.get("user_type") or UserType.FREELANCER)
    except ValueError:
        current = UserType.FREELANCER
    user_type = st.radio("Tipo de conta", options=options, index=options.index(current),
                         format_func=USER_TYPE_LABELS.get, horizontal=True,
                         key=f"{key_prefix}_user_type")
    profile["user_type"] = user_type.value

    # fora do st.form: on_change não é permitido dentro de formulários
    profile["cpf_cnpj"] = document_input(user_type.document_label, key=doc_key)
    document_feedback(profile["cpf_cnpj"])

    with st.form(f"{key_prefix}_form"):
        c1, c2 = st.columns(2)
        with c1:
            profile["name"] = st.text_input("Nome", value=profile.get("name") or "")
        with c2:
            profile["phone"] = st.text_input("Telefone", value=profile.get("phone") or "", max_chars=20)
        profile["area"] = st.text_input("Área de atuação", value=profile.get("area") or "",
                                        placeholder="garçom, cozinheiro, bartender...")
        profile["location"] = st.text_input("Localização", value=profile.get("location") or "")
        profile["bio"] = st.text_area("Sobre", value=profile.get("bio") or "")
        profile["experience"] = st.text_area("Experiência", value=profile.get("experience") or "")
        submitted = st.form_submit_button("Salvar alterações", type="primary")
    return profile, submitted
