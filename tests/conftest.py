from __future__ import annotations
from pathlib import Path
import types
import pytest
import pandas as pd

from app.utils.config import reset_paths

# ---------- FIXTURES DE DADOS BÁSICOS ----------

@pytest.fixture
def tmpdir_path(tmp_path: Path) -> Path:
    return tmp_path

@pytest.fixture
def profiles_df() -> pd.DataFrame:
    return pd.DataFrame([
        {"name": "Ana", "user_type": "freelancer", "cpf_cnpj": "111.444.777-35"},    # CPF válido
        {"name": "Bar do Zé", "user_type": "company", "cpf_cnpj": "11.222.333/0001-81"},  # CNPJ válido
        {"name": "Bia", "user_type": "freelancer", "cpf_cnpj": "111.444.777-36"},    # DV errado
        {"name": "Hotel X", "user_type": "company", "cpf_cnpj": "12345"},            # tamanho inválido
        {"name": "Caio", "user_type": "freelancer", "cpf_cnpj": ""},                 # vazio
    ])

@pytest.fixture
def profiles_csv(tmpdir_path: Path, profiles_df) -> Path:
    out = tmpdir_path / "perfis.csv"
    profiles_df.to_csv(out, index=False)
    return out

# ---------- CONFIG LIMPA ENTRE TESTES ----------

@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for k in ("PROFILES_SRC", "DOCUMENTS_REPORT", "LOG_LEVEL"):
        monkeypatch.delenv(k, raising=False)
    reset_paths()
    yield
    reset_paths()

# ---------- UTIL: MOCK STREAMLIT PARA TESTES DE COMPONENTES ----------

class _Ctx:
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

@pytest.fixture
def mock_streamlit():
    """
    Módulo 'streamlit' mínimo: registra chamadas e devolve valores previsíveis.
    Use com monkeypatch.setattr(<módulo>, "st", mock_streamlit).
    """
    st = types.SimpleNamespace()
    st.calls = []
    st.session_state = {}
    st.submit = False

    def _record(name):
        def fn(*a, **k):
            st.calls.append((name, a, k))
        return fn

    def text_input(label, value="", key=None, **k):
        st.calls.append(("text_input", (label,), dict(k, key=key, value=value)))
        if key is not None:
            return st.session_state.get(key, value)
        return value

    def text_area(label, value="", **k):
        st.calls.append(("text_area", (label,), dict(k, value=value)))
        return value

    def radio(label, options, index=0, key=None, **k):
        st.calls.append(("radio", (label,), dict(k, key=key)))
        return options[index]

    st.text_input = text_input
    st.text_area = text_area
    st.radio = radio
    st.success = _record("success")
    st.error = _record("error")
    st.warning = _record("warning")
    for name in ("set_page_config", "title", "caption", "divider", "markdown"):
        setattr(st, name, _record(name))
    st.columns = lambda n: [_Ctx() for _ in range(n if isinstance(n, int) else len(n))]
    st.form = lambda *a, **k: _Ctx()
    st.form_submit_button = lambda *a, **k: st.submit
    return st
