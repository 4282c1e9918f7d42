# --------------------------------------------------------------
# File: Home.py
# Description: Página de Streamlit para cifrar y descifrar texto con AES-GCM.
# --------------------------------------------------------------

import streamlit as st

from api.services import handle_decrypt, handle_encrypt


def clear_fields(input_key: str, output_key: str) -> None:
    """Vacía el campo de entrada y el resultado de una sección.

    Args:
        input_key (str): Clave de sesión del área de texto de entrada.
        output_key (str): Clave de sesión donde se guarda el resultado.
    """
    st.session_state[input_key] = ""
    st.session_state.pop(output_key, None)


def show_result(output_key: str) -> None:
    """Muestra el resultado guardado; ``st.code`` incluye botón de copiar."""
    result = st.session_state.get(output_key)
    if result is None:
        return
    ok, message = result
    if ok:
        st.code(message, language=None)
    else:
        st.error(message)


# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Cifrado de texto", page_icon="🔒", layout="centered")

st.title("🔒 Cifrado de texto")
st.write("Cifra y descifra texto con AES-128-GCM. El resultado se codifica en Base64.")

# Sección de cifrado; Ctrl+Enter en el área de texto envía el formulario.
st.subheader("Cifrar")
with st.form("encrypt_form"):
    st.text_area("Texto en claro", key="encrypt_input")
    encrypt_clicked = st.form_submit_button("Cifrar")
    st.form_submit_button(
        "Limpiar", on_click=clear_fields, args=("encrypt_input", "encrypt_output")
    )
if encrypt_clicked:
    st.session_state["encrypt_output"] = handle_encrypt(st.session_state["encrypt_input"])
show_result("encrypt_output")

# Sección de descifrado.
st.subheader("Descifrar")
with st.form("decrypt_form"):
    st.text_area("Texto cifrado (Base64)", key="decrypt_input")
    decrypt_clicked = st.form_submit_button("Descifrar")
    st.form_submit_button(
        "Limpiar", on_click=clear_fields, args=("decrypt_input", "decrypt_output")
    )
if decrypt_clicked:
    st.session_state["decrypt_output"] = handle_decrypt(st.session_state["decrypt_input"])
show_result("decrypt_output")
