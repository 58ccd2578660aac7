# --------------------------------------------------------------
# File: Home.py
# Description: Página de Streamlit que ejecuta y muestra la demostración completa.
# --------------------------------------------------------------

import streamlit as st

from iot_crypto import config
from iot_crypto.log import configure_logging
from iot_service.demo import run_demo

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="IoT Crypto", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 IoT Crypto")
st.write("Firma ECDSA, acuerdo ECDH y cifrado AES-CCM sobre NIST P-256 entre dos dispositivos.")

message = st.text_input("Mensaje", value=config.DEMO_MESSAGE)
if st.button("Ejecutar demostración"):
    report = run_demo(message)
    for step in report.steps:
        # Cada paso se muestra con su resultado y el detalle en hexadecimal.
        if step.ok:
            st.success(f"{step.name}: OK")
        else:
            st.error(f"{step.name}: FALLO")
        if step.detail:
            st.code(step.detail, language=None)
    if report.ok:
        st.info("Todos los pasos completados correctamente.")
    else:
        st.warning("Algún paso ha fallado; revisa el detalle.")
