import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="Folio Builder")

import atexit
import json
import tempfile
from datetime import datetime
from pathlib import Path

import config
from loader import FetchError
from page_builder import build_site
from schema_site import SECTIONS, SITE_SCHEMA
from temp_server import cleanup_temp_server, get_server_status, serve_site

# Register cleanup function to run when Streamlit exits
atexit.register(cleanup_temp_server)

# Initialize session state variables
if "generated_html" not in st.session_state:
    st.session_state.generated_html = ""
if "build_summary" not in st.session_state:
    st.session_state.build_summary = None
if "process_log_entries" not in st.session_state:
    st.session_state.process_log_entries = []
if "temp_server_url" not in st.session_state:
    st.session_state.temp_server_url = None
if "output_dir" not in st.session_state:
    st.session_state.output_dir = tempfile.mkdtemp(prefix="folio-")

st.title("🗂️ → 🌐 Folio Builder")
st.markdown("Render your résumé page from `data.json` and the section templates")


# --- Helper to clear relevant state for new processing ---
def reset_build_output_state():
    st.session_state.generated_html = ""
    st.session_state.build_summary = None
    st.session_state.process_log_entries = []
    st.session_state.temp_server_url = None
    cleanup_temp_server()


# --- Build Logic ---
def trigger_site_build(site_dir: str, uploaded_data: dict | None):
    reset_build_output_state()

    with st.status("🏗️ Building your page...", expanded=True) as status_ui:

        def status_update_callback(message: str):
            timestamp = datetime.now().strftime("%H:%M:%S")
            full_log_entry = f"{timestamp} - {message}"
            if message.startswith("❌"):
                status_ui.error(message)
            else:
                status_ui.write(full_log_entry)
            st.session_state.process_log_entries.append(full_log_entry)

        try:
            result = build_site(
                site_dir,
                st.session_state.output_dir,
                data=uploaded_data,
                status_callback=status_update_callback,
            )
        except FetchError as e:
            st.error(f"Could not load the site: {e}")
            status_ui.update(label="💥 Loading failed.", state="error")
            return

        st.session_state.generated_html = result.html
        st.session_state.build_summary = {
            "rendered": result.rendered,
            "skipped": result.skipped,
            "failed": result.failed,
            "overlays": len(result.overlays or []),
        }

        try:
            serve_site(st.session_state.output_dir)
            st.session_state.temp_server_url = get_server_status()["url"]
        except OSError as e:
            st.warning(f"Could not start preview server: {e}")

        if result.ok:
            status_ui.update(label="✅ Page built successfully!", state="complete")
        else:
            status_ui.update(label="⚠️ Page built with failing sections.", state="error")


# --- UI Elements & Main Control Logic ---
site_dir = st.text_input("Site directory", value=config.SITE_DIR,
                         help="Folder holding index.html, components/ and data.json")

uploaded_json = st.file_uploader("Replace data.json (optional)", type="json")
uploaded_data = None
if uploaded_json:
    try:
        uploaded_data = json.loads(uploaded_json.read().decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        st.error(f"That file is not valid JSON: {e}")

col_build, col_starter = st.columns(2)
with col_build:
    if st.button("🚀 Build page", use_container_width=True, disabled=not Path(site_dir).is_dir()):
        trigger_site_build(site_dir, uploaded_data)
with col_starter:
    st.download_button(
        label="📄 Starter data.json",
        data=json.dumps(SITE_SCHEMA, ensure_ascii=False, indent=2),
        file_name="data.json",
        mime="application/json",
        use_container_width=True,
    )

# --- Display Area ---
if st.session_state.generated_html:
    st.subheader("🎯 Your Page")

    col1, col2 = st.columns(2)
    with col1:
        if st.session_state.temp_server_url:
            st.link_button("🌐 Open New Tab", st.session_state.temp_server_url, use_container_width=True)
        else:
            st.button("🌐 New Tab", disabled=True, help="Server not running", use_container_width=True)
    with col2:
        st.download_button(
            label="📥 Download",
            data=st.session_state.generated_html,
            file_name="index.html",
            mime="text/html",
            help="Download the built page (assets are not included)",
            use_container_width=True,
        )

    st.divider()
    col_main, col_info = st.columns([3, 1])

    with col_main:
        st.components.v1.html(st.session_state.generated_html, height=600, scrolling=True)

    with col_info:
        summary = st.session_state.build_summary
        st.markdown("**📊 Build Summary**")
        st.metric("💾 Size", f"{len(st.session_state.generated_html) / 1024:.1f} KB")
        st.metric("🔍 Zoomable images", summary["overlays"])
        for name, _key, _fname, _cid in SECTIONS:
            if name in summary["failed"]:
                st.error(f"{name}: {summary['failed'][name]}")
            elif name in summary["rendered"]:
                st.success(name)
            else:
                st.caption(f"{name}: skipped")

    if st.session_state.process_log_entries:
        with st.expander("📜 Build log"):
            st.code("\n".join(st.session_state.process_log_entries))
