"""Main Streamlit application for the LFU simulation."""

import streamlit as st
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from lfu_simulation.streamlit_app.views.simulation import render_simulation


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title="LFU Simulation",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    st.sidebar.title("LFU Simulation")
    st.sidebar.markdown("---")

    render_simulation()


if __name__ == "__main__":
    main()
