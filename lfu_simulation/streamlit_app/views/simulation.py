"""Simulation page showing each request and the final frequencies."""

import streamlit as st
from lfu_simulation.streamlit_app.sessionHelper import get_config, get_last_result, run_and_store
from lfu_simulation.streamlit_app.components.frequencyTable import render_frequency_table


def render_simulation():
    """Render the simulation page."""
    st.title("LFU Simulation")
    st.markdown(
        "**Request numbers one by one and watch the least frequently used "
        "number get replaced**"
    )

    config = get_config()

    numbers_text = st.sidebar.text_input(
        f"Numbers (up to {config.max_numbers}, separated by spaces)",
        value="1 2 3 1 2 4 3 1"
    )
    num_rows = st.sidebar.number_input(
        "Rows",
        min_value=1,
        value=config.num_rows,
        step=1
    )

    if st.sidebar.button("Run Simulation"):
        run_and_store(numbers_text, int(num_rows), config.max_numbers)

    for token in st.session_state.get('invalid_tokens', []):
        st.warning(f"Invalid number: {token}")

    result = get_last_result()
    if result is None:
        st.info("Enter some numbers and press Run Simulation.")
        return

    if not result.steps:
        st.info("No numbers to simulate.")
        return

    # Key metrics
    col1, col2, col3 = st.columns(3)

    with col1:
        st.metric("Page Hits", result.hits)

    with col2:
        st.metric("Page Faults", result.faults)

    with col3:
        st.metric("Hit Ratio", f"{result.hit_ratio:.0%}")

    st.markdown("---")

    st.subheader("Simulation Results")
    st.table([
        {
            'Number': step.number,
            'Operation': step.operation,
            'Cache State': step.state,
            'Frequencies': str(step.frequencies),
        }
        for step in result.steps
    ])

    st.markdown("---")

    render_frequency_table(result.final_table, title="Final Frequency Table")
