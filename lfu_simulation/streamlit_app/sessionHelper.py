"""Session state helpers for the simulation dashboard."""

import streamlit as st
from typing import Optional

from lfu_simulation.config import SimulationConfig
from lfu_simulation.simulation import SimulationResult, parse_numbers, run_simulation


def get_config() -> SimulationConfig:
    """Get or create simulation config in session state."""
    if 'config' not in st.session_state:
        st.session_state.config = SimulationConfig.from_env()
    return st.session_state.config


def get_last_result() -> Optional[SimulationResult]:
    """Get the most recent simulation result, if any."""
    return st.session_state.get('last_result')


def run_and_store(text: str, num_rows: int, max_numbers: int) -> SimulationResult:
    """
    Parse input, run the simulation and keep the result in session state.

    Invalid tokens are stored under 'invalid_tokens' so the page can
    report them.

    Args:
        text: Raw numbers input
        num_rows: Number of cache rows
        max_numbers: Maximum numbers to simulate

    Returns:
        SimulationResult
    """
    numbers, invalid = parse_numbers(text, max_numbers=max_numbers)
    result = run_simulation(numbers, num_rows=num_rows)
    st.session_state.last_result = result
    st.session_state.invalid_tokens = invalid
    return result
