"""Frequency table component."""

import streamlit as st
from typing import List, Tuple


def render_frequency_table(table: List[Tuple[int, List[int]]], title: str = "Frequency Table"):
    """
    Render a frequency table, highest frequency first.

    Args:
        table: List of (frequency, numbers) pairs
        title: Section title
    """
    st.subheader(title)

    if not table:
        st.write("Cache is empty")
        return

    st.table([
        {'Frequency': freq, 'Numbers': ", ".join(str(key) for key in keys)}
        for freq, keys in table
    ])
