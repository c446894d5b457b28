"""
Main application package for the Trivia Dashboard.

This is the client-side data pipeline providing:
- Fetching the player count and player records from the trivia backend
- Date range filtering of the player list
- Display formatting and CSV export
- Per-screen state driven by pure reducers

The pipeline is consumed by:
- Streamlit dashboard (streamlit_app/)
- Command line entry point (python -m src.main)
"""

__version__ = "0.1.0"
