"""
Streamlit Dashboard Application.

A small internal UI for:
- Checking how many players the trivia service has
- Browsing players by sign-up date
- Exporting the filtered list as CSV

The UI is intentionally thin and calls src/ for all data work.
"""

__version__ = "0.1.0"
