"""Streamlit launcher for Chartify: ``streamlit run app.py``."""

from __future__ import annotations

from dashboard.app import main

if __name__ == "__main__":
    main()
