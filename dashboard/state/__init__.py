"""Session state for the Chartify dashboard."""
