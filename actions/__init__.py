"""Named state transitions."""
