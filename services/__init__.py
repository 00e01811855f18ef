"""Services built on top of the engine."""
