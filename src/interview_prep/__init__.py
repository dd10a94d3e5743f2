"""Interactive Java and Maven interview preparation console."""
