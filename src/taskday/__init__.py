"""taskday - daily task planner."""
