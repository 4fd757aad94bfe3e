"""Personal time tracking and weekly pay calculator."""
