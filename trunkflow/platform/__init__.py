"""Operating-system boundary: subprocesses and file writes."""
