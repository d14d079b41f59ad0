"""Release descriptor model, persistence and preparation."""
