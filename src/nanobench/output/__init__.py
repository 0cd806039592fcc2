"""Text and console rendering of statistics."""
