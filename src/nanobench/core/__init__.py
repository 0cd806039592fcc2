"""Mark state machine, registry and statistics."""
