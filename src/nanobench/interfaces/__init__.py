"""User-facing instrumentation interfaces."""
from .decorators import watch, watch_block
