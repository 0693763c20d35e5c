"""Core probing engine for DANGLESCAN."""
