"""Utility helpers for DANGLESCAN."""
