"""Rekompenco command-line interface."""
