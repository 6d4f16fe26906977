"""Mood-weighted dinner chooser."""
