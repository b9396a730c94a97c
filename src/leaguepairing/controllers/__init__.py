"""Stateless controllers operating on tournament snapshots."""
