"""Ordering domain module."""
