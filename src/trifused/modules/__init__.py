"""Scanning and grading modules."""
