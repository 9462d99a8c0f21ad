"""Regression tests for snapshot testing.

Uses syrupy for snapshot assertions to detect unexpected changes
in multi-day aging trajectories.
"""
