"""Evaluation helpers: compile/render profiling."""
