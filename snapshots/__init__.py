"""Frozen earlier engine versions, kept as benchmark baselines."""
