"""Benchmark harness: timing (`measure`) and YAML-driven experiments (`runner`)."""
