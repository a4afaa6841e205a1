"""Invocation normalization and fingerprinting engine."""
