"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so callers can depend
on ports without importing infrastructure directly.
"""
