"""Roast pipeline components."""
