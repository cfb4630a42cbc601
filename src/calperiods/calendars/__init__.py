"""Concrete calendar systems."""
