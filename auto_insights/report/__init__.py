"""Iteration report pipeline: normalize, filter, project and render board items."""
