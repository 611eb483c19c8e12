"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the campus map to its data sources:
- Map records (TSV files)
"""
