"""Departure enrichment layer.

This module merges parsed train designations and rendered messages
into departure records supplied by the departure backend.
"""
