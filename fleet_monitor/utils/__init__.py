"""Utility modules for the fleet monitor."""
