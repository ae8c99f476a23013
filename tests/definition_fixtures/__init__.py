"""Endpoint definitions exercising edge cases, one package per scenario.

Each scenario lives in its own subpackage so scanning one does not pick up
the others.
"""
