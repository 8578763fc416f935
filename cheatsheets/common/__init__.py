"""
Shared settings and logging helpers.
They centralize cross-cutting concerns so the notes stay focused on the idioms they document.
"""
