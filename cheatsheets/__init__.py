"""
Package marker for the executable Python idiom cheat sheets.
It groups the shared helpers and the topic notes under a stable import path.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
