# This file marks the notes package that holds one module per cheat-sheet topic.
# Each topic module exposes TOPIC and collect_checks() so the runner can execute it.
# The catalog in configs/notes_catalog.yaml decides which topics a run includes.
