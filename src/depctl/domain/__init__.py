"""Domain layer — errors, outcome records, session states, command grammar.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""
