"""Infrastructure layer — package graph, installer, command-file reader.

This layer depends on stdlib, third-party libs (NetworkX), and the
domain layer for error and outcome types. It must never import from
services, commands, or output.
"""
