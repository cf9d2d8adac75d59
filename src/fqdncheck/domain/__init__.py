"""Domain layer — verdict types and the host validation rules.

This layer depends only on stdlib and pydantic.
It must never import from config, output, or the CLI.
"""
