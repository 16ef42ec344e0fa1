"""Domain layer: typed values, frontmatter codec, and record schemas.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
