"""journalfm: frontmatter codec for plain-text journal vaults."""

__version__ = "0.3.0"
