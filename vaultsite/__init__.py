"""vaultsite - publish an Obsidian vault to a static site content directory."""

__version__ = "0.1.0"
