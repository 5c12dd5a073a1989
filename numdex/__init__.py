"""Numdex - auto-generated index of numbered folders in an Obsidian vault."""
