"""Prompt templates (Markdown with YAML front matter), grouped by pipeline."""
