"""Markdown prompt templates with YAML front matter, rendered by Jinja2."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from jinja2 import BaseLoader, Environment, StrictUndefined

PROMPT_DIR = Path(__file__).resolve().parents[2] / "prompts" / "product_detection"

SYSTEM_PROMPT_ID = "extraction_system_prompt"
USER_PROMPT_ID = "extraction_user_prompt"

_env = Environment(loader=BaseLoader(), autoescape=False, undefined=StrictUndefined)


def load_prompt(prompt_id: str, **kwargs: Any) -> str:
    body, requires = _load_template(prompt_id)
    missing = [name for name in requires if name not in kwargs]
    if missing:
        raise ValueError(f"Missing required vars for prompt {prompt_id}: {missing}")
    return _env.from_string(body).render(**kwargs)


def build_extraction_prompts(title: str, numbered_paragraphs: str, pre_detected: str) -> tuple[str, str]:
    """System and user prompt for one deep-extraction call."""
    system_prompt = load_prompt(SYSTEM_PROMPT_ID)
    user_prompt = load_prompt(
        USER_PROMPT_ID,
        title=title,
        numbered_paragraphs=numbered_paragraphs,
        pre_detected=pre_detected,
    )
    return system_prompt, user_prompt


@lru_cache(maxsize=16)
def _load_template(prompt_id: str) -> tuple[str, tuple[str, ...]]:
    path = PROMPT_DIR / f"{prompt_id}.md"
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")
    meta, body = _split_frontmatter(path.read_text(encoding="utf-8"))
    return body, tuple(meta.get("requires") or ())


def _split_frontmatter(content: str) -> tuple[dict, str]:
    if not content.startswith("---"):
        return {}, content
    parts = content.split("---", 2)
    if len(parts) < 3:
        return {}, content
    return yaml.safe_load(parts[1]) or {}, parts[2].strip()
