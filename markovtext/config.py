#!/usr/bin/env python3
"""
Configuration Management
========================
Runtime configuration for model building and generation.

Values come from, highest priority first:
1. Explicit constructor arguments
2. MARKOVTEXT_* environment variables (also read from a .env file)
3. configs/app.yaml
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .settings import get_setting, resolve_path

ENV_ORDER = 'MARKOVTEXT_ORDER'
ENV_MAX_WORDS = 'MARKOVTEXT_MAX_WORDS'
ENV_CORPUS = 'MARKOVTEXT_CORPUS'
ENV_LOG_LEVEL = 'MARKOVTEXT_LOG_LEVEL'


def _positive_int(name: str, value) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if number < 1:
        raise ValueError(f"{name} must be at least 1, got {number}")
    return number


@dataclass
class Config:
    """Application configuration"""
    order: Optional[int] = None
    max_word_count: Optional[int] = None
    corpus_path: Optional[Path] = None
    encoding: Optional[str] = None
    log_level: Optional[str] = None

    def __post_init__(self):
        if self.order is None:
            self.order = get_setting("model.default_order", 2)
        if self.max_word_count is None:
            self.max_word_count = get_setting("generation.max_word_count", 1000)
        if self.corpus_path is None:
            self.corpus_path = get_setting("corpus.default_path")
        if self.encoding is None:
            self.encoding = get_setting("corpus.encoding", "utf-8")
        if self.log_level is None:
            self.log_level = get_setting("logging.level", "WARNING")

        self.order = _positive_int("order", self.order)
        self.max_word_count = _positive_int("max_word_count", self.max_word_count)
        if self.corpus_path is not None:
            self.corpus_path = resolve_path(self.corpus_path)
        self.log_level = str(self.log_level).upper()


def load_env(env_path: Path = None) -> dict:
    """Load environment variables from .env file."""
    if env_path is None:
        env_path = Path.cwd() / '.env'

    env_vars = {}
    if env_path.exists():
        for line in env_path.read_text().splitlines():
            line = line.strip()
            if '=' in line and not line.startswith('#'):
                key, value = line.split('=', 1)
                env_vars[key.strip()] = value.strip()

    return env_vars


def get_config(env_path: Path = None) -> Config:
    """Get configuration from environment."""
    env = load_env(env_path)

    def lookup(key):
        return os.environ.get(key) or env.get(key)

    return Config(
        order=lookup(ENV_ORDER),
        max_word_count=lookup(ENV_MAX_WORDS),
        corpus_path=lookup(ENV_CORPUS),
        log_level=lookup(ENV_LOG_LEVEL),
    )

