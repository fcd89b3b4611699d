#!/usr/bin/env python3
"""
Configuration Management
========================
Resolves generation defaults from nomina/configs/app.yaml.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .settings import get_setting, resolve_path
from .generator import Termination


# =============================================================================
# Application Configuration
# =============================================================================

@dataclass
class Config:
    """Application configuration"""
    order: int = 2
    marker: str = '^'
    end_marker: bool = False
    max_length: int = 12
    termination: Termination = Termination.MARKER
    attempts_per_name: int = 20
    exclude_corpus: bool = True
    separator: str = ' '
    corpus_path: Optional[Path] = None
    corpus_categories: list = field(default_factory=list)

    @property
    def has_corpus_file(self) -> bool:
        return self.corpus_path is not None


def parse_termination(value) -> Termination:
    """
    Resolve a termination convention from its config name.

    Raises:
        ValueError: If the name is not a known convention
    """
    if isinstance(value, Termination):
        return value
    try:
        return Termination(str(value).lower())
    except ValueError:
        available = ', '.join(t.value for t in Termination)
        raise ValueError(
            f"Unknown termination '{value}'. "
            f"Available conventions: {available}"
        ) from None


def parse_separator(value) -> str:
    """
    Check a word separator from config.

    Raises:
        ValueError: If the separator is empty
    """
    if not value:
        raise ValueError("format.separator must be a non-empty string")
    return str(value)


def get_config() -> Config:
    """Get configuration from app.yaml."""
    corpus_path = get_setting('corpus.path')

    return Config(
        order=int(get_setting('chain.order', 2)),
        marker=get_setting('chain.marker', '^'),
        end_marker=bool(get_setting('chain.end_marker', False)),
        max_length=int(get_setting('generation.max_length', 12)),
        termination=parse_termination(get_setting('generation.termination', 'marker')),
        attempts_per_name=int(get_setting('generation.attempts_per_name', 20)),
        exclude_corpus=bool(get_setting('generation.exclude_corpus', True)),
        separator=parse_separator(get_setting('format.separator', ' ')),
        corpus_path=resolve_path(corpus_path) if corpus_path else None,
        corpus_categories=list(get_setting('corpus.categories') or []),
    )


# Singleton config
_config = None

def config() -> Config:
    """Get the singleton config instance."""
    global _config
    if _config is None:
        _config = get_config()
    return _config
