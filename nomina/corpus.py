#!/usr/bin/env python3
"""
Training Corpora
================
Loads example names from the bundled YAML corpus or from plain-text files
(one name per line, `#` starts a comment line).
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import yaml

from .chain import PADDING_MARKER

# Bundled corpus directory
CORPORA_DIR = Path(__file__).parent / 'corpora'
DEFAULT_CORPUS = 'names.yaml'


@lru_cache(maxsize=4)
def _load_yaml(filename: str) -> Dict:
    """Load a YAML file from the corpora directory."""
    filepath = CORPORA_DIR / filename
    if not filepath.exists():
        return {}
    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def list_categories() -> List[str]:
    """List categories available in the bundled corpus."""
    return list(_load_yaml(DEFAULT_CORPUS).keys())


def validate_names(names: Iterable[str], marker: str = PADDING_MARKER) -> List[str]:
    """
    Check that no training name contains the padding marker.

    Raises:
        ValueError: On the first name containing the marker
    """
    names = list(names)
    for name in names:
        if marker in name:
            raise ValueError(
                f"Training name {name!r} contains the padding marker {marker!r}"
            )
    return names


def load_corpus(categories: Optional[List[str]] = None,
                marker: str = PADDING_MARKER) -> List[str]:
    """
    Get the bundled training corpus.

    Args:
        categories: Categories to include (all if None or empty)
        marker: Padding marker the names are checked against

    Raises:
        ValueError: If a category is not in the bundled corpus
    """
    data = _load_yaml(DEFAULT_CORPUS)

    if not categories:
        categories = list(data.keys())

    corpus = []
    for category in categories:
        if category not in data:
            available = ', '.join(sorted(data.keys()))
            raise ValueError(
                f"Unknown category '{category}'. "
                f"Available categories: {available}"
            )
        corpus.extend(str(name) for name in data[category] or [])

    return validate_names(corpus, marker=marker)


def read_corpus_file(path, marker: str = PADDING_MARKER) -> List[str]:
    """Read a plain-text corpus, one name per line."""
    names = []
    for line in Path(path).read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if line and not line.startswith('#'):
            names.append(line)
    return validate_names(names, marker=marker)
