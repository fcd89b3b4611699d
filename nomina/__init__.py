#!/usr/bin/env python3
"""
nomina - Markov Chain Name Generator
====================================

Generates plausible-sounding names from a character-level Markov chain
trained on example names.

Quick Start
-----------
    from nomina import NameForge

    forge = NameForge(order=2, seed=42)
    names = forge.generate(count=10)

    # Or use the building blocks directly
    from nomina import build_chain, generate_name, capitalize_each_substring

    chain = build_chain(["Gianni", "Marco", "Lucia"], order=2)
    name = capitalize_each_substring(generate_name(chain, 2, max_length=10))

Modules
-------
    nomina.chain      - Transition table construction
    nomina.generator  - Chain walking and truncation repair
    nomina.capitalize - Capitalization helpers
    nomina.corpus     - Bundled and file-based training corpora
    nomina.config     - Defaults from configs/app.yaml
"""

__version__ = "0.0.3"
__author__ = "nomina"

import logging

from .chain import (
    PADDING_MARKER,
    ChainBuilder,
    TransitionTable,
    build_chain,
)
from .generator import (
    NULL_SENTINEL,
    NameGenerator,
    Termination,
    ensure_complete_name,
    generate_name,
)
from .capitalize import (
    capitalize,
    capitalize_string,
    capitalize_each_substring,
)
from .entropy import TrueRandom, get_rng
from .corpus import (
    list_categories,
    load_corpus,
    read_corpus_file,
)
from .config import Config, config, get_config, parse_separator, parse_termination

logger = logging.getLogger(__name__)


# =============================================================================
# Main Class
# =============================================================================

class NameForge:
    """
    Trains a chain once and produces formatted names from it.

    Every argument left as None falls back to configs/app.yaml.

    Example:
        forge = NameForge(corpus=["Gianni", "Marco"], order=2, seed=7)
        forge.generate(count=5)
    """

    def __init__(self,
                 corpus: list = None,
                 order: int = None,
                 max_length: int = None,
                 seed: int = None,
                 termination: Termination = None,
                 end_marker: bool = None,
                 cfg: Config = None):
        self._config = cfg or config()

        self.order = self._config.order if order is None else order
        self.max_length = self._config.max_length if max_length is None else max_length
        if self.order < 0:
            raise ValueError(f"order must be non-negative, got {self.order}")
        if self.max_length < 0:
            raise ValueError(f"max_length must be non-negative, got {self.max_length}")

        self.marker = self._config.marker
        self.separator = parse_separator(self._config.separator)
        self.termination = parse_termination(
            self._config.termination if termination is None else termination
        )
        if end_marker is None:
            end_marker = self._config.end_marker

        if corpus is None:
            corpus = self._default_corpus()
        self.corpus = list(corpus)
        self._corpus_set = {name.lower() for name in self.corpus}

        self.chain = ChainBuilder(self.order, self.marker, end_marker).build(self.corpus)
        self._generator = NameGenerator(self.chain, self.order,
                                        marker=self.marker,
                                        termination=self.termination,
                                        separator=self.separator)
        self._rng = get_rng(seed)

        logger.debug(
            f"NameForge trained on {len(self.corpus)} names "
            f"(order={self.order}, contexts={len(self.chain)})"
        )

    def _default_corpus(self) -> list:
        if self._config.has_corpus_file:
            return read_corpus_file(self._config.corpus_path, marker=self.marker)
        return load_corpus(self._config.corpus_categories, marker=self.marker)

    @property
    def config(self) -> Config:
        return self._config

    def generate_one(self) -> str:
        """Generate one capitalized name (empty if the chain yields nothing)."""
        name = self._generator.generate(self.max_length, rng=self._rng)
        return capitalize_each_substring(name, self.separator)

    def generate(self, count: int = 10, exclude_corpus: bool = None) -> list:
        """
        Generate multiple unique names.

        Args:
            count: Number of names to generate
            exclude_corpus: Skip names identical to a training name
                (defaults to the config value)

        Returns:
            Up to `count` unique, non-empty names
        """
        if exclude_corpus is None:
            exclude_corpus = self._config.exclude_corpus

        results = []
        seen = set()
        attempts = 0
        max_attempts = count * self._config.attempts_per_name

        while len(results) < count and attempts < max_attempts:
            attempts += 1
            name = self.generate_one()
            key = name.lower()

            if not name or key in seen:
                continue
            if exclude_corpus and key in self._corpus_set:
                continue

            seen.add(key)
            results.append(name)

        if len(results) < count:
            logger.warning(
                f"Generated {len(results)}/{count} names after {attempts} attempts"
            )

        return results


# =============================================================================
# Convenience Functions
# =============================================================================

def generate(count: int = 10, **kwargs) -> list:
    """Quick generation without creating a NameForge instance."""
    return NameForge(**kwargs).generate(count=count)


__all__ = [
    '__version__',
    'NameForge',
    'generate',
    # Chain
    'PADDING_MARKER',
    'ChainBuilder',
    'TransitionTable',
    'build_chain',
    # Generation
    'NULL_SENTINEL',
    'NameGenerator',
    'Termination',
    'ensure_complete_name',
    'generate_name',
    # Formatting
    'capitalize',
    'capitalize_string',
    'capitalize_each_substring',
    # Randomness
    'TrueRandom',
    'get_rng',
    # Corpus
    'list_categories',
    'load_corpus',
    'read_corpus_file',
    # Config
    'Config',
    'config',
    'get_config',
]
