#!/usr/bin/env python3
"""
Markov Chain Builder
====================
Builds character-level transition tables from a list of example names.

A transition table maps every context (exactly `order` characters) to the
list of characters observed right after it. Repeated characters are kept,
so sampling uniformly from the list is sampling by observed frequency:

    >>> build_chain(['Ann', 'Abe'], order=1)
    {'^': ['a', 'a'], 'a': ['n', 'b'], 'n': ['n'], 'b': ['e']}

Every name is left-padded with `order` markers, which gives the first
characters of a generated name a defined context.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List

logger = logging.getLogger(__name__)

# Reserved sentinel used for padding; must not occur in training names
PADDING_MARKER = '^'

TransitionTable = Dict[str, List[str]]


def build_chain(names: Iterable[str],
                order: int,
                marker: str = PADDING_MARKER,
                end_marker: bool = False) -> TransitionTable:
    """
    Build a transition table from a corpus of names.

    Args:
        names: Training names (lowercased before use)
        order: Number of context characters (0 collapses to a single context)
        marker: Padding sentinel
        end_marker: Also append one marker to each name, so the chain
            learns where words end

    Returns:
        Mapping of context -> observed next characters, in scan order

    Raises:
        ValueError: If order is negative
    """
    if order < 0:
        raise ValueError(f"order must be non-negative, got {order}")

    chain = defaultdict(list)
    window = order + 1

    for name in names:
        padded = marker * order + name.lower()
        if end_marker and name:
            padded += marker

        for i in range(len(padded) - order):
            chain[padded[i:i + order]].append(padded[i + window - 1])

    logger.debug(f"Built order-{order} chain with {len(chain)} contexts")
    return dict(chain)


class ChainBuilder:
    """Trains transition tables with a fixed order and marker."""

    def __init__(self, order: int = 2,
                 marker: str = PADDING_MARKER,
                 end_marker: bool = False):
        if order < 0:
            raise ValueError(f"order must be non-negative, got {order}")
        self.order = order
        self.marker = marker
        self.end_marker = end_marker

    def build(self, names: Iterable[str]) -> TransitionTable:
        """Train a transition table on a list of names"""
        return build_chain(names, self.order,
                           marker=self.marker,
                           end_marker=self.end_marker)
