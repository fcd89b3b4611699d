#!/usr/bin/env python3
"""
Markov Chain Name Generator
===========================
Walks a transition table from the all-padding context, sampling one
character at a time until the chain signals an end or `max_length`
characters have been produced.

A walk stops when:
- the sampled character is the padding marker or a null sentinel
- the current context has an empty list of next characters
- the current context was never seen in training (see `Termination`)
- the length cap is reached

The raw buffer is then passed through `ensure_complete_name`, which removes
a trailing marker or drops a trailing partial word.
"""

import logging
from collections import deque
from enum import Enum
from typing import Optional

from .chain import PADDING_MARKER, TransitionTable
from .entropy import RandomSource, get_rng

logger = logging.getLogger(__name__)

NULL_SENTINEL = '\0'


class Termination(Enum):
    """How a walk records that it ended (missing context or sampled marker)."""
    MARKER = 'marker'   # append one marker, stripped again by the repair step
    SILENT = 'silent'   # stop with the buffer as is


def ensure_complete_name(name: str,
                         marker: str = PADDING_MARKER,
                         separator: str = ' ') -> str:
    """
    Repair a generated name that may have been cut short.

    A trailing marker is stripped. Otherwise, if the name holds more than
    one word, the last (possibly partial) word is dropped. A single word
    cannot be completed and is returned as is.

        >>> ensure_complete_name("Gianni^")
        'Gianni'
        >>> ensure_complete_name("Gladewalker Dream Of")
        'Gladewalker Dream'
    """
    if name.endswith(marker):
        return name[:-len(marker)]
    if separator in name:
        return name[:name.rindex(separator)]
    return name


def generate_name(chain: TransitionTable,
                  order: int,
                  max_length: int,
                  rng: Optional[RandomSource] = None,
                  marker: str = PADDING_MARKER,
                  termination: Termination = Termination.MARKER,
                  separator: str = ' ') -> str:
    """
    Generate a single name from a transition table.

    Args:
        chain: Table built with the same order and marker
        order: Context length the table was built with
        max_length: Maximum characters drawn before repair
        rng: Anything with `choice(seq)`; a fresh TrueRandom if None
        marker: Padding sentinel used when the table was built
        termination: How a walk records its end before repair
        separator: Word separator used by the repair step

    Returns:
        Lowercase repaired name, possibly empty

    Raises:
        ValueError: If order or max_length is negative
    """
    if order < 0:
        raise ValueError(f"order must be non-negative, got {order}")
    if max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")

    if rng is None:
        rng = get_rng()

    context = deque(marker * order, maxlen=order)
    result = []

    for _ in range(max_length):
        next_chars = chain.get(''.join(context))

        if next_chars is None:
            if termination is Termination.MARKER:
                result.append(marker)
            break

        if not next_chars:
            break

        next_char = rng.choice(next_chars)
        if next_char == marker or next_char == NULL_SENTINEL:
            # a learned end of word; keep the last word through repair
            if termination is Termination.MARKER:
                result.append(marker)
            break

        result.append(next_char)
        context.append(next_char)

    raw = ''.join(result)
    name = ensure_complete_name(raw, marker=marker, separator=separator)
    logger.debug(f"Generated {raw!r} -> {name!r}")
    return name


class NameGenerator:
    """Generates names from a trained transition table"""

    def __init__(self,
                 chain: TransitionTable,
                 order: int,
                 marker: str = PADDING_MARKER,
                 termination: Termination = Termination.MARKER,
                 separator: str = ' '):
        """
        Initialize generator with a trained table.

        Args:
            chain: Transition table from `build_chain`
            order: Order the table was built with
            marker: Padding sentinel the table was built with
            termination: How a walk records its end before repair
            separator: Word separator used by the repair step
        """
        if order < 0:
            raise ValueError(f"order must be non-negative, got {order}")
        self.chain = chain
        self.order = order
        self.marker = marker
        self.termination = termination
        self.separator = separator

    def generate(self, max_length: int = 12,
                 rng: Optional[RandomSource] = None) -> str:
        """Generate a single lowercase name."""
        return generate_name(self.chain, self.order, max_length,
                             rng=rng,
                             marker=self.marker,
                             termination=self.termination,
                             separator=self.separator)
