"""Class-list tokenization, canonical form and set similarity.

A class attribute like ``"text-center flex  gap-4 flex"`` is reduced to its
canonical pattern ``"flex gap-4 text-center"``: the set of tokens, sorted by
code point and joined with single spaces. Two class lists with the same
canonical pattern are the same pattern for counting purposes.

Similarity between patterns is the Jaccard index of their token sets:

    J(A, B) = |A ∩ B| / |A ∪ B|

with J(∅, ∅) = 1 (two empty lists are identical).
"""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Union, overload

_WHITESPACE = re.compile(r"\s+")

ClassInput = Union[str, Sequence[str]]


def tokenize(class_list: str) -> List[str]:
    """Split a whitespace-delimited class string into tokens.

    >>> tokenize("  flex   gap-4  items-center  ")
    ['flex', 'gap-4', 'items-center']
    """
    return [token for token in _WHITESPACE.split(class_list.strip()) if token]


@overload
def canonicalize(class_list: str) -> str: ...


@overload
def canonicalize(class_list: Sequence[str]) -> List[str]: ...


def canonicalize(class_list: ClassInput) -> Union[str, List[str]]:
    """Deduplicate and sort class tokens.

    The return type mirrors the input: a string yields the space-joined
    canonical pattern, a sequence yields a sorted list of unique tokens.
    """
    if isinstance(class_list, str):
        return " ".join(sorted(set(tokenize(class_list))))
    return sorted(set(class_list))


def token_set(value: Union[str, Iterable[str]]) -> frozenset:
    """Return the set of class tokens in a string or sequence."""
    if isinstance(value, str):
        return frozenset(tokenize(value))
    return frozenset(token for token in value if token)


def jaccard(a: ClassInput, b: ClassInput) -> float:
    """Jaccard similarity of two class lists, in [0, 1].

    Both empty is defined as 1.0 (identical); exactly one empty is 0.0.
    """
    set_a = token_set(a)
    set_b = token_set(b)
    union = len(set_a | set_b)
    if union == 0:
        return 1.0
    return len(set_a & set_b) / union
