"""Extraction strategies for the supported templating dialects.

Each dialect is a compiled regular expression plus a rule for which capture
groups hold the class string. Every built-in expression captures the four
literal forms a class attribute can take::

    className={`...`}    className={"..."}    className='...'    className="..."

The ``astro`` dialect additionally captures the bracketed array literal of
``class:list={[...]}`` in a dedicated group whose quoted items are extracted
one by one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from ..exceptions import InvalidPatternError

# {`...`} | {"..."} | '...' | "..."
_VALUE_FORMS = r"""(?:(?:\{`([^`]+)`\})|(?:\{"([^"]+)"\})|(?:'([^']+)')|(?:"([^"]+)"))"""

DEFAULT_PATTERNS: Dict[str, str] = {
    # React/JSX: className={...} or className="..."
    "react": r"(?:className\s*=\s*)" + _VALUE_FORMS,
    # Astro/HTML: class="...", class:list="..." and class:list={[...]}
    "astro": (
        r"(?:class\s*=\s*|class:list\s*=\s*)"
        + _VALUE_FORMS
        + r"|(?:class:list\s*=\s*\{([^}]+)\})"
    ),
    # Vue: class="..." or :class="..."
    "vue": r"(?:class\s*=\s*|:class\s*=\s*)" + _VALUE_FORMS,
    # Svelte: class="..." or class:name="..."
    "svelte": r"(?:class\s*=\s*|class:name\s*=\s*)" + _VALUE_FORMS,
}

# Capture group holding a list-directive array literal, per dialect
ARRAY_GROUPS: Dict[str, int] = {"astro": 5}

DEFAULT_FILE_TYPES: Dict[str, Tuple[str, ...]] = {
    ".tsx": ("react",),
    ".jsx": ("react",),
    ".astro": ("astro",),
    ".html": ("astro",),
    ".mdx": ("react", "astro"),  # MDX mixes JSX and Astro-style attributes
    ".vue": ("vue",),
    ".svelte": ("svelte",),
}

_QUOTED_LITERAL = re.compile(r""""([^"]+)"|'([^']+)'""")

# Fragments containing these are computed class names, not literals
CONDITIONAL_MARKERS: Tuple[str, ...] = ("==", "!=", "?")


@dataclass(frozen=True)
class DialectStrategy:
    """A compiled extraction pattern and its capture-group selection rule.

    Attributes:
        name: Dialect name referenced from the file-type table
        source: The uncompiled regular expression
        value_groups: Groups holding a whole class string, tried in order
        array_group: Group holding an array literal, if the dialect has one
    """

    name: str
    source: str
    value_groups: Tuple[int, ...]
    array_group: Optional[int] = None
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.source)
        except re.error as e:
            raise InvalidPatternError(self.name, self.source, str(e))
        if compiled.groups == 0:
            raise InvalidPatternError(
                self.name, self.source, "pattern must define at least one capture group"
            )
        object.__setattr__(self, "pattern", compiled)

    @classmethod
    def from_pattern(cls, name: str, source: str) -> "DialectStrategy":
        """Build a strategy from a bare regular expression.

        Every capture group is a value group except the dialect's array group
        (if it has one and the expression defines it).
        """
        try:
            group_count = re.compile(source).groups
        except re.error as e:
            raise InvalidPatternError(name, source, str(e))
        array_group = ARRAY_GROUPS.get(name)
        if array_group is not None and group_count < array_group:
            array_group = None
        value_groups = tuple(g for g in range(1, group_count + 1) if g != array_group)
        return cls(name=name, source=source, value_groups=value_groups, array_group=array_group)

    def select(self, match: re.Match) -> Tuple[Optional[str], bool]:
        """Return ``(raw, is_array)`` for the first non-empty relevant group."""
        for group in self.value_groups:
            value = match.group(group)
            if value:
                return value, False
        if self.array_group is not None:
            value = match.group(self.array_group)
            if value:
                return value, True
        return None, False


def split_array_literal(raw: str) -> list[str]:
    """Extract each quoted literal of an array expression.

    ``["flex", "gap-4", "active ? ring : ''"]`` yields ``flex`` and
    ``gap-4``; quoted fragments carrying a conditional marker are skipped
    because they cannot be attributed to a literal class.
    """
    literals = []
    for match in _QUOTED_LITERAL.finditer(raw):
        value = match.group(1) or match.group(2)
        if not value:
            continue
        if any(marker in value for marker in CONDITIONAL_MARKERS):
            continue
        literals.append(value)
    return literals


def build_strategies(
    patterns: Optional[Mapping[str, str]] = None,
) -> Dict[str, DialectStrategy]:
    """Compile the built-in dialects, replaced or extended by ``patterns``."""
    sources = dict(DEFAULT_PATTERNS)
    if patterns:
        sources.update(patterns)
    return {name: DialectStrategy.from_pattern(name, src) for name, src in sources.items()}


DEFAULT_STRATEGIES: Dict[str, DialectStrategy] = build_strategies()
