"""
Collection Query Builder - one combined selector for a list of fallbacks.

Playwright evaluates a CSS selector list (``a,b``) as a single query whose
matches come back in document order, not in member order. Row-aligned batch
reads depend on that.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple


@dataclass(frozen=True)
class CombinedExpression:
    """
    A deduplicated union of locator expressions.
    
    Attributes:
        members: Member expressions, first-seen order, no duplicates, no blanks
    """
    members: Tuple[str, ...]
    
    @property
    def selector(self) -> str:
        """The selector string handed to the query engine."""
        return ",".join(self.members)
    
    def __str__(self) -> str:
        return self.selector
    
    def __len__(self) -> int:
        return len(self.members)
    
    def __iter__(self) -> Iterator[str]:
        return iter(self.members)


def union_query(expressions: Sequence[Optional[str]]) -> CombinedExpression:
    """
    Build a combined expression matching any of the given expressions.
    
    Falsy entries are dropped and duplicates removed, keeping the first
    occurrence of each.
    
    Args:
        expressions: Ordered locator expressions
        
    Returns:
        The combined expression
        
    Raises:
        ValueError: If nothing is left after filtering
        
    Example:
        >>> str(union_query(["a", ".b", "a"]))
        'a,.b'
    """
    members = tuple(dict.fromkeys(expr for expr in expressions if expr))
    if not members:
        raise ValueError("Cannot build a union query from an empty expression list")
    return CombinedExpression(members)
