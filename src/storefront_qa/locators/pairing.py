"""
Validation for row-aligned columns read by independent batch queries.
"""

import logging
from typing import List, Sequence, Tuple

from storefront_qa.exceptions import CollectionMismatchError

logger = logging.getLogger(__name__)


def pair_columns(
    left: Sequence[str],
    right: Sequence[str],
    strict: bool = False,
    label: str = "paired read",
) -> List[Tuple[str, str]]:
    """
    Zip two columns that are expected to have one entry per row.
    
    The columns come from separate queries, so their lengths can diverge
    when the markup does. By default a mismatch is logged and the result
    is truncated to the shorter column; in strict mode it raises instead.
    
    Args:
        left: First column (e.g. item names)
        right: Second column (e.g. item prices)
        strict: Raise on length mismatch instead of truncating
        label: Call site name used in the warning or error
        
    Returns:
        List of (left, right) pairs
        
    Raises:
        CollectionMismatchError: On mismatch when strict is set
    """
    if len(left) != len(right):
        if strict:
            raise CollectionMismatchError(label, len(left), len(right))
        logger.warning(
            f"{label}: mismatched counts: {len(left)} vs {len(right)}, "
            f"keeping {min(len(left), len(right))} rows"
        )
    return list(zip(left, right))
