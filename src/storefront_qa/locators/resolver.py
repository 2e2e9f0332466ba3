"""
Locator Resolver - fallback-aware element resolution and text extraction.

Every page object goes through this module to find on-screen elements.
A logical element is described by an ordered list of locator expressions;
the resolver returns the first one whose first match is usable right now.

Gates (tried per expression, first DOM match only):
1. VISIBLE - ``is_visible()`` must be true
2. ENABLED - ``is_enabled()`` must be true, only when interactivity is required

Nothing is cached between calls. Each operation re-queries the scope, so
results always reflect the page as it is when the call runs.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union
import asyncio
import logging

from playwright.async_api import Error as PlaywrightError

from storefront_qa.exceptions import LocatorNotFoundError
from storefront_qa.locators.pairing import pair_columns
from storefront_qa.locators.registry import (
    DEFAULT_REGISTRY,
    ExpressionList,
    SelectorRegistry,
    to_expression_list,
)
from storefront_qa.locators.union import union_query

if TYPE_CHECKING:
    from playwright.async_api import Locator, Page
    from storefront_qa.config.settings import Settings

logger = logging.getLogger(__name__)

Scope = Union["Page", "Locator"]
Expressions = Union[str, Sequence[str]]


@dataclass(frozen=True)
class ResolvedLocator:
    """
    A call-scoped handle to one resolved element.

    Attributes:
        locator: Playwright locator narrowed to the first match
        expression: The expression that passed the gates
        index: Position of that expression in the list
    """
    locator: "Locator"
    expression: str
    index: int


def _clean_text(text: Optional[str], trim: bool) -> Optional[str]:
    if text is None:
        return None
    return text.strip() if trim else text


class LocatorResolver:
    """
    Resolve elements from prioritized expression lists.

    Expression arguments accept a list of expressions, a single expression,
    or a registry key such as ``"login.username"``.

    Example:
        >>> resolver = LocatorResolver()
        >>> button = await resolver.resolve_required(
        ...     page, "login.login_button", require_interactive=True
        ... )
        >>> await button.locator.click()
    """

    def __init__(
        self,
        registry: Optional[SelectorRegistry] = None,
        strict_pairs: bool = False,
    ):
        """
        Args:
            registry: Selector registry used for key lookups
            strict_pairs: Default mismatch policy for read_text_pairs
        """
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._strict_pairs = strict_pairs

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        registry: Optional[SelectorRegistry] = None,
    ) -> "LocatorResolver":
        return cls(registry=registry, strict_pairs=settings.locators.strict_pairs)

    @property
    def registry(self) -> SelectorRegistry:
        return self._registry

    @property
    def strict_pairs(self) -> bool:
        return self._strict_pairs

    def expressions_for(self, expressions: Expressions) -> ExpressionList:
        """
        Normalize an expression argument to a non-empty tuple.

        A string whose prefix before the first '.' names a registry group is
        always a registry key, so a typo in the entry name fails here instead
        of being queried as CSS.

        Raises:
            KeyError: If the string names a known group but an unknown entry
            ValueError: If the list is empty
        """
        group, dot, _ = expressions.partition(".") if isinstance(expressions, str) else ("", "", "")
        if dot and self._registry.has_group(group):
            expression_list = self._registry.get(expressions)
        else:
            expression_list = to_expression_list(expressions)
        if not expression_list:
            raise ValueError("At least one locator expression is required")
        return expression_list

    # ==================== Single elements ====================

    async def _passes_gates(self, candidate: "Locator", require_interactive: bool) -> bool:
        # A check that raises (element torn down mid-check) is a failed gate.
        try:
            if not await candidate.is_visible():
                return False
            if require_interactive and not await candidate.is_enabled():
                return False
        except Exception as e:
            logger.debug(f"Gate check raised, treating as not usable: {e}")
            return False
        return True

    async def _first_usable(
        self,
        scope: Scope,
        expressions: ExpressionList,
        require_interactive: bool,
    ) -> Optional[ResolvedLocator]:
        for index, expression in enumerate(expressions):
            candidate = scope.locator(expression).first
            if await self._passes_gates(candidate, require_interactive):
                logger.debug(f"Resolved '{expression}' (fallback #{index})")
                return ResolvedLocator(candidate, expression, index)
        return None

    async def resolve_required(
        self,
        scope: Scope,
        expressions: Expressions,
        require_interactive: bool = False,
    ) -> ResolvedLocator:
        """
        Resolve the first usable element or fail.

        Args:
            scope: Page or locator to search within
            expressions: Ordered fallbacks (or a registry key)
            require_interactive: Also require the element to be enabled

        Returns:
            Handle to the first match of the first passing expression

        Raises:
            LocatorNotFoundError: If no expression yields a usable element
        """
        expression_list = self.expressions_for(expressions)
        resolved = await self._first_usable(scope, expression_list, require_interactive)
        if resolved is None:
            raise LocatorNotFoundError(expression_list, require_interactive=require_interactive)
        return resolved

    async def resolve_optional(
        self,
        scope: Scope,
        expressions: Expressions,
        require_interactive: bool = False,
    ) -> Optional[ResolvedLocator]:
        """Like resolve_required, but returns None when nothing is usable."""
        expression_list = self.expressions_for(expressions)
        resolved = await self._first_usable(scope, expression_list, require_interactive)
        if resolved is None:
            logger.debug(f"No visible element for: {', '.join(expression_list)}")
        return resolved

    # ==================== Collections ====================

    def resolve_collection(self, scope: Scope, expressions: Expressions) -> "Locator":
        """
        Lazy locator for every element matching any of the expressions.

        Nothing is queried until the caller awaits count(), all_text_contents()
        or similar on the returned locator. Matches come back in document order.
        """
        combined = union_query(self.expressions_for(expressions))
        return scope.locator(combined.selector)

    # ==================== Text ====================

    async def read_text(
        self,
        scope: Scope,
        expressions: Expressions,
        trim: bool = True,
    ) -> Optional[str]:
        """
        Read the text of the first visible element, or None.

        If the element goes stale between resolution and the read, it is
        re-resolved once and read again. A second failure returns None.

        Args:
            scope: Page or locator to search within
            expressions: Ordered fallbacks (or a registry key)
            trim: Strip leading/trailing whitespace
        """
        expression_list = self.expressions_for(expressions)
        resolved = await self.resolve_optional(scope, expression_list)
        if resolved is None:
            return None

        try:
            text = await resolved.locator.text_content()
        except PlaywrightError as e:
            logger.warning(f"Text read failed for '{resolved.expression}', re-resolving once: {e}")
            resolved = await self.resolve_optional(scope, expression_list)
            if resolved is None:
                return None
            try:
                text = await resolved.locator.text_content()
            except PlaywrightError as retry_error:
                logger.warning(f"Retry read failed for '{resolved.expression}': {retry_error}")
                return None

        return _clean_text(text, trim)

    async def read_texts(
        self,
        scope: Scope,
        expressions: Expressions,
        trim: bool = True,
    ) -> List[str]:
        """
        Batch-read the text of every element matching any expression.

        One round trip through the union locator; no per-element retry,
        so a failing read fails the whole call.
        """
        texts = await self.resolve_collection(scope, expressions).all_text_contents()
        if trim:
            return [text.strip() for text in texts]
        return list(texts)

    async def read_text_pairs(
        self,
        scope: Scope,
        left: Expressions,
        right: Expressions,
        strict: Optional[bool] = None,
        label: str = "paired read",
        trim: bool = True,
    ) -> List[Tuple[str, str]]:
        """
        Read two row-aligned columns concurrently and zip them.

        Args:
            scope: Page or row collection to search within
            left: Expressions for the first column
            right: Expressions for the second column
            strict: Raise on length mismatch; None uses the resolver default
            label: Call site name for the mismatch warning or error
            trim: Strip each entry

        Raises:
            CollectionMismatchError: On mismatch in strict mode
        """
        # Both reads are side-effect free. If one raises, gather propagates
        # that error and the other read is left to finish unobserved.
        left_texts, right_texts = await asyncio.gather(
            self.read_texts(scope, left, trim=trim),
            self.read_texts(scope, right, trim=trim),
        )
        return pair_columns(
            left_texts,
            right_texts,
            strict=self._strict_pairs if strict is None else strict,
            label=label,
        )
