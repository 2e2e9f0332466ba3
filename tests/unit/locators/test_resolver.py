"""
Tests for LocatorResolver - fallback resolution and text extraction.
"""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError

from storefront_qa.exceptions import CollectionMismatchError, LocatorNotFoundError
from storefront_qa.locators import LocatorResolver, SelectorRegistry
from tests.fakes import FakeElement, FakePage


LOGIN_BUTTON = ['[data-test="login-button"]', "#login-button", '[type="submit"]']


class TestResolveRequired:
    """Test required resolution."""

    @pytest.mark.asyncio
    async def test_first_passing_expression_wins(self, resolver):
        """Only #login-button exists; [type="submit"] must never be queried."""
        button = FakeElement("#login-button", '[type="submit"]', text="Login")
        page = FakePage(button)

        resolved = await resolver.resolve_required(page, LOGIN_BUTTON, require_interactive=True)

        assert resolved.expression == "#login-button"
        assert resolved.index == 1
        assert page.queries == ['[data-test="login-button"]', "#login-button"]
        await resolved.locator.click()
        assert button.clicks == 1

    @pytest.mark.asyncio
    async def test_earlier_expression_preferred(self, resolver):
        """When several expressions match, list order decides."""
        page = FakePage(
            FakeElement("#login-button", text="legacy"),
            FakeElement('[data-test="login-button"]', text="preferred"),
        )

        resolved = await resolver.resolve_required(page, LOGIN_BUTTON)

        assert resolved.index == 0
        assert await resolved.locator.text_content() == "preferred"
        assert page.queries == ['[data-test="login-button"]']

    @pytest.mark.asyncio
    async def test_hidden_match_falls_through(self, resolver):
        """A hidden first match does not count; the next expression is tried."""
        page = FakePage(
            FakeElement('[data-test="login-button"]', visible=False),
            FakeElement("#login-button"),
        )

        resolved = await resolver.resolve_required(page, LOGIN_BUTTON)

        assert resolved.expression == "#login-button"

    @pytest.mark.asyncio
    async def test_only_first_dom_match_is_checked(self, resolver):
        """A visible second match of the same expression is not considered."""
        page = FakePage(
            FakeElement(".row", visible=False),
            FakeElement(".row", text="visible"),
        )

        with pytest.raises(LocatorNotFoundError):
            await resolver.resolve_required(page, [".row"])

    @pytest.mark.asyncio
    async def test_disabled_element_skipped_when_interactive(self, resolver):
        """A visible but disabled element fails the interactivity gate."""
        page = FakePage(
            FakeElement('[data-test="login-button"]', enabled=False),
            FakeElement('[type="submit"]'),
        )

        resolved = await resolver.resolve_required(page, LOGIN_BUTTON, require_interactive=True)

        assert resolved.expression == '[type="submit"]'

    @pytest.mark.asyncio
    async def test_disabled_element_accepted_without_interactive(self, resolver):
        """Without the flag only visibility matters."""
        page = FakePage(FakeElement('[data-test="login-button"]', enabled=False))

        resolved = await resolver.resolve_required(page, LOGIN_BUTTON)

        assert resolved.index == 0

    @pytest.mark.asyncio
    async def test_gate_error_treated_as_failure(self, resolver):
        """A check that raises counts as not usable and is not propagated."""
        page = FakePage(
            FakeElement('[data-test="login-button"]', gate_error=True),
            FakeElement("#login-button"),
        )

        resolved = await resolver.resolve_required(page, LOGIN_BUTTON)

        assert resolved.expression == "#login-button"

    @pytest.mark.asyncio
    async def test_not_found_carries_expression_list(self, resolver):
        """The error names every expression tried."""
        page = FakePage(FakeElement(".unrelated"))

        with pytest.raises(LocatorNotFoundError) as exc_info:
            await resolver.resolve_required(page, LOGIN_BUTTON)

        assert exc_info.value.expressions == tuple(LOGIN_BUTTON)
        for expression in LOGIN_BUTTON:
            assert expression in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_scope_limits_search(self, resolver):
        """Resolution within a sub-element ignores matches outside it."""
        outside = FakeElement(".name", text="outside")
        inside = FakeElement(".name", text="inside")
        page = FakePage(outside, FakeElement(".card", children=[inside]))
        card = page.locator(".card")

        resolved = await resolver.resolve_required(card, [".name"])

        assert await resolved.locator.text_content() == "inside"

    @pytest.mark.asyncio
    async def test_registry_key(self, resolver):
        """Registry keys expand to their expression lists."""
        field = FakeElement("#user-name")
        page = FakePage(field)

        resolved = await resolver.resolve_required(page, "login.username")

        assert resolved.expression == "#user-name"
        assert page.queries == ['[data-test="username"]', "#user-name"]

    @pytest.mark.asyncio
    async def test_misspelled_registry_key_rejected(self, resolver):
        """A typo under a known group fails before anything is queried."""
        page = FakePage(FakeElement('[data-test="checkout"]'))

        with pytest.raises(KeyError, match="cart.checkout_buton"):
            await resolver.resolve_required(page, "cart.checkout_buton")

        assert page.queries == []

    @pytest.mark.asyncio
    async def test_dotted_css_outside_registry_groups(self, resolver):
        """A class selector whose prefix is not a group stays CSS."""
        page = FakePage(FakeElement("button.primary"))

        resolved = await resolver.resolve_required(page, "button.primary")

        assert resolved.expression == "button.primary"

    @pytest.mark.asyncio
    async def test_single_string_expression(self, resolver):
        """A bare selector string is a one-item list."""
        page = FakePage(FakeElement("#only"))

        resolved = await resolver.resolve_required(page, "#only")

        assert resolved.expression == "#only"

    @pytest.mark.asyncio
    async def test_empty_list_rejected(self, resolver):
        with pytest.raises(ValueError):
            await resolver.resolve_required(FakePage(), [])


class TestResolveOptional:
    """Test optional resolution."""

    @pytest.mark.asyncio
    async def test_absent_returns_none(self, resolver):
        page = FakePage()

        assert await resolver.resolve_optional(page, [".shopping_cart_badge"]) is None

    @pytest.mark.asyncio
    async def test_repeated_calls_resolve_same_element(self, resolver):
        """Two calls without page changes land on the same expression and node."""
        target = FakeElement("#login-button", text="Login")
        page = FakePage(FakeElement(".other"), target)

        first = await resolver.resolve_optional(page, LOGIN_BUTTON)
        second = await resolver.resolve_optional(page, LOGIN_BUTTON)

        assert first is not second
        assert (first.expression, first.index) == (second.expression, second.index)
        await first.locator.click()
        await second.locator.click()
        assert target.clicks == 2


class TestReadText:
    """Test single-value text reads."""

    @pytest.mark.asyncio
    async def test_trimmed_by_default(self, resolver):
        page = FakePage(FakeElement('[data-test="error"]', text="  Epic sadface  \n"))

        assert await resolver.read_text(page, "login.error") == "Epic sadface"

    @pytest.mark.asyncio
    async def test_untrimmed(self, resolver):
        page = FakePage(FakeElement('[data-test="error"]', text="  Epic sadface  \n"))

        assert await resolver.read_text(page, "login.error", trim=False) == "  Epic sadface  \n"

    @pytest.mark.asyncio
    async def test_absent_returns_none(self, resolver):
        assert await resolver.read_text(FakePage(), "login.error") is None

    @pytest.mark.asyncio
    async def test_stale_read_retried_once(self, resolver, caplog):
        """A detach between gate and read is recovered by one re-resolve."""
        element = FakeElement('[data-test="error"]', text=" Locked out ", stale_reads=1)
        page = FakePage(element)

        with caplog.at_level(logging.WARNING):
            text = await resolver.read_text(page, "login.error")

        assert text == "Locked out"
        assert element.text_reads == 2
        assert page.queries == ['[data-test="error"]', '[data-test="error"]']
        assert "re-resolving" in caplog.text

    @pytest.mark.asyncio
    async def test_second_stale_read_returns_none(self, resolver):
        """If the retry also fails the result is None, never the error."""
        element = FakeElement('[data-test="error"]', text="x", stale_reads=5)

        assert await resolver.read_text(FakePage(element), "login.error") is None
        assert element.text_reads == 2

    @pytest.mark.asyncio
    async def test_none_text_stays_none(self, resolver):
        page = FakePage(FakeElement("#empty", text=None))

        assert await resolver.read_text(page, "#empty") is None


class TestReadTexts:
    """Test batch text reads."""

    @pytest.mark.asyncio
    async def test_document_order_across_expressions(self, resolver):
        """Results follow the page, not the expression list."""
        page = FakePage(
            FakeElement(".inventory_item_name", text=" Bike Light "),
            FakeElement('[data-test="inventory-item-name"]', text=" Backpack "),
            FakeElement(".inventory_item_name", text="Onesie"),
        )

        names = await resolver.read_texts(page, "products.item_name")

        assert names == ["Bike Light", "Backpack", "Onesie"]
        assert page.queries == ['[data-test="inventory-item-name"],.inventory_item_name']

    @pytest.mark.asyncio
    async def test_element_matching_two_expressions_read_once(self, resolver):
        page = FakePage(
            FakeElement('[data-test="inventory-item-name"]', ".inventory_item_name", text="Backpack"),
        )

        assert await resolver.read_texts(page, "products.item_name") == ["Backpack"]

    @pytest.mark.asyncio
    async def test_untrimmed(self, resolver):
        page = FakePage(FakeElement(".price", text=" $9.99 "), FakeElement(".price", text="$7.99\n"))

        assert await resolver.read_texts(page, [".price"], trim=False) == [" $9.99 ", "$7.99\n"]

    @pytest.mark.asyncio
    async def test_no_matches(self, resolver):
        assert await resolver.read_texts(FakePage(), [".price"]) == []

    def test_collection_is_lazy(self, resolver):
        """Building the collection queries nothing until it is awaited."""
        page = FakePage(FakeElement(".a"))

        collection = resolver.resolve_collection(page, [".a", ".b", ".a"])

        assert collection.selector == ".a,.b"
        assert page.queries == [".a,.b"]


class TestReadTextPairs:
    """Test row-aligned paired reads."""

    @staticmethod
    def _page(names: int, prices: int) -> FakePage:
        elements = [FakeElement(".name", text=f"item {i}") for i in range(names)]
        elements += [FakeElement(".price", text=f"${i}.99") for i in range(prices)]
        return FakePage(*elements)

    @pytest.mark.asyncio
    async def test_equal_lengths(self, resolver):
        pairs = await resolver.read_text_pairs(self._page(2, 2), [".name"], [".price"])

        assert pairs == [("item 0", "$0.99"), ("item 1", "$1.99")]

    @pytest.mark.asyncio
    async def test_mismatch_truncates_and_warns(self, resolver, caplog):
        with caplog.at_level(logging.WARNING):
            pairs = await resolver.read_text_pairs(
                self._page(3, 2), [".name"], [".price"], label="cart rows"
            )

        assert len(pairs) == 2
        assert "cart rows: mismatched counts: 3 vs 2" in caplog.text

    @pytest.mark.asyncio
    async def test_mismatch_strict_raises(self, resolver):
        with pytest.raises(CollectionMismatchError) as exc_info:
            await resolver.read_text_pairs(self._page(3, 2), [".name"], [".price"], strict=True)

        assert exc_info.value.left_count == 3
        assert exc_info.value.right_count == 2

    @pytest.mark.asyncio
    async def test_failed_column_read_propagates(self, resolver, caplog):
        """A failure in either column fails the whole paired read."""
        names = MagicMock()
        names.all_text_contents = AsyncMock(side_effect=PlaywrightError("Target page closed"))
        prices = MagicMock()
        prices.all_text_contents = AsyncMock(return_value=["$9.99"])
        scope = MagicMock()
        scope.locator.side_effect = lambda selector: names if selector == ".name" else prices

        with caplog.at_level(logging.WARNING):
            with pytest.raises(PlaywrightError, match="Target page closed"):
                await resolver.read_text_pairs(scope, [".name"], [".price"])

        assert "mismatched counts" not in caplog.text

    @pytest.mark.asyncio
    async def test_resolver_default_policy(self, registry):
        """strict=None falls back to the resolver's configured policy."""
        strict_resolver = LocatorResolver(registry=registry, strict_pairs=True)

        with pytest.raises(CollectionMismatchError):
            await strict_resolver.read_text_pairs(self._page(3, 2), [".name"], [".price"])

        pairs = await strict_resolver.read_text_pairs(
            self._page(3, 2), [".name"], [".price"], strict=False
        )
        assert len(pairs) == 2


class TestConstruction:
    """Test resolver construction."""

    def test_from_settings(self, settings):
        settings = settings.merge_with({"locators": {"strict_pairs": True}})

        resolver = LocatorResolver.from_settings(settings)

        assert resolver.strict_pairs is True

    def test_custom_registry(self):
        registry = SelectorRegistry.from_mapping({"search": {"box": ["#q", "input[name=q]"]}})
        resolver = LocatorResolver(registry=registry)

        assert resolver.expressions_for("search.box") == ("#q", "input[name=q]")
        assert resolver.expressions_for("login.username") == ("login.username",)
        with pytest.raises(KeyError):
            resolver.expressions_for("search.bx")
