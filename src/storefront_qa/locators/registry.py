"""
Selector Registry - named, ordered locator expression lists.

Conventions:
- Prefer ``[data-test="..."]`` first when available, then legacy classes/ids.
- Order matters: earlier expressions are tried first by the resolver.
- Keep expressions narrowly scoped to reduce false positives.

The registry is frozen once built. Lists are stored as tuples and the
groups behind read-only mapping proxies, so one instance can be shared by
every page object and every concurrent read.

Example:
    >>> from storefront_qa.locators import DEFAULT_REGISTRY
    >>> DEFAULT_REGISTRY.get("login.username")
    ('[data-test="username"]', '#user-name')
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

from storefront_qa.exceptions import ConfigurationError
from storefront_qa.locators.slugify import slugify_item_name

ExpressionList = Tuple[str, ...]


def to_expression_list(expressions: Union[str, Sequence[str]]) -> ExpressionList:
    """Normalize a single expression or a sequence of them to a tuple."""
    if isinstance(expressions, str):
        return (expressions,)
    return tuple(expressions)


@dataclass(frozen=True)
class ProductMeta:
    """
    One row of the product metadata table.

    Attributes:
        key: Short id used by tests (e.g. 'backpack')
        display_name: Name as rendered in the catalog
        price: Price as rendered, currency sign included
        description: Catalog description
        slug: data-test slug; derived from display_name when omitted
    """
    key: str
    display_name: str
    price: str
    description: str = ""
    slug: Optional[str] = None

    @property
    def data_test_slug(self) -> str:
        return self.slug or slugify_item_name(self.display_name)


@dataclass(frozen=True)
class ProductSelectors:
    """Per-product expression lists plus the human-readable metadata."""
    add_to_cart: ExpressionList
    remove_from_cart: ExpressionList
    image: ExpressionList
    display_name: str
    price: str
    description: str


def build_product_selectors(meta: ProductMeta) -> ProductSelectors:
    """
    Derive the concrete expression lists for one product.

    The product-specific data-test expression comes first; the generic
    button/image classes are last-resort fallbacks.
    """
    slug = meta.data_test_slug
    return ProductSelectors(
        add_to_cart=(
            f'button[data-test="add-to-cart-{slug}"]',
            ".btn.btn_primary.btn_small.btn_inventory",
        ),
        remove_from_cart=(
            f'button[data-test="remove-{slug}"]',
            ".btn.btn_secondary.btn_small.btn_inventory",
        ),
        image=(
            f'img[data-test="inventory-item-{slug}-img"]',
            ".inventory_item_img",
        ),
        display_name=meta.display_name,
        price=meta.price,
        description=meta.description,
    )


class SelectorRegistry:
    """
    Immutable lookup of expression lists by ``"group.name"`` key.

    Build it once (usually via from_mapping) and inject it into the
    resolver; nothing mutates it afterwards.
    """

    def __init__(
        self,
        groups: Mapping[str, Mapping[str, ExpressionList]],
        products: Mapping[str, ProductSelectors],
    ):
        self._groups = MappingProxyType({
            group: MappingProxyType(dict(entries)) for group, entries in groups.items()
        })
        self._products = MappingProxyType(dict(products))

    @classmethod
    def from_mapping(
        cls,
        groups: Mapping[str, Mapping[str, Union[str, Sequence[str]]]],
        products: Iterable[ProductMeta] = (),
    ) -> "SelectorRegistry":
        """
        Build a registry from plain dicts/lists.

        Args:
            groups: {group: {name: expression or [expressions]}}
            products: Product metadata rows

        Raises:
            ConfigurationError: If an entry has no expressions or a product key repeats
        """
        normalized: Dict[str, Dict[str, ExpressionList]] = {}
        for group, entries in groups.items():
            normalized[group] = {}
            for name, expressions in entries.items():
                expression_list = to_expression_list(expressions)
                if not expression_list or not all(expression_list):
                    raise ConfigurationError(
                        f"Selector '{group}.{name}' needs at least one non-empty expression",
                        {"key": f"{group}.{name}"},
                    )
                normalized[group][name] = expression_list

        product_selectors: Dict[str, ProductSelectors] = {}
        for meta in products:
            if meta.key in product_selectors:
                raise ConfigurationError(
                    f"Duplicate product key '{meta.key}'", {"key": meta.key}
                )
            product_selectors[meta.key] = build_product_selectors(meta)

        return cls(normalized, product_selectors)

    def get(self, key: str) -> ExpressionList:
        """
        Look up an expression list.

        Args:
            key: Dotted key, e.g. 'cart.checkout_button'

        Raises:
            KeyError: If the key is unknown
        """
        group, _, name = key.partition(".")
        try:
            return self._groups[group][name]
        except KeyError:
            raise KeyError(f"Unknown selector key: {key}") from None

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        group, _, name = key.partition(".")
        return name in self._groups.get(group, {})

    def has_group(self, group: str) -> bool:
        return group in self._groups

    def keys(self) -> Tuple[str, ...]:
        return tuple(
            f"{group}.{name}" for group, entries in self._groups.items() for name in entries
        )

    def product(self, key: str) -> ProductSelectors:
        """Per-product selectors; raises KeyError for unknown products."""
        try:
            return self._products[key]
        except KeyError:
            raise KeyError(f"Unknown product key: {key}") from None

    @property
    def product_keys(self) -> Tuple[str, ...]:
        return tuple(self._products)


SAUCEDEMO_SELECTORS: Dict[str, Dict[str, Union[str, Sequence[str]]]] = {
    # Login page controls and error banner
    "login": {
        "username": ['[data-test="username"]', "#user-name"],
        "password": ['[data-test="password"]', "#password"],
        "login_button": ['[data-test="login-button"]', "#login-button", '[type="submit"]'],
        "error": ['[data-test="error"]'],
    },
    # Inventory (product grid); name/price/description also apply on the details page
    "products": {
        "list": ['[data-test="inventory-list"]', ".inventory_list"],
        "item": ['[data-test="inventory-item"]', ".inventory_item"],
        "item_name": ['[data-test="inventory-item-name"]', ".inventory_item_name"],
        "item_description": ['[data-test="inventory-item-desc"]', ".inventory_item_desc"],
        "item_price": ['[data-test="inventory-item-price"]', ".inventory_item_price"],
        "sort_dropdown": ['select[data-test="product-sort-container"]', ".product_sort_container"],
        "active_sort_label": ['[data-test="active-option"]'],
    },
    # Cart page and the header cart affordances
    "cart": {
        "cart_item": [".cart_item", '[data-test="inventory-item"]'],
        "cart_link": [".shopping_cart_link", '[data-test="shopping-cart-link"]'],
        # absent when the cart is empty
        "cart_badge": [".shopping_cart_badge"],
        "cart_quantity": [".cart_quantity"],
        "continue_shopping_button": ['[data-test="continue-shopping"]'],
        "checkout_button": ['[data-test="checkout"]'],
    },
    # Checkout step one (Your Information)
    "checkout_info": {
        "first_name": ['[data-test="firstName"]'],
        "last_name": ['[data-test="lastName"]'],
        "postal_code": ['[data-test="postalCode"]'],
        "continue_button": ['[data-test="continue"]'],
        "cancel_button": ['[data-test="cancel"]'],
        "error": ['[data-test="error"]'],
        "error_close_button": ['[data-test="error-button"]', ".error-button"],
    },
    # Checkout step two (Overview) and the completion screen
    "checkout_overview": {
        "payment_info_label": ['[data-test="payment-info-label"]'],
        "payment_info_value": ['[data-test="payment-info-value"]'],
        "shipping_info_label": ['[data-test="shipping-info-label"]'],
        "shipping_info_value": ['[data-test="shipping-info-value"]'],
        "total_info_label": ['[data-test="total-info-label"]'],
        "item_subtotal": ['[data-test="subtotal-label"]'],
        "item_tax": ['[data-test="tax-label"]'],
        "item_total": ['[data-test="total-label"]'],
        "finish_button": ['[data-test="finish"]'],
        "complete_header": ['[data-test="complete-header"]'],
        "complete_text": ['[data-test="complete-text"]'],
        "back_home_button": ['[data-test="back-to-products"]'],
    },
    # Header title, burger menu and footer
    "navigation": {
        "title": [".title", '[data-test="title"]'],
        "burger_menu_button": ["#react-burger-menu-btn", 'button[data-test="open-menu"]'],
        "close_menu": ["#react-burger-cross-btn", '[data-test="close-menu"]'],
        "all_items": ['[data-test="inventory-sidebar-link"]'],
        "about": ['[data-test="about-sidebar-link"]'],
        "logout": ['[data-test="logout-sidebar-link"]'],
        "reset_app_state": ['[data-test="reset-sidebar-link"]'],
        "footer": ['[data-test="footer"]'],
        "twitter_link": ['[data-test="social-twitter"]'],
        "facebook_link": ['[data-test="social-facebook"]'],
        "linkedin_link": ['[data-test="social-linkedin"]'],
        "footer_copyright": ['[data-test="footer-copy"]'],
    },
}

SAUCEDEMO_PRODUCTS: Tuple[ProductMeta, ...] = (
    ProductMeta(
        key="backpack",
        display_name="Sauce Labs Backpack",
        price="$29.99",
        description=(
            "carry.allTheThings() with the sleek, streamlined Sly Pack that melds uncompromising "
            "style with unequaled laptop and tablet protection."
        ),
    ),
    ProductMeta(
        key="bike",
        display_name="Sauce Labs Bike Light",
        price="$9.99",
        description=(
            "A red light isn't the desired state in testing but it sure helps when riding your "
            "bike at night. Water-resistant with 3 lighting modes, 1 AAA battery included."
        ),
    ),
    ProductMeta(
        key="bolt",
        display_name="Sauce Labs Bolt T-Shirt",
        price="$15.99",
        description=(
            "Get your testing superhero on with the Sauce Labs bolt T-shirt. From American "
            "Apparel, 100% ringspun combed cotton, heather gray with red bolt."
        ),
    ),
    ProductMeta(
        key="jacket",
        display_name="Sauce Labs Fleece Jacket",
        price="$49.99",
        description=(
            "It's not every day that you come across a midweight quarter-zip fleece jacket "
            "capable of handling everything from a relaxing day outdoors to a busy day at the "
            "office."
        ),
    ),
    ProductMeta(
        key="onesie",
        display_name="Sauce Labs Onesie",
        price="$7.99",
        description=(
            "Rib snap infant onesie for the junior automation engineer in development. "
            "Reinforced 3-snap bottom closure, two-needle hemmed sleeved and bottom won't unravel."
        ),
    ),
    # The storefront keeps punctuation in this slug, so it cannot be derived.
    ProductMeta(
        key="tshirt",
        display_name="Test.allTheThings() T-Shirt (Red)",
        price="$15.99",
        description=(
            "This classic Sauce Labs t-shirt is perfect to wear when cozying up to your keyboard "
            "to automate a few tests. Super-soft and comfy, made from 100% ringspun combed cotton."
        ),
        slug="test.allthethings()-t-shirt-(red)",
    ),
)

DEFAULT_REGISTRY = SelectorRegistry.from_mapping(SAUCEDEMO_SELECTORS, SAUCEDEMO_PRODUCTS)
