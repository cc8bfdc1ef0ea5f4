"""Abandoned cart service."""

import logging
from dataclasses import dataclass, field

from cartrelay.marketing import marketing
from cartrelay.marketing.backends import CartMergeFields, union_tags
from cartrelay.marketing.exceptions import MarketingError
from cartrelay.tools.email import split_name

logger = logging.getLogger(__name__)

ABANDONED_CART_TAG = "Abandoned Cart"


@dataclass
class CartItem:
    """A product left in a cart."""

    name: str
    quantity: int
    price: float


@dataclass
class AbandonedCart:
    """A cart left by a customer before checkout."""

    customer_name: str
    email: str
    cart_id: str
    items: list[CartItem]
    total_price: float
    abandoned_at: str
    return_url: str
    tags: list[str] = field(default_factory=lambda: [ABANDONED_CART_TAG])


def format_amount(value) -> str:
    """Render a number the way the storefront does, `10` rather than `10.0`."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def format_cart_items(items) -> str:
    """Render cart items as `Shoe (2) - $9.5, Hat (1) - $12`."""
    return ", ".join(f"{item.name} ({item.quantity}) - ${format_amount(item.price)}" for item in items)


class AbandonedCartService:
    """Record abandoned carts on the audience member of the customer."""

    def __init__(self, marketing_backend=None, timeout: int | None = None):
        """Use the configured marketing backend unless another one is given."""
        self.marketing = marketing if marketing_backend is None else marketing_backend
        self.timeout = timeout

    def record_abandoned_cart(self, cart: AbandonedCart) -> dict:
        """
        Store the cart in the merge fields of the member and tag it.

        The member must already exist. Existing tags are fetched first so the
        complete set of tags is sent, never a delta.

        Returns:
            dict: The marketing platform response to the member update

        """
        try:
            existing_tags = self.marketing.get_tags(cart.email, timeout=self.timeout)
            logger.info("Existing tags for %s: %s", cart.email, existing_tags)

            first_name, last_name = split_name(cart.customer_name)
            merge_fields = CartMergeFields(
                first_name=first_name,
                last_name=last_name,
                cart_id=cart.cart_id,
                cart_items=format_cart_items(cart.items),
                total_price=format_amount(cart.total_price),
                abandoned_at=cart.abandoned_at,
                return_url=cart.return_url,
            )
            tags = union_tags(existing_tags, cart.tags)

            response = self.marketing.update_subscriber(cart.email, merge_fields.as_dict(), tags, timeout=self.timeout)
            logger.info("Successfully updated abandoned cart for %s in Mailchimp", cart.email)
            logger.debug("Merge fields sent: %s, tags sent: %s", merge_fields.as_dict(), tags)

            final_tags = self.marketing.get_tags(cart.email, timeout=self.timeout)
            logger.info("Final tags for %s: %s", cart.email, final_tags)
        except MarketingError as err:
            logger.error("Failed to update abandoned cart in Mailchimp: %s", err)
            raise

        return response
