"""
Catalog Pricing

Pure pricing rules shared by the storefront views:
- Discounted display price for a single product
- Total price of a PC build from its component products
- Whether a promotion is live at a given time
"""

import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Optional

from ..utils.dates import as_utc

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')


def to_money(value) -> Decimal:
    """Round to cents, half up."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def discounted_price(price, discount_percent) -> Optional[Decimal]:
    """Price after a percentage discount, or None when there is no discount."""
    if not discount_percent:
        return None
    factor = Decimal('1') - Decimal(str(discount_percent)) / Decimal('100')
    return to_money(Decimal(str(price)) * factor)


def build_total(components: Mapping[str, str], prices: Mapping[str, object]) -> Decimal:
    """Sum the current prices of the products a build references.

    Components pointing at products that no longer exist are skipped.
    """
    total = Decimal('0')
    for slot, product_id in components.items():
        price = prices.get(product_id)
        if price is None:
            logger.debug(f"Build slot {slot!r} references unknown product {product_id}")
            continue
        total += Decimal(str(price))
    return to_money(total)


def promotion_is_live(promotion, now: datetime) -> bool:
    if not promotion.is_active:
        return False
    now = as_utc(now)
    return as_utc(promotion.start_date) <= now <= as_utc(promotion.end_date)
