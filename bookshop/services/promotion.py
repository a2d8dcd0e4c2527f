# bookshop/services/promotion.py
# Pure derivations for slug and promotion tier.
# Nothing here touches the database; the write pipeline calls these
# explicitly instead of hiding them in attribute setters.

from typing import Optional, Tuple
from uuid import UUID

from bookshop.models.enums import PromotionStatus

SLUG_PREFIX = "book-"


def derive_slug(book_id: UUID) -> str:
    """Slug used when none is supplied on create. Never recomputed on update."""
    return f"{SLUG_PREFIX}{book_id}"


def derive_promotion_status(is_promoted: bool) -> PromotionStatus:
    """Basic when promoted, None otherwise. There is no path to Pro here."""
    return PromotionStatus.BASIC if is_promoted else PromotionStatus.NONE


def resolve_promotion(
    is_promoted: Optional[bool],
    promotion_status: Optional[PromotionStatus],
    current: Optional[PromotionStatus] = None,
) -> Tuple[PromotionStatus, bool]:
    """
    Decide the stored (promotion_status, is_promoted) pair for a write.

    Precedence:
      1. an explicit promotion_status
      2. is_promoted, through derive_promotion_status()
      3. the current status (update) or None (create)

    is_promoted is always returned as status != None so the two columns
    can never disagree.
    """
    if promotion_status is not None:
        status = PromotionStatus(promotion_status)
    elif is_promoted is not None:
        status = derive_promotion_status(is_promoted)
    else:
        status = current or PromotionStatus.NONE
    return status, status is not PromotionStatus.NONE
