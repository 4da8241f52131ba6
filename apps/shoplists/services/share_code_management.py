"""
Share code management service.

Handles issuing and revoking the time-boxed codes that let new
collaborators join a shoplist. Uniqueness among live codes is enforced
by the unique ``code`` column; a collision surfaces as IntegrityError
and is retried with a fresh candidate.
"""

import logging
import secrets
import string
from datetime import timedelta
from typing import Optional

from django.conf import settings
from django.db import transaction, DatabaseError, IntegrityError
from django.utils import timezone

from apps.accounts.models import User
from apps.shoplists.models import ShoplistShareCode

from .exceptions import (
    NotOwnerError,
    ShoplistProcessError,
)
from .membership_query import require_membership

logger = logging.getLogger(__name__)

SHARE_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_share_code(length: Optional[int] = None) -> str:
    """Random code drawn from upper-case letters and digits."""
    length = length or settings.SHOPLIST_SHARE_CODE_LENGTH
    return ''.join(secrets.choice(SHARE_CODE_ALPHABET) for _ in range(length))


def request_share_code(
    *,
    shoplist_id: int,
    user: User,
    max_retries: Optional[int] = None
) -> ShoplistShareCode:
    """
    Issue a new share code for a shoplist (owner only).

    Any previous code for the shoplist is replaced. Each candidate is
    written inside its own savepoint:
    1. Clear expired rows still holding the candidate text
    2. Insert or replace the shoplist's code row
    3. On IntegrityError (a live code has the same text) retry

    Args:
        shoplist_id: ID of the shoplist
        user: User requesting the code (must be owner)
        max_retries: Maximum attempts to generate a unique code

    Returns:
        The shoplist's ShoplistShareCode with code and expires_at

    Raises:
        ShoplistNotFoundError: If shoplist doesn't exist or user is not a member
        NotOwnerError: If user is not the owner
        ShoplistProcessError: If no unique code could be stored
    """
    max_retries = max_retries or settings.SHOPLIST_SHARE_CODE_MAX_RETRIES
    ttl = timedelta(hours=settings.SHOPLIST_SHARE_CODE_TTL_HOURS)

    try:
        with transaction.atomic():
            # Lock the shoplist so it cannot be dissolved mid-issue
            membership = require_membership(
                shoplist_id=shoplist_id,
                user=user,
                for_update=True
            )
            if not membership.is_owner(user):
                raise NotOwnerError()

            for attempt in range(max_retries):
                candidate = generate_share_code()
                now = timezone.now()

                try:
                    with transaction.atomic():
                        ShoplistShareCode.objects.expired(now).filter(code=candidate).delete()
                        share_code, _ = ShoplistShareCode.objects.update_or_create(
                            shoplist_id=shoplist_id,
                            defaults={
                                'code': candidate,
                                'expires_at': now + ttl,
                            }
                        )
                except IntegrityError:
                    logger.warning(
                        "Share code collision for shoplist %s (attempt %d/%d)",
                        shoplist_id, attempt + 1, max_retries
                    )
                    continue

                logger.info("Share code issued for shoplist %s, expires %s", shoplist_id, share_code.expires_at)
                return share_code

    except DatabaseError as exc:
        logger.warning("Failed to issue share code for shoplist %s: %s", shoplist_id, exc)
        raise ShoplistProcessError("Failed to generate share code") from exc

    raise ShoplistProcessError(
        f"Failed to generate unique share code after {max_retries} attempts"
    )


def revoke_share_code(*, shoplist_id: int, user: User) -> None:
    """
    Revoke the shoplist's active share code (owner only).

    The code's expiry is set to now, so joins are rejected from this
    instant on.

    Raises:
        ShoplistNotFoundError: If shoplist doesn't exist or user is not a member
        NotOwnerError: If user is not the owner
        ShoplistProcessError: If there is no active code or the update failed
    """
    membership = require_membership(shoplist_id=shoplist_id, user=user)
    if not membership.is_owner(user):
        raise NotOwnerError()

    now = timezone.now()
    try:
        revoked = (
            ShoplistShareCode.objects
            .active(now)
            .filter(shoplist_id=shoplist_id)
            .update(expires_at=now)
        )
    except DatabaseError as exc:
        logger.warning("Failed to revoke share code for shoplist %s: %s", shoplist_id, exc)
        raise ShoplistProcessError("Failed to revoke share code") from exc

    if not revoked:
        raise ShoplistProcessError("Failed to find active share code")

    logger.info("Share code for shoplist %s revoked", shoplist_id)


def get_active_share_code(*, shoplist_id: int, user: User) -> Optional[ShoplistShareCode]:
    """
    Get the shoplist's current share code, if one is active (member only).

    Raises:
        ShoplistNotFoundError: If shoplist doesn't exist or user is not a member
    """
    require_membership(shoplist_id=shoplist_id, user=user)

    return (
        ShoplistShareCode.objects
        .active()
        .filter(shoplist_id=shoplist_id)
        .first()
    )
