"""
Membership management service.

Handles joining a shoplist through a share code and leaving it. Leaving
is a small state machine: the last member dissolves the shoplist, an
owner hands ownership to the earliest-joined remaining member, anyone
else simply departs.
"""

import logging

from django.db import transaction, DatabaseError, IntegrityError
from django.utils import timezone

from apps.accounts.models import User
from apps.shoplists.models import (
    LeaveOutcome,
    Shoplist,
    ShoplistItem,
    ShoplistMembership,
    ShoplistShareCode,
)

from .exceptions import (
    AlreadyMemberError,
    InvalidShareCodeError,
    ShoplistProcessError,
)
from .membership_query import is_member, require_membership

logger = logging.getLogger(__name__)


def _remove_membership(shoplist_id: int, user: User) -> None:
    ShoplistMembership.objects.filter(shoplist_id=shoplist_id, user=user).delete()


def _dissolve_shoplist(shoplist_id: int, user: User) -> None:
    # Dependent rows are removed explicitly, inside the caller's transaction
    _remove_membership(shoplist_id, user)
    ShoplistShareCode.objects.filter(shoplist_id=shoplist_id).delete()
    ShoplistItem.objects.filter(shoplist_id=shoplist_id).delete()
    Shoplist.objects.filter(id=shoplist_id).delete()


def leave_shoplist(*, shoplist_id: int, user: User) -> str:
    """
    Leave a shoplist.

    The shoplist row is locked with select_for_update before the member
    set is read, so concurrent departures see each other's effects
    instead of deciding on a stale member count.

    Outcomes, in evaluation order:
    1. Only member left: membership, share code, items and the
       shoplist itself are deleted
    2. Owner with other members: ownership moves to the
       earliest-joined remaining member, then the membership is removed
    3. Otherwise: only the membership is removed

    Args:
        shoplist_id: ID of the shoplist
        user: User leaving the shoplist

    Returns:
        LeaveOutcome value describing which branch ran

    Raises:
        ShoplistNotFoundError: If shoplist doesn't exist or user is not a member
        ShoplistProcessError: If the change could not be written (nothing
            is applied in that case)
    """
    try:
        with transaction.atomic():
            membership = require_membership(
                shoplist_id=shoplist_id,
                user=user,
                for_update=True
            )

            if len(membership.members) == 1:
                _dissolve_shoplist(shoplist_id, user)
                outcome = LeaveOutcome.DISSOLVED

            elif membership.is_owner(user):
                new_owner_id = membership.other_member_ids(user)[0]
                Shoplist.objects.filter(id=shoplist_id).update(
                    owner_id=new_owner_id,
                    updated_at=timezone.now()
                )
                _remove_membership(shoplist_id, user)
                outcome = LeaveOutcome.OWNERSHIP_TRANSFERRED

            else:
                _remove_membership(shoplist_id, user)
                outcome = LeaveOutcome.LEFT

    except DatabaseError as exc:
        logger.warning("User %s failed to leave shoplist %s: %s", user.pk, shoplist_id, exc)
        raise ShoplistProcessError("Failed to leave shoplist") from exc

    if outcome == LeaveOutcome.DISSOLVED:
        logger.info("Shoplist %s dissolved after last member %s left", shoplist_id, user.pk)
    elif outcome == LeaveOutcome.OWNERSHIP_TRANSFERRED:
        logger.info(
            "Ownership of shoplist %s transferred from %s to %s",
            shoplist_id, user.pk, new_owner_id
        )
    else:
        logger.info("User %s left shoplist %s", user.pk, shoplist_id)

    return outcome


def join_shoplist(*, user: User, code: str) -> ShoplistMembership:
    """
    Join a shoplist using a share code.

    The code is matched exactly against active codes. Redeeming does
    not consume the code: it stays valid for other invitees until it
    expires or is revoked.

    Args:
        user: User joining the shoplist
        code: Share code text

    Returns:
        Created ShoplistMembership instance

    Raises:
        InvalidShareCodeError: If the code is unknown, expired or revoked
        AlreadyMemberError: If user is already a member (also caught from
            IntegrityError)
        ShoplistProcessError: If the membership could not be written
    """
    code = code or ''

    try:
        with transaction.atomic():
            share_code = (
                ShoplistShareCode.objects
                .select_for_update()
                .active()
                .filter(code=code)
                .first()
            )
            if share_code is None:
                raise InvalidShareCodeError()

            shoplist_id = share_code.shoplist_id

            if is_member(shoplist_id=shoplist_id, user=user):
                raise AlreadyMemberError()

            try:
                membership = ShoplistMembership.objects.create(
                    shoplist_id=shoplist_id,
                    user=user
                )
            except IntegrityError:
                # Unique pair constraint caught a concurrent join
                raise AlreadyMemberError()

    except DatabaseError as exc:
        logger.warning("User %s failed to join with share code: %s", user.pk, exc)
        raise ShoplistProcessError("Failed to join shoplist") from exc

    logger.info("User %s joined shoplist %s", user.pk, shoplist_id)
    return membership
