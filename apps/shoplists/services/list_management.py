"""
Shoplist management service.

Handles shoplist creation, renaming and read access with proper
transaction safety.
"""

import logging

from django.db import transaction, DatabaseError
from django.db.models import Prefetch, QuerySet

from apps.accounts.models import User
from apps.shoplists.models import Shoplist, ShoplistItem, ShoplistMembership

from .exceptions import (
    ShoplistCreateError,
    ShoplistNotFoundError,
    ShoplistNotOwnedError,
    ShoplistUpdateError,
)
from .membership_query import require_membership

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    name = (name or '').strip()
    if not name:
        raise ValueError("Shoplist name is required")
    return name


def create_shoplist(*, owner: User, name: str) -> Shoplist:
    """
    Create a new shoplist and add the creator as its first member.

    Both rows are written in one transaction:
    1. Create the shoplist owned by owner
    2. Create owner membership

    Args:
        owner: User who will own the shoplist
        name: Shoplist name

    Returns:
        Created Shoplist instance

    Raises:
        ValueError: If name is empty
        ShoplistCreateError: If either row could not be written
    """
    name = _clean_name(name)

    try:
        with transaction.atomic():
            shoplist = Shoplist.objects.create(name=name, owner=owner)
            ShoplistMembership.objects.create(shoplist=shoplist, user=owner)
    except DatabaseError as exc:
        logger.warning("Failed to create shoplist for user %s: %s", owner.pk, exc)
        raise ShoplistCreateError() from exc

    logger.info("Shoplist %s created by user %s", shoplist.id, owner.pk)
    return shoplist


def rename_shoplist(*, shoplist_id: int, user: User, name: str) -> Shoplist:
    """
    Rename a shoplist (owner only).

    Args:
        shoplist_id: ID of the shoplist
        user: User performing the rename (must be owner)
        name: New name

    Returns:
        Updated Shoplist instance

    Raises:
        ValueError: If name is empty
        ShoplistNotFoundError: If shoplist doesn't exist or user is not a member
        ShoplistNotOwnedError: If user is a member but not the owner
        ShoplistUpdateError: If the update could not be written
    """
    name = _clean_name(name)
    membership = require_membership(shoplist_id=shoplist_id, user=user)

    if not membership.is_owner(user):
        raise ShoplistNotOwnedError()

    shoplist = membership.shoplist
    shoplist.name = name
    try:
        shoplist.save(update_fields=['name', 'updated_at'])
    except DatabaseError as exc:
        logger.warning("Failed to rename shoplist %s: %s", shoplist_id, exc)
        raise ShoplistUpdateError() from exc

    return shoplist


def get_shoplist(*, shoplist_id: int, user: User) -> Shoplist:
    """
    Get a shoplist with its items and members (member only).

    Items are ordered by id, members by join time.

    Raises:
        ShoplistNotFoundError: If shoplist doesn't exist or user is not a member
    """
    require_membership(shoplist_id=shoplist_id, user=user)

    try:
        return (
            Shoplist.objects
            .select_related('owner')
            .prefetch_related(
                Prefetch('items', queryset=ShoplistItem.objects.order_by('id')),
                Prefetch(
                    'memberships',
                    queryset=ShoplistMembership.objects.select_related('user').order_by('joined_at', 'id')
                ),
            )
            .get(id=shoplist_id)
        )
    except Shoplist.DoesNotExist:
        # Dissolved between the membership check and this read
        raise ShoplistNotFoundError(f"Shoplist with ID {shoplist_id} not found")


def get_user_shoplists(*, user: User) -> QuerySet[Shoplist]:
    """All shoplists the user collaborates on with their items, ordered by id."""
    return (
        Shoplist.objects
        .filter(memberships__user=user)
        .select_related('owner')
        .prefetch_related(Prefetch('items', queryset=ShoplistItem.objects.order_by('id')))
        .order_by('id')
    )


def get_shoplist_members(*, shoplist_id: int, user: User) -> QuerySet[ShoplistMembership]:
    """
    Get the members of a shoplist the user belongs to.

    Raises:
        ShoplistNotFoundError: If shoplist doesn't exist or user is not a member
    """
    require_membership(shoplist_id=shoplist_id, user=user)

    return (
        ShoplistMembership.objects
        .filter(shoplist_id=shoplist_id)
        .select_related('user')
        .order_by('joined_at', 'id')
    )
