"""
Item management service.

Handles entries on a shoplist. Every operation is gated on the caller
being a member of the shoplist; items carry no other invariants.
"""

from typing import Optional

from django.db import transaction, DatabaseError

from apps.accounts.models import User
from apps.shoplists.models import ShoplistItem

from .exceptions import (
    ItemNameEmptyError,
    ItemNotFoundError,
    NotMemberError,
    ShoplistCreateError,
    ShoplistNotFoundError,
    ShoplistProcessError,
)
from .membership_query import is_member


def add_item(
    *,
    shoplist_id: int,
    user: User,
    item_name: str,
    brand_name: str = '',
    extra_info: str = '',
    thumbnail: str = ''
) -> ShoplistItem:
    """
    Add an item to a shoplist (member only).

    Raises:
        ShoplistNotFoundError: If shoplist doesn't exist or user is not a member
        ItemNameEmptyError: If item_name is empty
        ShoplistCreateError: If the item could not be written
    """
    if not is_member(shoplist_id=shoplist_id, user=user):
        raise ShoplistNotFoundError(f"Shoplist with ID {shoplist_id} not found")

    item_name = (item_name or '').strip()
    if not item_name:
        raise ItemNameEmptyError()

    try:
        return ShoplistItem.objects.create(
            shoplist_id=shoplist_id,
            item_name=item_name,
            brand_name=brand_name,
            extra_info=extra_info,
            thumbnail=thumbnail,
        )
    except DatabaseError as exc:
        raise ShoplistCreateError("Failed to add item.") from exc


def _get_item_for_member(shoplist_id: int, item_id: int, user: User, lock: bool = False) -> ShoplistItem:
    if not is_member(shoplist_id=shoplist_id, user=user):
        raise NotMemberError()

    queryset = ShoplistItem.objects.all()
    if lock:
        queryset = queryset.select_for_update()

    try:
        return queryset.get(id=item_id, shoplist_id=shoplist_id)
    except ShoplistItem.DoesNotExist:
        raise ItemNotFoundError()


@transaction.atomic
def update_item(
    *,
    shoplist_id: int,
    item_id: int,
    user: User,
    item_name: Optional[str] = None,
    brand_name: Optional[str] = None,
    extra_info: Optional[str] = None,
    is_bought: Optional[bool] = None
) -> ShoplistItem:
    """
    Update an item (member only).

    Only fields that are provided are written.

    Raises:
        NotMemberError: If user is not a member of the shoplist
        ItemNotFoundError: If the item doesn't belong to the shoplist
        ItemNameEmptyError: If item_name is given but empty
        ShoplistProcessError: If the update could not be written
    """
    item = _get_item_for_member(shoplist_id, item_id, user, lock=True)

    update_fields = []

    if item_name is not None:
        item_name = item_name.strip()
        if not item_name:
            raise ItemNameEmptyError()
        item.item_name = item_name
        update_fields.append('item_name')

    if brand_name is not None:
        item.brand_name = brand_name
        update_fields.append('brand_name')

    if extra_info is not None:
        item.extra_info = extra_info
        update_fields.append('extra_info')

    if is_bought is not None:
        item.is_bought = is_bought
        update_fields.append('is_bought')

    if update_fields:
        try:
            item.save(update_fields=update_fields)
        except DatabaseError as exc:
            raise ShoplistProcessError("Failed to update item.") from exc

    return item


def remove_item(*, shoplist_id: int, item_id: int, user: User) -> None:
    """
    Remove an item from a shoplist (member only).

    Raises:
        NotMemberError: If user is not a member of the shoplist
        ItemNotFoundError: If the item doesn't belong to the shoplist
        ShoplistProcessError: If the delete could not be written
    """
    item = _get_item_for_member(shoplist_id, item_id, user)

    try:
        item.delete()
    except DatabaseError as exc:
        raise ShoplistProcessError("Failed to remove item.") from exc
