"""
Membership query service.

Every shoplist operation reads the owner and member set through this
module before mutating. A missing shoplist and a shoplist the caller is
not a member of both surface as ShoplistNotFoundError.
"""

from dataclasses import dataclass, field
from typing import Dict

from django.db import transaction

from apps.accounts.models import User
from apps.shoplists.models import Shoplist, ShoplistMembership

from .exceptions import ShoplistNotFoundError


@dataclass
class ShoplistMembershipData:
    """Owner and collaborators of a shoplist, read in one transaction."""

    shoplist: Shoplist
    owner_id: object
    # user id -> display name, ordered by join time
    members: Dict[object, str] = field(default_factory=dict)

    @property
    def shoplist_id(self) -> int:
        return self.shoplist.id

    @property
    def name(self) -> str:
        return self.shoplist.name

    def has_member(self, user: User) -> bool:
        return user.pk in self.members

    def is_owner(self, user: User) -> bool:
        return self.owner_id == user.pk

    def other_member_ids(self, user: User) -> list:
        return [member_id for member_id in self.members if member_id != user.pk]


def get_shoplist_membership(*, shoplist_id: int, for_update: bool = False) -> ShoplistMembershipData:
    """
    Read a shoplist together with its owner and members.

    Args:
        shoplist_id: ID of the shoplist
        for_update: Lock the shoplist row until the surrounding
            transaction ends

    Returns:
        ShoplistMembershipData

    Raises:
        ShoplistNotFoundError: If the shoplist doesn't exist
    """
    with transaction.atomic():
        queryset = Shoplist.objects.all()
        if for_update:
            queryset = queryset.select_for_update()

        shoplist = queryset.filter(id=shoplist_id).first()
        if shoplist is None:
            raise ShoplistNotFoundError(f"Shoplist with ID {shoplist_id} not found")

        memberships = (
            ShoplistMembership.objects
            .filter(shoplist_id=shoplist_id)
            .select_related('user')
            .order_by('joined_at', 'id')
        )

        return ShoplistMembershipData(
            shoplist=shoplist,
            owner_id=shoplist.owner_id,
            members={m.user_id: m.user.get_display_name() for m in memberships},
        )


def require_membership(
    *,
    shoplist_id: int,
    user: User,
    for_update: bool = False
) -> ShoplistMembershipData:
    """
    Read membership and check that user is one of the collaborators.

    Raises:
        ShoplistNotFoundError: If the shoplist doesn't exist or user is
            not a member
    """
    data = get_shoplist_membership(shoplist_id=shoplist_id, for_update=for_update)
    if not data.has_member(user):
        raise ShoplistNotFoundError(f"Shoplist with ID {shoplist_id} not found")
    return data


def is_member(*, shoplist_id: int, user: User) -> bool:
    return ShoplistMembership.objects.filter(shoplist_id=shoplist_id, user=user).exists()
