"""
Shoplists app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations that touch more than one row run inside a
transaction, so a failure never leaves partial effects behind.
"""

from .exceptions import (
    ShoplistServiceError,
    ShoplistNotFoundError,
    ShoplistNotOwnedError,
    NotMemberError,
    NotOwnerError,
    ShoplistCreateError,
    ShoplistUpdateError,
    ShoplistProcessError,
    InvalidShareCodeError,
    AlreadyMemberError,
    ItemNameEmptyError,
    ItemNotFoundError,
)

from .membership_query import (
    ShoplistMembershipData,
    get_shoplist_membership,
    require_membership,
    is_member,
)

from .list_management import (
    create_shoplist,
    rename_shoplist,
    get_shoplist,
    get_user_shoplists,
    get_shoplist_members,
)

from .membership_management import (
    leave_shoplist,
    join_shoplist,
)

from .share_code_management import (
    generate_share_code,
    request_share_code,
    revoke_share_code,
    get_active_share_code,
)

from .item_management import (
    add_item,
    update_item,
    remove_item,
)


__all__ = [
    # Exceptions
    'ShoplistServiceError',
    'ShoplistNotFoundError',
    'ShoplistNotOwnedError',
    'NotMemberError',
    'NotOwnerError',
    'ShoplistCreateError',
    'ShoplistUpdateError',
    'ShoplistProcessError',
    'InvalidShareCodeError',
    'AlreadyMemberError',
    'ItemNameEmptyError',
    'ItemNotFoundError',

    # Membership Query
    'ShoplistMembershipData',
    'get_shoplist_membership',
    'require_membership',
    'is_member',

    # Shoplist Management
    'create_shoplist',
    'rename_shoplist',
    'get_shoplist',
    'get_user_shoplists',
    'get_shoplist_members',

    # Membership Management
    'leave_shoplist',
    'join_shoplist',

    # Share Code Management
    'generate_share_code',
    'request_share_code',
    'revoke_share_code',
    'get_active_share_code',

    # Item Management
    'add_item',
    'update_item',
    'remove_item',
]
