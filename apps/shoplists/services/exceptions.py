"""
Domain-specific exceptions for shoplists app.

These exceptions represent business rule violations and persistence
failures. Each carries a stable ``code`` that the transport layer can
map onto its own error representation.
"""


class ShoplistServiceError(Exception):
    """Base exception for all shoplists service errors."""

    code = 'shoplist_error'
    default_message = 'Shoplist operation failed.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ShoplistNotFoundError(ShoplistServiceError):
    """Raised when a shoplist does not exist or the caller cannot see it."""

    code = 'shoplist_not_found'
    default_message = 'Shoplist not found.'


class ShoplistNotOwnedError(ShoplistServiceError):
    """Raised when a member who is not the owner tries to modify the shoplist."""

    code = 'shoplist_not_owned'
    default_message = 'User is not the owner of the shoplist.'


class NotMemberError(ShoplistServiceError):
    """Raised when a user tries to perform an action requiring membership."""

    code = 'shoplist_not_member'
    default_message = 'User is not a member of the shoplist.'


class NotOwnerError(ShoplistServiceError):
    """Raised when a non-owner member tries to manage share codes."""

    code = 'shoplist_not_owner'
    default_message = 'Only the owner can manage share codes.'


class ShoplistCreateError(ShoplistServiceError):
    """Raised when a shoplist or item could not be written."""

    code = 'shoplist_failed_to_create'
    default_message = 'Failed to create shoplist.'


class ShoplistUpdateError(ShoplistServiceError):
    """Raised when a shoplist update could not be written."""

    code = 'shoplist_failed_to_update'
    default_message = 'Failed to update shoplist.'


class ShoplistProcessError(ShoplistServiceError):
    """Raised when a membership or share code mutation fails."""

    code = 'shoplist_failed_to_process'
    default_message = 'Failed to process shoplist request.'


class InvalidShareCodeError(ShoplistProcessError):
    """Raised when a share code is unknown, expired or revoked."""

    default_message = 'Invalid share code.'


class AlreadyMemberError(ShoplistProcessError):
    """Raised when a user redeems a code for a shoplist they are already in."""

    default_message = 'User is already a member of the shoplist.'


class ItemNameEmptyError(ShoplistServiceError):
    """Raised when an item is given an empty name."""

    code = 'shoplist_item_name_empty'
    default_message = 'Item name is required.'


class ItemNotFoundError(ShoplistServiceError):
    """Raised when an item does not exist on the given shoplist."""

    code = 'shoplist_item_not_found'
    default_message = 'Item not found.'
