# ==========================================
# apps/shoplists/models.py
# ==========================================

from django.db import models
from django.utils import timezone


class LeaveOutcome(models.TextChoices):
    LEFT = 'left', 'Left'
    OWNERSHIP_TRANSFERRED = 'ownership_transferred', 'Ownership transferred'
    DISSOLVED = 'dissolved', 'Dissolved'


class Shoplist(models.Model):
    """Shared shopping list owned by one of its members."""

    name = models.CharField(max_length=255)
    owner = models.ForeignKey('accounts.User', on_delete=models.PROTECT, related_name='owned_shoplists')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'shoplists'
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='shoplists_owner_created_idx'),
        ]
        ordering = ['id']

    def __str__(self):
        return self.name

    def has_member(self, user):
        return self.memberships.filter(user=user).exists()

    def is_owner(self, user):
        return self.owner_id == user.pk


class ShoplistMembership(models.Model):
    """Collaborator access to a shoplist."""

    shoplist = models.ForeignKey(Shoplist, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='shoplist_memberships')
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'shoplist_members'
        constraints = [
            models.UniqueConstraint(fields=['shoplist', 'user'], name='unique_shoplist_member'),
        ]
        indexes = [
            models.Index(fields=['user', 'joined_at'], name='shoplist_members_user_idx'),
        ]
        ordering = ['joined_at', 'id']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.shoplist.name}"


class ShoplistShareCodeQuerySet(models.QuerySet):

    def active(self, now=None):
        return self.filter(expires_at__gt=now or timezone.now())

    def expired(self, now=None):
        return self.filter(expires_at__lte=now or timezone.now())


class ShoplistShareCode(models.Model):
    """
    Time-boxed join code bound to exactly one shoplist.

    A shoplist holds at most one row; issuing a new code replaces it.
    The code column is unique, so an expired row must be cleared
    before its text can be handed out again.
    """

    shoplist = models.OneToOneField(Shoplist, on_delete=models.CASCADE, related_name='share_code')
    code = models.CharField(max_length=16, unique=True)
    expires_at = models.DateTimeField()

    objects = ShoplistShareCodeQuerySet.as_manager()

    class Meta:
        db_table = 'shoplist_share_codes'
        indexes = [
            models.Index(fields=['code', 'expires_at'], name='share_codes_code_expiry_idx'),
        ]

    def __str__(self):
        return f"{self.code} ({self.shoplist.name})"

    def is_active(self, now=None):
        return (now or timezone.now()) < self.expires_at


class ShoplistItem(models.Model):
    """Entry on a shoplist."""

    shoplist = models.ForeignKey(Shoplist, on_delete=models.CASCADE, related_name='items')
    item_name = models.CharField(max_length=255)
    brand_name = models.CharField(max_length=255, blank=True)
    extra_info = models.TextField(blank=True)
    thumbnail = models.URLField(max_length=500, blank=True)
    is_bought = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'shoplist_items'
        ordering = ['id']

    def __str__(self):
        return f"{self.shoplist.name} - {self.item_name}"
