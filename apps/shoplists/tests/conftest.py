import pytest
from datetime import timedelta
from django.utils import timezone
from apps.accounts.models import User
from apps.shoplists.models import Shoplist, ShoplistMembership, ShoplistShareCode, ShoplistItem


@pytest.fixture
def shoplist_owner(db):
    """Create and return a test user (shoplist owner)."""
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        display_name='List Owner',
    )


@pytest.fixture
def member_user(db):
    """Create and return a member user."""
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        display_name='List Member',
    )


@pytest.fixture
def second_member_user(db):
    """Create and return another member user."""
    return User.objects.create_user(
        email='second@example.com',
        password='TestPass123!',
        display_name='Second Member',
    )


@pytest.fixture
def other_user(db):
    """Create and return a user not in any shoplist."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def shoplist(db, shoplist_owner):
    """Create and return a shoplist with owner membership."""
    shoplist = Shoplist.objects.create(
        name='Weekly Groceries',
        owner=shoplist_owner,
    )
    ShoplistMembership.objects.create(shoplist=shoplist, user=shoplist_owner)
    return shoplist


@pytest.fixture
def shoplist_with_members(shoplist, member_user, second_member_user):
    """Shoplist with owner and two members, joined in that order."""
    ShoplistMembership.objects.create(shoplist=shoplist, user=member_user)
    ShoplistMembership.objects.create(shoplist=shoplist, user=second_member_user)
    return shoplist


@pytest.fixture
def share_code(shoplist):
    """Active share code for the shoplist."""
    return ShoplistShareCode.objects.create(
        shoplist=shoplist,
        code='ABC123',
        expires_at=timezone.now() + timedelta(hours=24),
    )


@pytest.fixture
def expired_share_code(shoplist):
    """Share code whose expiry has passed."""
    return ShoplistShareCode.objects.create(
        shoplist=shoplist,
        code='OLD999',
        expires_at=timezone.now() - timedelta(minutes=1),
    )


@pytest.fixture
def shoplist_item(shoplist):
    """Create and return an item on the shoplist."""
    return ShoplistItem.objects.create(
        shoplist=shoplist,
        item_name='Milk',
        brand_name='Farm Fresh',
        extra_info='2 litres',
    )
