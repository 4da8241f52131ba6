import pytest
from apps.accounts.models import User


@pytest.mark.django_db
class TestUserModel:
    """Tests for the collaborator account model."""

    def test_create_user_normalizes_email(self):
        user = User.objects.create_user(email='Someone@EXAMPLE.com', password='TestPass123!')

        assert user.email == 'Someone@example.com'
        assert user.check_password('TestPass123!')

    def test_create_user_requires_email(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='TestPass123!')

    def test_display_name(self):
        user = User.objects.create_user(email='anna@example.com', display_name='Anna')

        assert user.get_display_name() == 'Anna'

    def test_display_name_falls_back_to_email_prefix(self):
        user = User.objects.create_user(email='anna@example.com')

        assert user.get_display_name() == 'anna'
