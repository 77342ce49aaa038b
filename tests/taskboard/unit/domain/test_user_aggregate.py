"""Unit tests for the User aggregate."""

from datetime import timedelta
from uuid import uuid4

from taskboard.domain.shared import utc_now
from taskboard.domain.user import User


class TestUser:
    def setup_method(self):
        self.created = utc_now() - timedelta(days=1)
        self.user = User(
            id=uuid4(),
            email="jane@example.com",
            name="Jane",
            created_at=self.created,
        )

    def test_new_user_timestamps(self):
        assert self.user.created_at == self.created
        assert self.user.updated_at == self.created
        assert self.user.bio is None

    def test_update_profile_applies_fields(self):
        changed = self.user.update_profile(name="Janet", bio="Hello")

        assert changed is True
        assert self.user.name == "Janet"
        assert self.user.bio == "Hello"
        assert self.user.email == "jane@example.com"
        assert self.user.updated_at > self.created

    def test_update_profile_without_changes(self):
        changed = self.user.update_profile(name="Jane", email="jane@example.com")

        assert changed is False
        assert self.user.updated_at == self.created

    def test_equality_by_id(self):
        twin = User(id=self.user.id, email="other@example.com", name="Other")

        assert twin == self.user
        assert hash(twin) == hash(self.user)

    def test_has_no_password_attribute(self):
        assert not any("password" in attr for attr in vars(self.user))
