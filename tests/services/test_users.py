import pytest

from context import RequestContext, authenticate, require_user
from errors import Conflict, NotAuthenticated, ValidationError


class TestUserService:
    """Tests for UserService."""

    def test_create_user(self, services):
        user = services.users.create("alice")

        assert user.id > 0
        assert user.name == "alice"
        assert services.users.find(user.id) == user

    def test_create_duplicate_conflicts(self, services):
        services.users.create("alice")

        with pytest.raises(Conflict):
            services.users.create("alice")

    def test_create_empty_name_rejected(self, services):
        with pytest.raises(ValidationError) as exc_info:
            services.users.create("")

        assert exc_info.value.field == "name"

    def test_find_by_name(self, services):
        created = services.users.create("carol")

        assert services.users.find_by_name("carol") == created
        assert services.users.find_by_name("Carol") is None

    def test_find_missing_returns_none(self, services):
        assert services.users.find(9999) is None

    def test_find_all_ordered_by_name(self, services):
        services.users.create("zed")
        services.users.create("amy")

        assert [u.name for u in services.users.find_all()] == ["amy", "zed"]


class TestAuthentication:
    """Tests for resolving the caller into a RequestContext."""

    def test_authenticate_known_user(self, services):
        user = services.users.create("alice")

        ctx = authenticate(services, "alice")

        assert ctx == RequestContext(user_id=user.id)
        assert require_user(ctx) == user.id

    def test_authenticate_unknown_user(self, services):
        with pytest.raises(NotAuthenticated):
            authenticate(services, "mallory")

    @pytest.mark.parametrize("name", [None, ""])
    def test_authenticate_without_name(self, services, name):
        with pytest.raises(NotAuthenticated):
            authenticate(services, name)

    def test_require_user_without_context(self):
        with pytest.raises(NotAuthenticated):
            require_user(None)
