"""Tests for the in-memory user store."""

import pytest

from usergraph.errors import NotFoundError, ValidationError
from usergraph.store import SEED_USERS, UserRecord, UserStore, create_store


class TestSeeding:
    """Test store construction and seed data."""

    def test_seeded_store(self, store: UserStore) -> None:
        users = store.list_users()

        assert [u.id for u in users] == ["1", "2", "3"]
        assert users[0].name == "Alice Johnson"
        assert users[2].created_at == "2024-01-17T09:15:00Z"
        assert store.next_id == 4

    def test_create_store_without_seed(self) -> None:
        store = create_store(seed=False)

        assert len(store) == 0
        assert store.next_id == 1

    def test_create_store_with_seed(self) -> None:
        store = create_store()

        assert store.list_users() == list(SEED_USERS)

    def test_restore_rejects_duplicate_id(self, store: UserStore) -> None:
        duplicate = UserRecord(id="2", name="X", email="x@example.com", created_at="")

        with pytest.raises(ValidationError, match="already exists"):
            store.restore([duplicate])

    def test_restore_keeps_counter_ahead(self, empty_store: UserStore) -> None:
        empty_store.restore([UserRecord(id="41", name="A", email="a@b.c", created_at="")])

        assert empty_store.next_id == 42
        assert empty_store.create_user("B", "b@b.c").id == "42"


class TestQueries:
    """Test read operations."""

    def test_list_users_returns_copy(self, store: UserStore) -> None:
        users = store.list_users()
        users.clear()

        assert len(store) == 3

    def test_get_user(self, store: UserStore) -> None:
        user = store.get_user("2")

        assert user is not None
        assert user.email == "bob@example.com"

    def test_get_user_missing(self, store: UserStore) -> None:
        assert store.get_user("999") is None
        assert store.get_user("") is None


class TestCreateUser:
    """Test user creation."""

    def test_create_assigns_next_id(self, store: UserStore) -> None:
        user = store.create_user("Test User", "test@example.com")

        assert user.id == "4"
        assert user.created_at == "2026-10-19T12:00:00.123Z"
        assert store.next_id == 5
        assert store.list_users()[-1] == user

    def test_create_normalizes_fields(self, store: UserStore) -> None:
        user = store.create_user("  Bob  ", "  New.Person@Example.COM ")

        assert user.name == "Bob"
        assert user.email == "new.person@example.com"

    def test_ids_strictly_increase(self, store: UserStore) -> None:
        issued = [int(u.id) for u in store.list_users()]
        for i in range(5):
            user = store.create_user(f"User {i}", f"user{i}@example.com")
            assert int(user.id) > max(issued)
            issued.append(int(user.id))

    def test_ids_not_reused_after_delete(self, store: UserStore) -> None:
        user = store.create_user("Temp", "temp@example.com")
        store.delete_user(user.id)

        again = store.create_user("Temp", "temp@example.com")
        assert again.id == "5"

    @pytest.mark.parametrize(
        ("name", "email", "message"),
        [
            ("", "a@example.com", "Name is required"),
            ("   ", "a@example.com", "Name is required"),
            ("Ann", "", "Email is required"),
            ("Ann", "  ", "Email is required"),
            ("Ann", "not-an-email", "valid email address"),
        ],
    )
    def test_create_rejects_invalid_input(
        self, store: UserStore, name: str, email: str, message: str
    ) -> None:
        with pytest.raises(ValidationError, match=message):
            store.create_user(name, email)

        assert len(store) == 3
        assert store.next_id == 4

    def test_create_rejects_duplicate_email_case_insensitive(self, store: UserStore) -> None:
        with pytest.raises(ValidationError, match="already exists"):
            store.create_user("Alice Again", "ALICE@example.com")

    def test_create_rejects_duplicate_email_with_whitespace(self, store: UserStore) -> None:
        with pytest.raises(ValidationError, match="already exists"):
            store.create_user("Bob Again", "  bob@example.com ")


class TestUpdateUser:
    """Test partial user updates."""

    def test_update_name_only(self, store: UserStore) -> None:
        before = store.get_user("1")
        user = store.update_user("1", name="X")

        assert user.name == "X"
        assert user.email == before.email
        assert user.created_at == before.created_at
        assert store.get_user("1") == user

    def test_update_email_normalized(self, store: UserStore) -> None:
        user = store.update_user("2", email=" Robert@Example.com ")

        assert user.email == "robert@example.com"
        assert user.name == "Bob Smith"

    def test_update_with_no_fields_is_noop(self, store: UserStore) -> None:
        before = store.get_user("3")

        assert store.update_user("3") == before

    def test_update_keeps_own_email(self, store: UserStore) -> None:
        user = store.update_user("1", email="ALICE@example.com")

        assert user.email == "alice@example.com"

    def test_update_rejects_email_of_other_user(self, store: UserStore) -> None:
        with pytest.raises(ValidationError, match="already exists"):
            store.update_user("1", email="Bob@Example.com")

        assert store.get_user("1").email == "alice@example.com"

    @pytest.mark.parametrize(
        ("changes", "message"),
        [
            ({"name": ""}, "Name cannot be empty"),
            ({"name": "  "}, "Name cannot be empty"),
            ({"email": " "}, "Email cannot be empty"),
            ({"email": "nope"}, "valid email address"),
        ],
    )
    def test_update_rejects_invalid_input(
        self, store: UserStore, changes: dict[str, str], message: str
    ) -> None:
        before = store.get_user("1")

        with pytest.raises(ValidationError, match=message):
            store.update_user("1", **changes)

        assert store.get_user("1") == before

    def test_invalid_email_leaves_name_untouched(self, store: UserStore) -> None:
        with pytest.raises(ValidationError):
            store.update_user("1", name="Changed", email="invalid")

        assert store.get_user("1").name == "Alice Johnson"

    @pytest.mark.parametrize("user_id", ["0", "4", "999", "", "abc"])
    def test_update_unknown_id(self, store: UserStore, user_id: str) -> None:
        with pytest.raises(NotFoundError, match="User not found"):
            store.update_user(user_id, name="X")


class TestDeleteUser:
    """Test user deletion."""

    def test_delete_removes_exactly_one(self, store: UserStore) -> None:
        assert store.delete_user("2") is True

        assert len(store) == 2
        assert store.get_user("2") is None
        assert [u.id for u in store.list_users()] == ["1", "3"]

    def test_delete_unknown_id(self, store: UserStore) -> None:
        with pytest.raises(NotFoundError):
            store.delete_user("42")

        assert len(store) == 3

    def test_deleted_email_can_be_reused(self, store: UserStore) -> None:
        store.delete_user("1")

        user = store.create_user("Alice", "alice@example.com")
        assert user.id == "4"
