"""Unit tests for the store implementations."""

from datetime import date

import pytest

from exercise_tracker.app.core.errors import NotFound, StoreError, ValidationError
from exercise_tracker.app.store import ExerciseFilter, RecordId, SQLiteStore


class TestRecordId:
    """Test opaque identifier handling."""

    def test_generate_is_unique_and_well_formed(self):
        ids = {RecordId.generate() for _ in range(100)}
        assert len(ids) == 100
        for record_id in ids:
            assert RecordId.parse(str(record_id)) == record_id
            assert len(str(record_id)) == 24

    def test_parse_normalises_case(self):
        assert str(RecordId.parse("65A1B2C3D4E5F60718293A4B")) == "65a1b2c3d4e5f60718293a4b"

    @pytest.mark.parametrize("text", ["", "123", "zz" * 12, "65a1b2c3d4e5f60718293a4b0"])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            RecordId.parse(text)


class TestUsers:
    """User operations, run against every store."""

    def test_create_and_find_user(self, store):
        user = store.create_user("alice")
        assert user.username == "alice"
        assert store.find_user_by_id(user.id) == user
        assert store.find_user_by_id(str(user.id)) == user

    @pytest.mark.parametrize("username", ["", "   "])
    def test_create_user_rejects_blank_names(self, store, username):
        with pytest.raises(ValidationError):
            store.create_user(username)
        assert store.list_users() == []

    def test_same_username_gets_distinct_ids(self, store):
        first = store.create_user("bob")
        second = store.create_user("bob")
        assert first.id != second.id

    def test_list_users_in_insertion_order(self, store):
        created = [store.create_user(f"user{i}") for i in range(5)]
        assert store.list_users() == created

    def test_find_unknown_user(self, store):
        with pytest.raises(NotFound):
            store.find_user_by_id(RecordId.generate())

    def test_find_malformed_id_is_not_found(self, store):
        with pytest.raises(NotFound) as exc_info:
            store.find_user_by_id("not-an-id")
        assert exc_info.value.message == "User not found"


class TestExercises:
    """Exercise operations, run against every store."""

    @pytest.fixture
    def owner(self, store):
        return store.create_user("runner")

    @pytest.fixture
    def seeded(self, store, owner):
        for day in (date(2024, 1, 1), date(2024, 1, 15), date(2024, 2, 1)):
            store.create_exercise(owner.id, f"run {day}", 30, day)
        return owner

    def test_create_exercise(self, store, owner):
        exercise = store.create_exercise(owner.id, "swim", 45, date(2024, 5, 5))
        assert exercise.user_id == owner.id
        assert exercise.duration == 45
        assert store.find_exercises(ExerciseFilter(user_id=owner.id)) == [exercise]

    def test_find_filters_by_user(self, store, seeded):
        other = store.create_user("walker")
        store.create_exercise(other.id, "walk", 10, date(2024, 1, 15))
        assert len(store.find_exercises(ExerciseFilter(user_id=seeded.id))) == 3
        assert len(store.find_exercises(ExerciseFilter(user_id=other.id))) == 1

    def test_find_with_inclusive_date_range(self, store, seeded):
        found = store.find_exercises(
            ExerciseFilter(user_id=seeded.id, date_from=date(2024, 1, 10), date_to=date(2024, 1, 31))
        )
        assert [e.date for e in found] == [date(2024, 1, 15)]

        bounds = store.find_exercises(
            ExerciseFilter(user_id=seeded.id, date_from=date(2024, 1, 1), date_to=date(2024, 1, 15))
        )
        assert [e.date for e in bounds] == [date(2024, 1, 1), date(2024, 1, 15)]

    def test_find_with_single_bound(self, store, seeded):
        after = store.find_exercises(ExerciseFilter(user_id=seeded.id, date_from=date(2024, 1, 15)))
        assert [e.date for e in after] == [date(2024, 1, 15), date(2024, 2, 1)]
        before = store.find_exercises(ExerciseFilter(user_id=seeded.id, date_to=date(2024, 1, 14)))
        assert [e.date for e in before] == [date(2024, 1, 1)]

    def test_find_with_limit_keeps_insertion_order(self, store, seeded):
        found = store.find_exercises(ExerciseFilter(user_id=seeded.id), limit=2)
        assert [e.date for e in found] == [date(2024, 1, 1), date(2024, 1, 15)]


class TestSQLiteStore:
    """SQLite specific behaviour."""

    def test_records_survive_new_store_instance(self, tmp_path):
        path = str(tmp_path / "persist.db")
        store = SQLiteStore(path)
        store.init()
        user = store.create_user("persistent")
        store.create_exercise(user.id, "row", 20, date(2024, 4, 1))

        reopened = SQLiteStore(path)
        reopened.init()
        assert reopened.find_user_by_id(str(user.id)).username == "persistent"
        assert len(reopened.find_exercises(ExerciseFilter(user_id=user.id))) == 1

    def test_database_errors_become_store_errors(self, tmp_path):
        store = SQLiteStore(str(tmp_path / "uninitialised.db"))
        with pytest.raises(StoreError) as exc_info:
            store.list_users()
        assert "no such table" in exc_info.value.message
