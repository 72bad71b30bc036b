# tests/test_car_service.py
"""Unit tests for the vehicle registry."""

import pytest
from unittest.mock import MagicMock
from app.config import settings
from app.exceptions import BadRequestError, NotFoundError
from app.services.car_service import add_car, is_valid_user_id, list_cars
from app.services.identity_service import authenticate_or_register
from app.utils.object_id import is_valid_object_id, new_object_id

INVALID_IDS = [None, "", "undefined", "123", "z" * 24, "a" * 23, "a" * 25, "a" * 24 + "\n"]


class TestObjectId:
    def test_new_ids_are_valid_and_unique(self):
        ids = [new_object_id() for _ in range(100)]
        assert all(is_valid_object_id(i) for i in ids)
        assert len(set(ids)) == 100

    def test_non_strings_invalid(self):
        assert not is_valid_object_id(12345)
        assert not is_valid_object_id(None)

    def test_uppercase_hex_valid(self):
        assert is_valid_object_id("ABCDEF0123456789ABCDEF01")


class TestUserIdValidation:
    @pytest.mark.parametrize("user_id", INVALID_IDS)
    def test_invalid(self, user_id):
        assert not is_valid_user_id(user_id)

    def test_valid(self):
        assert is_valid_user_id(new_object_id())


class TestListCars:
    @pytest.mark.parametrize("user_id", INVALID_IDS)
    def test_invalid_id_returns_empty_without_query(self, user_id):
        db = MagicMock()
        assert list_cars(db, user_id) == []
        db.query.assert_not_called()

    def test_returns_only_owned_cars_in_insertion_order(self, db):
        owner, other = new_object_id(), new_object_id()
        add_car(db, "Toyota", "Corolla", 2020, owner)
        add_car(db, "Honda", "Civic", 2018, other)
        add_car(db, "Ford", "Focus", 2015, owner)

        cars = list_cars(db, owner)

        assert [(c.make, c.model, c.year) for c in cars] == [
            ("Toyota", "Corolla", 2020),
            ("Ford", "Focus", 2015),
        ]
        assert all(c.user_id == owner for c in cars)

    def test_id_case_is_ignored(self, db):
        owner = new_object_id()
        car = add_car(db, "Toyota", "Corolla", 2020, owner.upper())

        assert car.user_id == owner
        assert [c.id for c in list_cars(db, owner)] == [car.id]
        assert [c.id for c in list_cars(db, owner.upper())] == [car.id]

    def test_unknown_valid_id_returns_empty(self, db):
        assert list_cars(db, new_object_id()) == []


class TestAddCar:
    @pytest.mark.parametrize("user_id", INVALID_IDS)
    def test_invalid_id_rejected_without_store_access(self, user_id):
        db = MagicMock()
        with pytest.raises(BadRequestError, match="log in again"):
            add_car(db, "Toyota", "Corolla", 2020, user_id)
        db.add.assert_not_called()
        db.query.assert_not_called()

    def test_persists_with_generated_id_and_timestamps(self, db):
        owner = new_object_id()
        car = add_car(db, "Toyota", "Corolla", 2020, owner)

        assert is_valid_object_id(car.id)
        assert car.user_id == owner
        assert car.created_at is not None
        assert car.updated_at is not None

    def test_owner_existence_not_checked_by_default(self, db):
        car = add_car(db, "Toyota", "Corolla", 2020, new_object_id())
        assert car.id

    def test_owner_existence_enforced_when_enabled(self, db, monkeypatch):
        monkeypatch.setattr(settings, "ENFORCE_CAR_OWNER_EXISTS", True)
        with pytest.raises(NotFoundError):
            add_car(db, "Toyota", "Corolla", 2020, new_object_id())

        user = authenticate_or_register(db, "ann@x.com", "pw1", "Ann").user
        car = add_car(db, "Toyota", "Corolla", 2020, user.id)
        assert car.user_id == user.id
