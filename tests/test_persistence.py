"""
Test the create/update/destroy lifecycle.
"""

import logging

import pytest

from starrecord import RecordConfig, RecordNotSavedError, UnknownAttributeError, set_config

from record_models import User, Ghost


def test_create(db):
    before = len(db.table("USERS"))
    user = User(name="Test User", age=25, email="test@example.com")

    assert user.is_new_record()
    assert user.save_or_raise() is user

    assert len(db.table("USERS")) == before + 1
    assert user.id == 6
    assert not user.is_new_record()
    assert user.is_persisted()
    assert db.table("USERS")[-1] == {"id": 6, "name": "Test User", "age": 25, "email": "test@example.com"}


def test_create_in_empty_table(db):
    db.create_table("USERS")
    user = User(name="First")
    assert user.save()
    assert user.id == 1


def test_created_record_has_full_field_set(db):
    user = User(name="Zoe")
    user.save()

    record = db.table("USERS")[-1]
    assert record == {"id": 6, "name": "Zoe", "age": None, "email": None}
    assert "_new_record" not in record
    assert "_destroyed" not in record


def test_update_overwrites_only_changed_field(db):
    user = User.find(2)
    assert user.update(age=99) is user

    assert db.table("USERS")[1] == {"id": 2, "name": "Bob", "age": 99, "email": "bob@example.com"}
    assert User.find(2).age == 99
    assert len(db.table("USERS")) == 5


def test_update_with_mapping(db):
    user = User.find(1)
    user.update({"name": "Alicia"}, age=31)
    assert User.find(1).name == "Alicia"
    assert User.find(1).age == 31


def test_update_ignores_unknown_attributes_by_default(db):
    user = User.find(1)
    user.update(age=31, nickname="Al")
    assert User.find(1).age == 31
    assert "nickname" not in db.table("USERS")[0]


def test_strict_update_rejects_unknown_attributes(db):
    set_config(RecordConfig(ignore_unknown_attributes=False))
    user = User.find(1)

    with pytest.raises(UnknownAttributeError):
        user.update(age=31, nickname="Al")
    assert db.table("USERS")[0]["age"] == 30, "Nothing is saved when an attribute is rejected"
    assert user.age == 30, "Known attributes are not assigned either"

    assert user.save()
    assert db.table("USERS")[0]["age"] == 30


def test_save_after_assignment_updates(db):
    user = User.find(3)
    user.email = "chuck@example.com"
    assert user.save()
    assert User.find(3).email == "chuck@example.com"


def test_save_reports_missing_record(db, caplog):
    user = User(id=42, name="Stray")

    with caplog.at_level(logging.ERROR):
        assert user.save() is False

    assert "Error saving record" in caplog.text
    assert "42" in caplog.text
    assert len(db.table("USERS")) == 5


def test_save_or_raise_names_the_model(db):
    with pytest.raises(RecordNotSavedError, match="Failed to save User"):
        User(id=42, name="Stray").save_or_raise()


def test_save_without_table_fails(db):
    ghost = Ghost(name="Casper")
    assert ghost.save() is False
    assert ghost.is_new_record()


def test_destroy(db):
    user = User.find(4)
    assert user.destroy() is user

    assert user.is_destroyed()
    assert not user.is_persisted()
    assert len(db.table("USERS")) == 4
    assert User.find(4) is None


def test_destroy_is_idempotent(db):
    user = User.find(4)
    user.destroy()
    user.destroy()
    assert len(db.table("USERS")) == 4


def test_destroy_new_record_is_noop(db):
    user = User(name="Unsaved")
    assert user.destroy() is user
    assert not user.is_destroyed()
    assert user.is_new_record()
    assert len(db.table("USERS")) == 5


def test_full_lifecycle(db):
    user = User(name="Anthony", age=31, email="anthony@example.com").save_or_raise()
    assert len(db.table("USERS")) == 6

    user.update(age=26)
    assert User.find(user.id).age == 26

    user.destroy()
    assert len(db.table("USERS")) == 5
    assert User.find(user.id) is None
