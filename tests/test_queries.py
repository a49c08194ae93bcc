"""
Test the query builder: conditions, chaining and materialization.
"""

import pytest

from starrecord import Query, Range, Condition, ConditionKind, table_name_for
from starrecord.exceptions import TableNotFoundError

from record_models import User, Person, Ghost, Employee, Contractor, Rule


def names(result):
    return [user.name for user in result]


def test_all_preserves_store_order(db):
    assert names(User.all()) == ["Alice", "Bob", "Charlie", "David", "Eve"]


def test_predicate_condition(db):
    result = User.where(age=lambda age: age >= 30).all()
    assert names(result) == ["Alice", "Charlie", "David"]
    assert [user.age for user in result] == [30, 35, 40]


def test_range_condition_is_inclusive(db):
    db.create_table("USERS", [
        {"id": 1, "name": "A", "age": 24, "email": None},
        {"id": 2, "name": "B", "age": 25, "email": None},
        {"id": 3, "name": "C", "age": 30, "email": None},
        {"id": 4, "name": "D", "age": 31, "email": None},
    ])
    assert names(User.where(age=Range(25, 30)).all()) == ["B", "C"]
    assert names(User.where(age=range(25, 31)).all()) == ["B", "C"]


def test_equality_condition(db):
    assert names(User.where(age=25).all()) == ["Bob"]
    assert names(User.where(name="Nobody").all()) == []


def test_conditions_are_anded(db):
    result = User.where(age=Range(25, 35), name=lambda name: name.startswith("C")).all()
    assert names(result) == ["Charlie"]


def test_where_does_not_mutate_receiver(db):
    base = User.where(age=Range(20, 40))
    narrowed = base.where(name="Bob")

    assert set(base.conditions) == {"age"}
    assert set(narrowed.conditions) == {"age", "name"}
    assert len(base.all()) == 5
    assert names(narrowed.all()) == ["Bob"]


def test_chained_where_equals_merged_where():
    chained = User.where(age=30).where(name="Alice")
    merged = User.where({"age": 30, "name": "Alice"})
    assert dict(chained.conditions) == dict(merged.conditions)


def test_later_where_wins(db):
    query = User.where(age=25).where(age=35)
    assert query.conditions["age"].value == 35
    assert names(query.all()) == ["Charlie"]


def test_all_is_idempotent(db):
    query = User.where(age=lambda age: age > 26)
    first_run = query.all()
    second_run = query.all()
    assert first_run.entities == second_run.entities
    assert first_run[0] is not second_run[0], "Each scan builds fresh instances"


def test_first_and_last(db):
    assert User.first().name == "Alice"
    assert User.last().name == "Eve"
    assert User.where(age=lambda age: age < 30).last().name == "Eve"
    assert User.where(name="Nobody").first() is None
    assert User.where(name="Nobody").last() is None


def test_count(db):
    assert User.count() == 5
    assert User.where(age=Range(30, 40)).count() == 3


def test_find_and_find_by(db):
    assert User.find(3).name == "Charlie"
    assert User.find(99) is None
    assert User.find_by(age=28).name == "Eve"
    assert User.find_by({"name": "Bob", "age": 99}) is None


def test_materialized_instances_are_persisted(db):
    user = User.first()
    assert user.is_persisted()
    assert not user.is_new_record()


def test_where_never_touches_store():
    query = Ghost.where(name="Casper")
    assert isinstance(query, Query)
    assert query.model is Ghost


def test_missing_table_raises(db):
    with pytest.raises(TableNotFoundError):
        Ghost.all()
    with pytest.raises(TableNotFoundError):
        Ghost.where(name="Casper").first()


def test_table_names():
    assert table_name_for(User) == "USERS"
    assert table_name_for(Person) == "PEOPLE"
    assert Person.table_name() == "PEOPLE"
    assert Ghost.table_name() == "GHOSTS"


def test_custom_table_name(db):
    db.create_table("PEOPLE", [{"id": 1, "name": "Ada"}])
    assert [person.name for person in Person.all()] == ["Ada"]


def test_subclass_shares_configured_table(db):
    assert table_name_for(Employee) == "PEOPLE"
    assert table_name_for(Contractor) == "CONTRACTORS"

    db.create_table("PEOPLE", [{"id": 1, "name": "Ada"}])
    employees = Employee.all()
    assert [employee.name for employee in employees] == ["Ada"]
    assert employees.first().role is None


def test_field_named_conditions_filters_by_keyword(db):
    db.create_table("RULES", [{"id": 1, "conditions": 5}, {"id": 2, "conditions": 7}])

    assert [rule.id for rule in Rule.where(conditions=5)] == [1]
    assert Rule.find_by(conditions=7).id == 2
    assert Rule.where({"conditions": 7}, id=2).count() == 1


def test_condition_classification():
    assert Condition.from_value(Range(1, 2)).kind is ConditionKind.RANGE
    assert Condition.from_value(range(1, 3)).kind is ConditionKind.RANGE
    assert Condition.from_value(lambda value: True).kind is ConditionKind.PREDICATE
    assert Condition.from_value("Alice").kind is ConditionKind.EQUALS
    assert Condition.from_value(int).kind is ConditionKind.EQUALS


def test_range_with_incomparable_value():
    assert None not in Range(1, 5)
    assert 3 in Range(1, 5)
