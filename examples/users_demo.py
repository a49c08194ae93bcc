#!/usr/bin/env python3
"""
StarRecord walkthrough

Seeds the USERS table, then runs queries, scopes, dynamic finders and a
create/update/destroy cycle against it.

Run with STARRECORD_LOG_LEVEL=DEBUG to see every scan.
"""

import logging
from typing import Optional

from starrecord import Model, Range, scope, get_database, seed_users, configure_logging

logger = logging.getLogger("users_demo")


class User(Model):
    id: Optional[int] = None
    name: Optional[str] = None
    age: Optional[int] = None
    email: Optional[str] = None

    @scope
    def adult(cls):
        return cls.where(age=lambda age: age >= 18)

    @scope
    def senior(cls):
        return cls.where(age=lambda age: age >= 30)

    @scope
    def age_between(cls, low, high):
        return cls.where(age=Range(low, high))


def main():
    configure_logging()
    db = get_database()
    seed_users(db, extended=True)

    logger.info(f"Users: {User.count()}")
    logger.info(f"First user: {User.first()}")
    logger.info(f"Last user: {User.last()}")
    logger.info(f"User 1: {User.find(1)}")
    logger.info(f"Aged 25: {[str(user) for user in User.where(age=25)]}")
    logger.info(f"Find by name: {User.find_by_name('Charlie')}")
    logger.info(f"Find by age: {User.find_by_age(28)}")
    logger.info(f"Adults: {User.adult().count()}")
    logger.info(f"Seniors: {User.senior().count()}")
    logger.info(f"Age range 25-30: {User.age_between(25, 30).count()}")
    logger.info(f"Adults named Alice: {[str(user) for user in User.adult().where(name='Alice')]}")

    new_user = User(name="Anthony", age=31, email="anthony@example.com")
    logger.info(f"New record? {new_user.is_new_record()} persisted? {new_user.is_persisted()}")

    new_user.save_or_raise()
    logger.info(f"Created: {new_user} (table now {len(db.table('USERS'))} rows)")

    new_user.update(age=26)
    logger.info(f"Updated: {User.find(new_user.id)}")

    new_user.destroy()
    logger.info(f"Destroyed? {new_user.is_destroyed()} can find? {User.find(new_user.id) is not None}")


if __name__ == "__main__":
    main()
