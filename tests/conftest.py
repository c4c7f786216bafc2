# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from flexbalance.models.base import Base
from flexbalance.services.schedule_service import ScheduleExpectation

# Test database setup
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    engine = create_engine(TEST_DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def schedule() -> ScheduleExpectation:
    """8 hours Monday to Friday."""
    return ScheduleExpectation(weekday_minutes=(480, 480, 480, 480, 480, 0, 0))


@pytest.fixture
def june_2023() -> date:
    # Thursday
    return date(2023, 6, 1)
