"""
Unit tests for the SQLAlchemy NullableBool column type.

Uses an in-memory SQLite database.
"""

import pytest
from sqlalchemy import Column, Integer, create_engine, select
from sqlalchemy.orm import Session, declarative_base

from nullbool.exceptions import TypeMismatchError
from nullbool.integrations import NullableBoolType
from nullbool.models import NullableBool

Base = declarative_base()


class Subscription(Base):
    __tablename__ = "subscriptions"

    id = Column(Integer, primary_key=True)
    auto_renew = Column(NullableBoolType, nullable=True)


@pytest.fixture
def session():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


def _store_and_reload(session, value):
    session.add(Subscription(id=1, auto_renew=value))
    session.commit()
    session.expunge_all()
    return session.execute(select(Subscription)).scalar_one().auto_renew


@pytest.mark.unit
class TestNullableBoolType:
    """Test column binding and result processing."""

    def test_valid_true(self, session):
        loaded = _store_and_reload(session, NullableBool(True, True))
        assert (loaded.value, loaded.valid) == (True, True)

    def test_valid_false_stays_valid(self, session):
        """A stored false reads back as a present false, not as NULL."""
        loaded = _store_and_reload(session, NullableBool(False, True))
        assert (loaded.value, loaded.valid) == (False, True)

    def test_null_value_stores_null(self, session):
        loaded = _store_and_reload(session, NullableBool(True, False))
        assert (loaded.value, loaded.valid) == (False, False)

        raw = session.connection().exec_driver_sql("SELECT auto_renew FROM subscriptions").scalar()
        assert raw is None

    def test_plain_bool_binds(self, session):
        loaded = _store_and_reload(session, True)
        assert loaded == NullableBool(True, True)

    def test_process_bind_param(self):
        column_type = NullableBoolType()
        assert column_type.process_bind_param(None, None) is None
        assert column_type.process_bind_param(False, None) is False
        assert column_type.process_bind_param(NullableBool(False, True), None) is False
        assert column_type.process_bind_param(NullableBool(True, False), None) is None

    def test_process_bind_param_rejects_other_types(self):
        with pytest.raises(TypeMismatchError):
            NullableBoolType().process_bind_param("true", None)

    def test_process_result_value(self):
        column_type = NullableBoolType()
        assert column_type.process_result_value(None, None) == NullableBool()
        assert column_type.process_result_value(1, None) == NullableBool(True, True)
        assert column_type.process_result_value(0, None) == NullableBool(False, True)

    def test_python_type(self):
        assert NullableBoolType().python_type is NullableBool
