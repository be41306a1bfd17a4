"""Shared pytest fixtures for EV Catalog tests."""

import pytest
from sqlalchemy import delete

from app import create_app
from app.extensions import db as _db
from app.models.electric_car import ElectricCar
from app.services.car_store import InMemoryCarStore, SqlCarStore
from tests.mocks.sample_cars import SAMPLE_CARS


@pytest.fixture(scope="session")
def app():
    """Create application for testing."""
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.drop_all()


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture()
def db(app):
    """Database session for a test -- rolls back after each test."""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.rollback()


@pytest.fixture()
def cars(db):
    """Remplit electric_cars avec le jeu de test, puis vide la table."""
    db.session.execute(delete(ElectricCar))
    db.session.add_all([ElectricCar(**car) for car in SAMPLE_CARS])
    db.session.commit()
    yield SAMPLE_CARS
    db.session.rollback()
    db.session.execute(delete(ElectricCar))
    db.session.commit()
    db.session.expunge_all()


@pytest.fixture()
def sql_store(cars):
    return SqlCarStore()


@pytest.fixture()
def memory_store():
    return InMemoryCarStore([dict(car) for car in SAMPLE_CARS])
