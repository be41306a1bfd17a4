"""Tests du modele ElectricCar."""

from app.models.electric_car import ElectricCar
from app.schemas.cars import CarSchema


class TestElectricCar:
    def test_create_sets_created_at(self, db):
        car = ElectricCar(brand="Hyundai", model="Kona Electric 64 kWh", seats=5, accel_sec=7.9)
        db.session.add(car)
        db.session.commit()
        try:
            assert car.id is not None
            assert car.created_at is not None
        finally:
            db.session.delete(car)
            db.session.commit()

    def test_serialized_through_schema(self, db):
        car = ElectricCar(brand="Kia", model="e-Niro 64 kWh", price_euro=38105)
        db.session.add(car)
        db.session.commit()
        try:
            data = CarSchema.model_validate(car).model_dump(mode="json")
            assert data["brand"] == "Kia"
            assert data["price_euro"] == 38105
            assert data["rapid_charge"] is None
            assert isinstance(data["created_at"], str)
        finally:
            db.session.delete(car)
            db.session.commit()

    def test_repr(self):
        assert repr(ElectricCar(id=4, brand="BMW", model="iX3")) == "<ElectricCar 4 BMW iX3>"
