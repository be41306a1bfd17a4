"""Modele ElectricCar -- une ligne du jeu de donnees des voitures electriques."""

from datetime import datetime, timezone

from app.extensions import db


class ElectricCar(db.Model):
    """Caracteristiques d'une voiture electrique (une ligne du CSV importe)."""

    __tablename__ = "electric_cars"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    brand = db.Column(db.String(100))
    model = db.Column(db.String(100))
    accel_sec = db.Column(db.Float)
    top_speed_kmh = db.Column(db.Integer)
    range_km = db.Column(db.Integer)
    efficiency_whkm = db.Column(db.Integer)
    fast_charge_kmh = db.Column(db.Integer)
    rapid_charge = db.Column(db.String(10))
    power_train = db.Column(db.String(50))
    plug_type = db.Column(db.String(50))
    body_style = db.Column(db.String(50))
    segment = db.Column(db.String(10))
    seats = db.Column(db.Integer)
    price_euro = db.Column(db.Integer)
    date = db.Column(db.String(50))
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        return f"<ElectricCar {self.id} {self.brand} {self.model}>"
