"""Jeu de voitures de test, au format des lignes electric_cars (ids fixes)."""

_FIELDS = (
    "id",
    "brand",
    "model",
    "accel_sec",
    "top_speed_kmh",
    "range_km",
    "efficiency_whkm",
    "fast_charge_kmh",
    "rapid_charge",
    "power_train",
    "plug_type",
    "body_style",
    "segment",
    "seats",
    "price_euro",
    "date",
)

_ROWS = [
    (1, "Tesla", "Model 3 Long Range Dual Motor", 4.6, 233, 450, 161, 940, "Yes", "AWD", "Type 2 CCS", "Sedan", "D", 5, 55480, "8/24/16"),
    (2, "Volkswagen", "ID.3 Pure", 10.0, 160, 270, 167, 250, "Yes", "RWD", "Type 2 CCS", "Hatchback", "C", 5, 30000, "8/24/16"),
    (3, "Polestar", "2", 4.7, 210, 400, 181, 620, "Yes", "AWD", "Type 2 CCS", "Liftback", "D", 5, 56440, "8/24/16"),
    (4, "BMW", "iX3", 6.8, 180, 360, 206, 560, "Yes", "RWD", "Type 2 CCS", "SUV", "D", 5, 68040, "8/24/16"),
    (5, "Honda", "e", 9.5, 145, 170, 168, 190, "Yes", "RWD", "Type 2 CCS", "Hatchback", "B", 4, 32997, "8/24/16"),
    (6, "Tesla", "Model Y Long Range Dual Motor", 5.1, 217, 425, 171, 930, "Yes", "AWD", "Type 2 CCS", "SUV", "D", 7, 58620, "8/24/16"),
    (7, "Renault", "Kangoo Maxi ZE 33", 22.4, 130, 160, 194, None, None, "FWD", "Type 2", "SPV", "N", 5, 38000, None),
    (8, "Smart", "EQ forfour", 12.7, 130, 95, 176, None, "", "RWD", "Type 2", "Hatchback", "A", 4, 22030, "8/24/16"),
    (9, "Tesla", "Cybertruck Tri Motor", 3.0, 210, 750, 267, 710, "Yes", "AWD", "Type 2 CCS", "Pickup", "N", 6, 75000, "8/24/16"),
    (10, "Nissan", "Leaf", 7.9, 144, 220, 164, 230, "Yes", "FWD", "Type 2 CHAdeMO", "Hatchback", "C", 5, 29234, "8/24/16"),
    (11, "Porsche", "Taycan Turbo S", 2.8, 260, 375, 223, 780, "Yes", "AWD", "Type 2 CCS", "Sedan", "F", 4, 180781, "8/24/16"),
    (12, "Fiat", "500e Hatchback", 9.0, 150, 250, 168, 330, "Yes", "FWD", "Type 2 CCS", "Hatchback", "B", 4, None, "8/24/16"),
    (13, "Volkswagen", "e-Golf", 9.6, 150, 190, 168, 220, "Yes", "FWD", "Type 2 CCS", "Hatchback", "C", 5, 31900, "8/24/16"),
]

SAMPLE_CARS = [dict(zip(_FIELDS, row)) for row in _ROWS]

ALL_IDS = [car["id"] for car in SAMPLE_CARS]
