"""
Shared fixtures: a small on-disk catalog and an API client pointed at it.
"""

import json

import pytest
from fastapi.testclient import TestClient

from batteryhub.config import settings
from batteryhub.main import app
from batteryhub.schemas.product import Product


def make_product(**overrides) -> Product:
    """Build a valid Product, overriding any field by its catalog (camelCase) key."""
    data = {
        "slug": "product",
        "name": "Product",
        "description": "",
        "category": "Batteries",
        "brand": "Acme",
        "capacity": "Below 50Ah",
        "price": 100,
        "rating": 4.0,
        "createdAt": "2024-01-01T00:00:00Z",
        "tags": [],
        "stock": 1,
    }
    data.update(overrides)
    return Product.model_validate(data)


@pytest.fixture
def catalog_records():
    return [
        {
            "slug": "amaron-car",
            "name": "Car Battery",
            "description": "Long life starter battery",
            "category": "Batteries",
            "brand": "Amaron",
            "capacity": "50Ah - 100Ah",
            "price": 150,
            "rating": 4.5,
            "createdAt": "2024-03-01T00:00:00Z",
            "tags": ["car"],
            "stock": 4,
            "image": "/uploads/amaron-car.jpg",
            "warranty": "48 months",
        },
        {
            "slug": "exide-inverter",
            "name": "Exide Inverter Battery",
            "description": "Tubular battery for power cuts",
            "shortDescription": "150Ah tubular",
            "category": "Batteries",
            "brand": "Exide",
            "capacity": "150Ah - 200Ah",
            "price": 500,
            "rating": 4.0,
            "createdAt": "2024-05-01T00:00:00Z",
            "tags": ["inverter", "home"],
            "stock": 0,
        },
        {
            "slug": "exide-charger",
            "name": "Smart Charger",
            "description": "Automatic 12V charger",
            "category": "Chargers",
            "brand": "Exide",
            "price": 120,
            "rating": 3.5,
            "createdAt": "2024-04-01T00:00:00Z",
            "tags": ["charger"],
            "stock": 9,
        },
        {
            "slug": "livguard-ups",
            "name": "Livguard UPS Battery",
            "description": "Sealed battery for office UPS units",
            "category": "Batteries",
            "brand": "Livguard",
            "capacity": "Below 50Ah",
            "price": 100,
            "rating": 4.8,
            "createdAt": "2024-01-15T00:00:00Z",
            "tags": ["ups"],
            "stock": 12,
            "metaTitle": "Livguard UPS Battery | Best Price",
        },
        {
            "slug": "amaron-bike",
            "name": "Amaron Bike Battery",
            "description": "Two-wheeler battery",
            "category": "Batteries",
            "brand": "Amaron",
            "capacity": "Below 50Ah",
            "price": 250,
            "rating": 4.0,
            "createdAt": "2024-06-01T00:00:00Z",
            "tags": ["bike"],
            "stock": 30,
        },
    ]


@pytest.fixture
def catalog_file(tmp_path, catalog_records):
    path = tmp_path / "battery.json"
    path.write_text(json.dumps(catalog_records), encoding="utf-8")
    return path


@pytest.fixture
def client(catalog_file, monkeypatch):
    monkeypatch.setattr(settings, "catalog_path", catalog_file)
    return TestClient(app)
