from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from storefront_api.clients.data_store import DataClient
from storefront_api.db import Base, get_admin_db, get_db, get_public_client
from storefront_api.main import app
from storefront_api.models import Bundle, Category, PCBuild, Product, Promotion


@pytest.fixture
def data_client():
    """In-memory store shared by every session in a test."""
    client = DataClient("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(client.engine)
    yield client
    client.dispose()


@pytest.fixture
def db(data_client):
    session = data_client.session()
    yield session
    session.close()


@pytest.fixture
def seeded(db):
    db.add_all([
        Category(id="cat-cpu", name="Processors", slug="cpus"),
        Category(id="cat-gpu", name="Graphics Cards", slug="graphics-cards"),
    ])
    db.add_all([
        Product(
            id="p-ryzen", name="AMD Ryzen 5 5600X", description="6-core desktop processor",
            price=Decimal("100.00"), discount_percent=Decimal("20"), category_id="cat-cpu",
            stock=5, brand="AMD", sku="AMD-R5-5600X", is_featured=True,
            images=["https://cdn.example.com/ryzen.png"], specs={"Cores": 6, "Unlocked": True},
        ),
        Product(
            id="p-intel", name="Intel Core i9-13900K", description="24-core desktop processor",
            price=Decimal("589.99"), category_id="cat-cpu", stock=0, brand="Intel",
            sku="INT-I9-13900K", images=[], specs={},
        ),
        Product(
            id="p-radeon", name="Radeon RX 7900 XTX", description="24GB flagship graphics card",
            price=Decimal("999.99"), category_id="cat-gpu", stock=3, brand="AMD",
            sku="AMD-RX-7900XTX", images=[], specs={"Memory": "24GB GDDR6"},
        ),
        Product(
            id="p-rtx", name="GeForce RTX 4090", description="24GB flagship graphics card",
            price=Decimal("1599.99"), category_id="cat-gpu", stock=2, brand="NVIDIA",
            sku="NV-RTX-4090", is_featured=True, images=[], specs={},
        ),
    ])
    db.add_all([
        PCBuild(id="b-public", name="Gaming Rig", components={"cpu": "p-ryzen", "gpu": "p-rtx"},
                total_price=Decimal("0"), is_public=True),
        PCBuild(id="b-private", name="Secret Rig", components={"cpu": "p-intel"},
                total_price=Decimal("589.99"), is_public=False),
        Bundle(id="bd-team-red", name="Team Red Combo", description="CPU and GPU from AMD",
               products=["p-ryzen", "p-radeon"], total_price=Decimal("1099.99"),
               discounted_price=Decimal("989.99"), is_active=True),
        Promotion(id="promo-welcome", name="Welcome offer", code="WELCOME10",
                  discount_percent=Decimal("10"), start_date=datetime(2020, 1, 1, tzinfo=timezone.utc),
                  end_date=datetime(2099, 1, 1, tzinfo=timezone.utc), is_active=True, applies_to=[]),
        Promotion(id="promo-expired", name="Launch sale", code="LAUNCH",
                  discount_percent=Decimal("15"), start_date=datetime(2020, 1, 1, tzinfo=timezone.utc),
                  end_date=datetime(2020, 2, 1, tzinfo=timezone.utc), is_active=True, applies_to=[]),
    ])
    db.commit()
    return db


@pytest.fixture
def client(data_client, seeded):
    def override_db():
        session = data_client.session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_admin_db] = override_db
    app.dependency_overrides[get_public_client] = lambda: data_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def product_fields():
    return {
        "name": "Corsair RM850x",
        "description": "850W fully modular power supply",
        "price": 139.99,
        "category_id": "cat-cpu",
        "stock": 8,
        "brand": "Corsair",
        "sku": "COR-RM850X",
        "is_featured": False,
        "discount_percent": 10,
        "images": ["https://cdn.example.com/rm850x.png"],
        "specs": {"Wattage": 850, "Modular": True, "Rating": "80+ Gold"},
    }
