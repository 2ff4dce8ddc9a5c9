import numpy as np
import pytest

from catalog.store import Store
from explainer.templates import DEFAULT_TEMPLATES
from reco_core.config import EngineSettings
from reco_core.dispatcher import RecommendationEngine
from reco_core.types import Interaction, Product, User


def make_products():
    return [
        Product(product_id="P001", name="Wireless Bluetooth Headphones", category="Electronics",
                price=79.99, rating=4.5, brand="TechBrand",
                description="High-quality wireless headphones with noise cancellation",
                features=["wireless", "noise-cancellation", "bluetooth", "long-battery"]),
        Product(product_id="P002", name="Organic Cotton T-Shirt", category="Clothing",
                price=29.99, rating=4.2, brand="EcoWear",
                description="Soft organic cotton t-shirt available in multiple colors",
                features=["organic", "cotton", "comfortable", "eco-friendly"]),
        Product(product_id="P003", name="JavaScript Programming Book", category="Books",
                price=39.99, rating=4.7, brand="TechBooks",
                description="Comprehensive guide to modern JavaScript development",
                features=["programming", "javascript", "tutorial", "advanced"]),
        Product(product_id="P004", name="Smart Fitness Watch", category="Electronics",
                price=199.99, rating=4.4, brand="FitTech",
                description="Advanced fitness tracker with heart rate monitoring",
                features=["fitness", "smart", "heart-rate", "gps"]),
        Product(product_id="P005", name="Yoga Mat Premium", category="Sports",
                price=49.99, rating=4.6, brand="YogaPro",
                description="Non-slip premium yoga mat for all skill levels",
                features=["yoga", "non-slip", "premium", "exercise"]),
    ]


def make_users():
    return [
        User(user_id="U001", name="Alice Johnson", age=28, location="New York",
             preferences=["Electronics", "Books"],
             interaction_history=[
                 Interaction(product_id="P001", type="purchase", rating=5),
                 Interaction(product_id="P003", type="view"),
             ]),
        User(user_id="U002", name="Bob Smith", age=35, location="California",
             preferences=["Sports", "Electronics"],
             interaction_history=[
                 Interaction(product_id="P004", type="purchase", rating=4),
                 Interaction(product_id="P005", type="add_to_cart"),
             ]),
    ]


@pytest.fixture
def settings(tmp_path):
    return EngineSettings(templates_path=tmp_path / "missing.yaml", random_seed=7)


@pytest.fixture
def store():
    return Store(make_products(), make_users())


@pytest.fixture
def trio_store():
    """Seed store plus a third user whose history overlaps U001's."""
    carol = User(user_id="U003", name="Carol Diaz", location="Chicago",
                 preferences=["Clothing"],
                 interaction_history=[
                     Interaction(product_id="P001", type="purchase"),
                     Interaction(product_id="P002", type="add_to_cart", rating=4),
                 ])
    return Store(make_products(), make_users() + [carol])


@pytest.fixture
def engine(store, settings):
    return RecommendationEngine(store, settings, rng=np.random.default_rng(42), templates=dict(DEFAULT_TEMPLATES))


@pytest.fixture
def trio_engine(trio_store, settings):
    return RecommendationEngine(trio_store, settings, rng=np.random.default_rng(42), templates=dict(DEFAULT_TEMPLATES))
