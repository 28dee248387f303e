"""
DataGenerator: fills an empty store with demo users, products, pickup
locations and roughly two years of order history.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from . import config
from .factory import (create_admin, create_baker, create_barista, create_deletable_users,
                      create_pickup_locations, create_products)
from .random_stream import RandomStream
from .security import PasswordHasher
from .storage import DemoStore
from .timeline import create_orders

logger = logging.getLogger(__name__)


class DataGenerator:
    def __init__(self, store: DemoStore, hasher: PasswordHasher, rng: Optional[RandomStream] = None,
                 today: Optional[date] = None, years_to_include: int = config.YEARS_TO_INCLUDE,
                 order_products: int = config.ORDER_PRODUCTS,
                 deletable_products: int = config.DELETABLE_PRODUCTS) -> None:
        self.store = store
        self.hasher = hasher
        self.rng = rng if rng is not None else RandomStream(config.SEED)
        self.today = today or config.TODAY or date.today()
        self.years_to_include = years_to_include
        self.order_products = order_products
        self.deletable_products = deletable_products

    def load_data(self) -> bool:
        """Generate everything unless the store already has users. Returns True if data was generated."""
        if self.store.users.count() != 0:
            logger.info("Using existing database")
            return False

        logger.info("Generating demo data")

        logger.info("... generating users")
        baker = create_baker(self.store.users, self.hasher)
        barista = create_barista(self.store.users, self.hasher)
        create_admin(self.store.users, self.hasher)
        create_deletable_users(self.store.users, self.hasher)

        logger.info("... generating products")
        # only the first batch is used by orders; the second has no relations
        products = create_products(self.store.products, self.rng, self.order_products)
        create_products(self.store.products, self.rng, self.deletable_products)

        logger.info("... generating pickup locations")
        locations = create_pickup_locations(self.store.pickup_locations)

        logger.info("... generating orders")
        n = create_orders(self.store.orders, products, locations, barista, baker, self.rng,
                          self.today, self.years_to_include)

        logger.info("Generated demo data (%d orders)", n)
        return True
