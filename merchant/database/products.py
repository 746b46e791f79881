"""Product storage over a MongoDB collection"""

import logging
import re
from functools import lru_cache
from typing import Any, Optional

import mongomock
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING, MongoClient, ReturnDocument

from ..core.config import Settings, get_settings
from ..models.product import PriceFilter, Product

logger = logging.getLogger(__name__)

NEWEST_FIRST = [("_id", DESCENDING)]


def connect_products_collection(settings: Settings):
    """Open the products collection, in-process when no database URL is set"""
    if settings.uses_mongomock:
        logger.warning("No DATABASE_URL configured - using in-memory document store")
        client = mongomock.MongoClient()
    else:
        client = MongoClient(settings.database_url)
    return client[settings.database_name][settings.products_collection]


class ProductDatabase:
    """
    Product collection access.

    Documents keep the public field names (``salePrice`` and so on) and a
    BSON ``ObjectId`` as ``_id``. Ids that are not valid ObjectIds are
    treated as missing products.
    """

    def __init__(self, collection):
        self.collection = collection

    @staticmethod
    def _object_id(product_id: Any) -> Optional[ObjectId]:
        try:
            return ObjectId(product_id)
        except (InvalidId, TypeError):
            return None

    @staticmethod
    def to_product(document: dict[str, Any]) -> Product:
        """Convert a stored document to a Product"""
        data = dict(document)
        data["id"] = str(data.pop("_id"))
        return Product.model_validate(data)

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        oid = self._object_id(product_id)
        if oid is None:
            return None
        document = self.collection.find_one({"_id": oid})
        return self.to_product(document) if document else None

    def search_products(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        max_price: Optional[float] = None,
        price_filter: Optional[PriceFilter] = None,
        limit: int = 12,
        offset: int = 0,
    ) -> tuple[list[Product], int]:
        """
        Search products with filters.

        Returns:
            Tuple of (matching products for the page, total match count)
        """
        clauses: list[dict[str, Any]] = []

        if query:
            clauses.append({"name": {"$regex": re.escape(query), "$options": "i"}})

        if category:
            clauses.append({"category": category})

        # A positive sale price is what the shopper pays; otherwise the base price
        if max_price:
            clauses.append({
                "$or": [
                    {"salePrice": {"$gt": 0, "$lte": max_price}},
                    {
                        "$and": [
                            {"$or": [{"salePrice": 0}, {"salePrice": {"$exists": False}}]},
                            {"price": {"$lte": max_price}},
                        ]
                    },
                ]
            })

        mongo_filter = {"$and": clauses} if clauses else {}

        if price_filter == PriceFilter.LOW_TO_HIGH:
            sort = [("price", ASCENDING)] + NEWEST_FIRST
        elif price_filter == PriceFilter.HIGH_TO_LOW:
            sort = [("price", DESCENDING)] + NEWEST_FIRST
        else:
            sort = NEWEST_FIRST

        total = self.collection.count_documents(mongo_filter)
        cursor = self.collection.find(mongo_filter).sort(sort).skip(offset).limit(limit)

        return [self.to_product(doc) for doc in cursor], total

    def summary_counts(self) -> tuple[int, int, int]:
        """
        Count in-stock, out-of-stock and discounted products.

        Always catalog-wide, whatever filter the listing used.
        """
        in_stock = self.collection.count_documents({"quantity": {"$gt": 0}})
        out_of_stock = self.collection.count_documents({"quantity": 0})

        discounted = 0
        for doc in self.collection.find({"salePrice": {"$gt": 0}}, {"price": 1, "salePrice": 1}):
            if doc.get("price") is not None and doc["salePrice"] < doc["price"]:
                discounted += 1

        return in_stock, out_of_stock, discounted

    def insert_product(self, fields: dict[str, Any]) -> Product:
        """Insert a new product document"""
        document = dict(fields)
        document["_id"] = ObjectId()
        self.collection.insert_one(document)
        return self.to_product(document)

    def update_product(self, product_id: str, fields: dict[str, Any]) -> Optional[Product]:
        """Apply ``fields`` with a single atomic ``$set``; None if not found"""
        oid = self._object_id(product_id)
        if oid is None:
            return None
        if not fields:
            return self.get_product(product_id)
        document = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return self.to_product(document) if document else None

    def delete_product(self, product_id: str) -> bool:
        """Delete a product; False if it did not exist"""
        oid = self._object_id(product_id)
        if oid is None:
            return False
        result = self.collection.delete_one({"_id": oid})
        return result.deleted_count > 0


@lru_cache()
def get_product_db() -> ProductDatabase:
    """Shared product database for the running application"""
    return ProductDatabase(connect_products_collection(get_settings()))
