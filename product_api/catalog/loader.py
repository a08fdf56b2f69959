"""
==============================================================================
Seed Loader Module
==============================================================================

Reads the initial product list the store is populated with at startup.

JSON Structure:
--------------
[
  {
    "id": "CLN-CDE-BOOK",
    "name": "Clean Code",
    "description": "...",
    "price": {"value": 18.99, "currency": "GBP"},
    "type": "Book",
    "department": "Books and Stationery",
    "weight": "220g"
  },
  ...
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


def load_products(products_file: Path) -> List[Product]:
    """
    Load seed products from a JSON file.

    Args:
        products_file: Path to products.json

    Returns:
        Products in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON array of valid products
    """
    try:
        with products_file.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Products file not found: {products_file}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {products_file}: {e}")
        raise

    if not isinstance(data, list):
        raise ValueError(f"{products_file} must contain a JSON array of products")

    products = []
    for position, item in enumerate(data):
        try:
            products.append(Product.model_validate(item))
        except ValidationError as e:
            logger.error(f"Invalid product at index {position} in {products_file}")
            raise ValueError(f"Invalid product at index {position}: {e}") from e

    logger.info(f"Loaded {len(products)} products from {products_file}")
    return products
