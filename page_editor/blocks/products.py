"""Bloc Produits — vitrine e-commerce."""
from typing import List, Optional, Union

from ..core.schemas import BlockDefinition
from .base import BlockProps, PropsItem


class ProductItem(PropsItem):
    id: Optional[Union[int, str]] = None
    name: str = ""
    price: str = ""
    image: str = ""
    description: str = ""


class ProductsProps(BlockProps):
    products: List[ProductItem] = []
    layout: str = "grid"
    show_prices: bool = False
    show_descriptions: bool = False


DEFINITION = BlockDefinition(
    id="product-showcase",
    type="products",
    category="ecommerce",
    name="Product Showcase",
    description="Display your products with images, prices, and descriptions",
    is_premium=True,
    default_props={
        "products": [
            {
                "id": 1,
                "name": "Premium Service Package",
                "price": "$99.00",
                "image": "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=300&h=300&fit=crop",
                "description": "Our most popular service package with everything you need",
            },
            {
                "id": 2,
                "name": "Standard Service",
                "price": "$49.00",
                "image": "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=300&h=300&fit=crop",
                "description": "Great value service option for basic needs",
            },
        ],
        "layout": "grid",
        "showPrices": True,
        "showDescriptions": True,
    },
)
