"""Seed catalogue written when no usable catalog file exists."""

from __future__ import annotations

from catalog.domain.model.product import Product

_SAMPLES = [
    {
        "name": "Smartphone Samsung Galaxy S23",
        "description": "Smartphone with a 6.1 inch AMOLED display",
        "price": 899.99,
        "category": "Electrónicos",
        "stock": 15,
        "image_url": "https://example.com/samsung-s23.jpg",
    },
    {
        "name": "Laptop MacBook Air M2",
        "description": "Ultra-thin laptop with the Apple M2 chip",
        "price": 1299.99,
        "category": "Computadoras",
        "stock": 8,
        "image_url": "https://example.com/macbook-air.jpg",
    },
    {
        "name": "Auriculares Sony WH-1000XM4",
        "description": "Wireless headphones with noise cancelling",
        "price": 349.99,
        "category": "Audio",
        "stock": 25,
        "image_url": "https://example.com/sony-headphones.jpg",
    },
    {
        "name": "Smartwatch Apple Watch Series 8",
        "description": "Smartwatch with advanced health monitoring",
        "price": 399.99,
        "category": "Wearables",
        "stock": 12,
        "image_url": "https://example.com/apple-watch.jpg",
    },
    {
        "name": "Tablet iPad Air",
        "description": "Tablet with a 10.9 inch Liquid Retina display",
        "price": 599.99,
        "category": "Tablets",
        "stock": 20,
        "image_url": "https://example.com/ipad-air.jpg",
    },
]


def sample_products() -> list[Product]:
    """Fresh products (new IDs and timestamps) on every call."""
    return [Product(**fields) for fields in _SAMPLES]
