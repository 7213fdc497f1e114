import logging

from sqlmodel import Session, func, select

from storefront.models.product import Product

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {"name": "Laptop Pro", "description": "High-performance laptop for professionals.", "price": 1299.99, "image_url": "/images/laptop.jpg", "category": "Electronics", "stock_quantity": 50},
    {"name": "Wireless Mouse", "description": "Ergonomic wireless mouse.", "price": 25.50, "image_url": "/images/mouse.jpg", "category": "Accessories", "stock_quantity": 200},
    {"name": "Mechanical Keyboard", "description": "RGB Mechanical Keyboard for gaming.", "price": 75.00, "image_url": "/images/keyboard.jpg", "category": "Accessories", "stock_quantity": 100},
    {"name": "4K Monitor", "description": "27-inch 4K UHD Monitor.", "price": 349.99, "image_url": "/images/monitor.jpg", "category": "Electronics", "stock_quantity": 30},
    {"name": "Webcam HD", "description": "1080p HD Webcam with microphone.", "price": 49.99, "image_url": "/images/webcam.jpg", "category": "Accessories", "stock_quantity": 150},
]


def seed_initial_products(session: Session) -> int:
    """Insert the sample catalog into an empty product table."""
    count = session.exec(select(func.count()).select_from(Product)).one()
    if count:
        return 0

    logger.info("Products table is empty, seeding initial data...")
    for data in SAMPLE_PRODUCTS:
        session.add(Product(**data))
    session.commit()

    return len(SAMPLE_PRODUCTS)
