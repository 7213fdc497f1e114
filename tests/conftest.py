import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from storefront.config import Settings
from storefront.database import Database
from storefront.main import create_app
from storefront.models.cart import Cart, CartItem
from storefront.models.product import Product
from storefront.models.user import User
from storefront.utils.token import create_user_token


class FakeNotificationGateway:
    """Records shipped notifications instead of sending email."""

    def __init__(self):
        self.sent = []
        self.error = None
        self.result = True

    def send_shipped_notification(self, email, details, tracking_number=None):
        if self.error:
            raise self.error
        self.sent.append((email, details, tracking_number))
        return self.result


@pytest.fixture()
def database():
    db = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture()
def session(database):
    with database.session() as session:
        yield session


@pytest.fixture()
def notifier():
    return FakeNotificationGateway()


@pytest.fixture()
def settings():
    return Settings(ENV="test")


@pytest.fixture()
def client(settings, database, notifier):
    app = create_app(settings=settings, database=database, notifier=notifier)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def make_user(session):
    def _make_user(name="Jane Doe", email="jane@example.com", is_admin=False):
        user = User(name=name, email=email, password="x", is_admin=is_admin)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def make_product(session):
    def _make_product(name="Widget", price=10.0, image_url="/images/widget.jpg"):
        product = Product(name=name, price=price, image_url=image_url)
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    return _make_product


@pytest.fixture()
def fill_cart(session):
    def _fill_cart(user, lines):
        """``lines`` is a list of (product, quantity)."""
        cart = Cart(user_id=user.id)
        session.add(cart)
        session.commit()
        session.refresh(cart)
        for product, quantity in lines:
            session.add(CartItem(cart_id=cart.id, product_id=product.id, quantity=quantity))
        session.commit()
        return cart

    return _fill_cart


def auth_headers(user):
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture()
def customer(make_user):
    return make_user()


@pytest.fixture()
def admin(make_user):
    return make_user(name="Admin", email="admin@example.com", is_admin=True)


@pytest.fixture()
def customer_headers(customer):
    return auth_headers(customer)


@pytest.fixture()
def admin_headers(admin):
    return auth_headers(admin)
