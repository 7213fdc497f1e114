import pytest

from storefront.exceptions import NotFound, ValidationError
from storefront.models.order import Order
from storefront.services.order_status import StatusChange, update_status


@pytest.fixture()
def order(session, customer):
    order = Order(
        user_id=customer.id,
        total_amount=10.0,
        shipping_address="1 Elm",
        status="Processing",
        tracking_number="OLD-1",
    )
    session.add(order)
    session.commit()
    session.refresh(order)
    return order


def test_applies_status_and_reports_previous(session, order, customer):
    change = update_status(session, order.id, "Shipped", "TRACK1")

    session.refresh(order)
    assert order.status == "Shipped"
    assert order.tracking_number == "TRACK1"
    assert change.previous_status == "Processing"
    assert change.owner_email == customer.email
    assert change.owner_name == customer.name
    assert change.should_notify


def test_omitted_tracking_number_is_kept(session, order):
    change = update_status(session, order.id, "Delivered")

    session.refresh(order)
    assert order.tracking_number == "OLD-1"
    assert change.tracking_number == "OLD-1"


@pytest.mark.parametrize("tracking", ["", None])
def test_explicit_tracking_number_replaces(session, order, tracking):
    update_status(session, order.id, "Delivered", tracking)

    session.refresh(order)
    assert order.tracking_number == tracking


def test_any_status_reachable_from_any_other(session, order):
    for status in ["Cancelled", "Pending", "Returned", "Delivered", "Delivered", "Processing"]:
        change = update_status(session, order.id, status)
        assert change.status == status

    session.refresh(order)
    assert order.status == "Processing"


@pytest.mark.parametrize("status", ["Bogus", "shipped", "", None])
def test_invalid_status_rejected(session, order, status):
    with pytest.raises(ValidationError) as exc:
        update_status(session, order.id, status)

    assert "Pending, Processing, Shipped, Delivered, Cancelled, Returned" in exc.value.message
    session.refresh(order)
    assert order.status == "Processing"


def test_unknown_order(session):
    with pytest.raises(NotFound):
        update_status(session, 999, "Shipped")


def test_guest_order_has_no_recipient(session):
    order = Order(total_amount=1.0, shipping_address="x")
    session.add(order)
    session.commit()

    change = update_status(session, order.id, "Shipped", "T")

    assert change.entered_shipped
    assert change.owner_email is None
    assert not change.should_notify


@pytest.mark.parametrize(
    "previous, new, entered",
    [
        ("Processing", "Shipped", True),
        ("Pending", "Shipped", True),
        ("Shipped", "Shipped", False),
        ("Shipped", "Delivered", False),
        ("Delivered", "Processing", False),
    ],
)
def test_entered_shipped(previous, new, entered):
    change = StatusChange(
        order_id=1,
        previous_status=previous,
        status=new,
        tracking_number=None,
        owner_email="a@b.co",
    )
    assert change.entered_shipped is entered
    assert change.should_notify is entered
