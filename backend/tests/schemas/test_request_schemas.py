"""Request Schemas — validation rules on auth, address and cart payloads."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from app.schemas.auth import RegisterRequest
from app.schemas.cart import CartItemAdd, CartItemUpdate, CartResponse
from app.schemas.user import AddressUpdate


def test_register_lowercases_email():
    req = RegisterRequest(name="a", email="Mixed@Example.COM", password="abc12345")
    assert req.email == "mixed@example.com"


@pytest.mark.parametrize("password", ["short1", "allletters", "12345678"])
def test_register_rejects_weak_passwords(password):
    with pytest.raises(ValidationError):
        RegisterRequest(name="a", email="a@example.com", password=password)


def test_address_is_stripped_and_length_checked():
    assert AddressUpdate(address="  12 Long Street Name, Springfield ").address == (
        "12 Long Street Name, Springfield"
    )
    with pytest.raises(ValidationError):
        AddressUpdate(address="    short address       ")


def test_cart_add_accepts_alias_and_field_name():
    pid = str(uuid4())
    assert CartItemAdd(productId=pid, quantity=1).product_id == pid
    assert CartItemAdd(product_id=pid, quantity=1).product_id == pid


def test_cart_add_keeps_non_uuid_id_for_catalog_lookup():
    assert CartItemAdd(productId="5f71c1ca04c69a5874e9fd45", quantity=1).product_id == (
        "5f71c1ca04c69a5874e9fd45"
    )


def test_cart_add_rejects_empty_id():
    with pytest.raises(ValidationError):
        CartItemAdd(productId="", quantity=1)


def test_cart_add_requires_positive_quantity():
    with pytest.raises(ValidationError):
        CartItemAdd(productId=str(uuid4()), quantity=0)


def test_cart_update_allows_zero_quantity():
    assert CartItemUpdate(productId=str(uuid4()), quantity=0).quantity == 0


def test_cart_response_total_uses_snapshots():
    class _Cart:
        email = "a@example.com"
        payment_option = "PAYMENT_OPTION_DEFAULT"
        cart_items = [
            {"product": {"id": "1", "name": "A", "category": "c", "cost": 30,
                         "rating": 5, "image": "i"}, "quantity": 3},
        ]

    assert CartResponse.from_cart(_Cart()).total_cost == 90


def test_register_rejects_password_over_72_bytes():
    # 62 characters but 122 bytes in UTF-8
    with pytest.raises(ValidationError):
        RegisterRequest(name="a", email="a@example.com", password="é" * 60 + "a1")


def test_register_accepts_72_byte_password():
    password = "a1" * 36
    assert RegisterRequest(name="a", email="a@example.com", password=password).password == password
