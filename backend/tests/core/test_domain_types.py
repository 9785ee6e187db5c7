"""Domain Types — verifies identity wrappers and token type values.

Tests:
    - NewType wrappers wrap their base type
    - TokenType serializes to the wire strings used in the `type` claim
"""

from uuid import uuid4

from app.core.domain_types import Money, ProductId, TokenType, UserId


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert UserId(uid) == uid
    assert ProductId(uid) == uid


def test_money_is_integer():
    assert Money(250) + Money(250) == 500


def test_token_type_wire_values():
    assert TokenType.ACCESS.value == "access"
    assert TokenType.REFRESH.value == "refresh"
    assert TokenType.RESET_PASSWORD.value == "resetPassword"
    assert TokenType.VERIFY_EMAIL.value == "verifyEmail"


def test_token_type_compares_as_string():
    assert TokenType("access") is TokenType.ACCESS
    assert TokenType.ACCESS == "access"
