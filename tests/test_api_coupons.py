import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_validate_known_coupon(override_catalog: object, client: AsyncClient) -> None:
    response = await client.post("/api/v1/coupons/validate", json={"code": "festive20"})

    assert response.status_code == 200
    assert response.json() == {"valid": True, "reason": None, "message": None}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("code", "amount", "reason"),
    [
        ("NOPE", None, "not_found"),
        ("PAUSED", None, "not_active"),
        ("OLD5", None, "expired"),
        ("WELCOME10", 998.99, "min_order_not_met"),
    ],
)
async def test_validate_rejections(
    override_catalog: object,
    client: AsyncClient,
    code: str,
    amount: float | None,
    reason: str,
) -> None:
    response = await client.post(
        "/api/v1/coupons/validate", json={"code": code, "order_amount": amount}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    assert data["reason"] == reason


@pytest.mark.asyncio
async def test_apply_coupon(override_catalog: object, client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/coupons/apply", json={"code": "welcome10", "order_amount": 999}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is True
    assert data["code"] == "WELCOME10"
    assert data["discount"] == "99.90"


@pytest.mark.asyncio
async def test_apply_requires_amount(override_catalog: object, client: AsyncClient) -> None:
    response = await client.post("/api/v1/coupons/apply", json={"code": "WELCOME10"})

    assert response.status_code == 422
