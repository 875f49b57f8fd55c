import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_summary_without_coupon(override_catalog: object, client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/checkout/summary",
        json={"items": [{"price": 118, "quantity": 2}]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["final_total"] == "236.00"
    assert data["currency"] == "INR"
    assert data["coupon_code"] is None


@pytest.mark.asyncio
async def test_summary_with_valid_coupon(override_catalog: object, client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/checkout/summary",
        json={"items": [{"price": 118, "quantity": 2}], "coupon_code": "festive20"},
    )

    data = response.json()
    assert data["coupon_code"] == "FESTIVE20"
    assert data["discount_ex_gst"] == "40.00"
    assert data["final_total"] == "188.80"


@pytest.mark.asyncio
async def test_summary_with_unmet_minimum(override_catalog: object, client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/checkout/summary",
        json={"items": [{"price": 118, "quantity": 2}], "coupon_code": "WELCOME10"},
    )

    data = response.json()
    assert data["coupon_code"] is None
    assert data["discount"] == "0.00"
    assert "999" in data["coupon_message"]
