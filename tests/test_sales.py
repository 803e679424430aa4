"""Tests for the sale accessors."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from app.core.exceptions import NotFoundError, ReferentialIntegrityError
from app.models.sales import SaleStatus
from app.schemas.sale import SaleCreate, SaleUpdate
from app.services import sales as sale_service


def _sale_input(customer_id, **overrides):
    data = {
        "customer_id": customer_id,
        "product_service": "Website Development",
        "amount": Decimal("1500.00"),
        "date": datetime(2024, 1, 15, 10, 0),
    }
    data.update(overrides)
    return SaleCreate(**data)


def test_create_sale_defaults_to_pending(repo, customer):
    sale = sale_service.create_sale(repo, _sale_input(customer.id))

    assert sale.id > 0
    assert sale.customer_id == customer.id
    assert sale.product_service == "Website Development"
    assert sale.amount == 1500.0
    assert isinstance(sale.amount, float)
    assert sale.status == SaleStatus.PENDING
    assert sale.created_at is not None


def test_create_sale_rounds_amount_to_cents(repo, customer):
    sale = sale_service.create_sale(repo, _sale_input(customer.id, amount=Decimal("19.999")))

    assert sale.amount == 20.0


def test_create_sale_for_missing_customer(repo):
    with pytest.raises(ReferentialIntegrityError, match="Customer with id 999 does not exist"):
        sale_service.create_sale(repo, _sale_input(999))

    assert sale_service.get_sales(repo) == []


def test_get_sale_and_missing_sale(repo, customer):
    created = sale_service.create_sale(repo, _sale_input(customer.id, status="Completed"))

    fetched = sale_service.get_sale(repo, created.id)
    assert fetched == created
    assert fetched.status == SaleStatus.COMPLETED

    assert sale_service.get_sale(repo, created.id + 100) is None


def test_get_sales_by_customer(repo, customer):
    from app.schemas.customer import CustomerCreate
    from app.services.customers import create_customer

    other = create_customer(repo, CustomerCreate(
        name="Other", email="other@example.com", phone="555-0002", company="Other Co",
    ))

    sale_service.create_sale(repo, _sale_input(customer.id, product_service="A"))
    sale_service.create_sale(repo, _sale_input(other.id, product_service="B"))
    sale_service.create_sale(repo, _sale_input(customer.id, product_service="C"))

    own = sale_service.get_sales_by_customer(repo, customer.id)
    assert [s.product_service for s in own] == ["A", "C"]

    assert len(sale_service.get_sales(repo)) == 3
    assert sale_service.get_sales_by_customer(repo, 999) == []


def test_update_sale_changes_only_given_fields(repo, customer):
    created = sale_service.create_sale(repo, _sale_input(customer.id))

    updated = sale_service.update_sale(
        repo,
        created.id,
        SaleUpdate(status="Completed", amount=Decimal("1750.50")),
    )

    assert updated.id == created.id
    assert updated.status == SaleStatus.COMPLETED
    assert updated.amount == 1750.50
    assert updated.product_service == created.product_service
    assert updated.date == created.date
    assert updated.created_at == created.created_at

    assert sale_service.get_sale(repo, created.id).status == SaleStatus.COMPLETED


def test_update_missing_sale_leaves_store_unchanged(repo, customer):
    created = sale_service.create_sale(repo, _sale_input(customer.id))

    with pytest.raises(NotFoundError, match="Sale with id 999 not found"):
        sale_service.update_sale(repo, 999, SaleUpdate(status="Cancelled"))

    assert sale_service.get_sales(repo) == [created]


def test_ids_beyond_integer_range(repo, customer):
    huge = 10**20

    with pytest.raises(ReferentialIntegrityError):
        sale_service.create_sale(repo, _sale_input(huge))

    assert sale_service.get_sale(repo, huge) is None
    assert sale_service.get_sales_by_customer(repo, huge) == []

    with pytest.raises(NotFoundError):
        sale_service.update_sale(repo, huge, SaleUpdate(status="Cancelled"))

    assert sale_service.get_sales(repo) == []


def test_sale_timestamps_are_utc(repo, customer):
    sale = sale_service.create_sale(repo, _sale_input(customer.id))

    fetched = sale_service.get_sale(repo, sale.id)

    assert fetched.date == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
    assert fetched.created_at.tzinfo == timezone.utc
