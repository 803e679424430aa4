"""Tests for the interaction accessors."""

from datetime import datetime, timedelta, timezone

import pytest

from app.core.exceptions import NotFoundError, ReferentialIntegrityError
from app.models.interactions import InteractionType
from app.schemas.interaction import InteractionCreate, InteractionUpdate
from app.services import interactions as interaction_service


def _interaction_input(customer_id, **overrides):
    data = {
        "customer_id": customer_id,
        "type": "Call",
        "date": datetime(2024, 1, 15, 14, 30),
        "summary": "Discussed project requirements",
    }
    data.update(overrides)
    return InteractionCreate(**data)


def test_create_interaction(repo, customer):
    interaction = interaction_service.create_interaction(repo, _interaction_input(customer.id))

    assert interaction.id > 0
    assert interaction.customer_id == customer.id
    assert interaction.type == InteractionType.CALL
    assert interaction.summary == "Discussed project requirements"
    assert interaction.created_at is not None


def test_create_interaction_for_missing_customer(repo):
    with pytest.raises(ReferentialIntegrityError, match="Customer with id 999 does not exist"):
        interaction_service.create_interaction(repo, _interaction_input(999))

    assert interaction_service.get_interactions(repo) == []


def test_get_interaction_and_missing_interaction(repo, customer):
    created = interaction_service.create_interaction(repo, _interaction_input(customer.id))

    assert interaction_service.get_interaction(repo, created.id) == created
    assert interaction_service.get_interaction(repo, 999) is None


def test_interactions_by_customer_newest_first(repo, customer):
    base = datetime(2024, 1, 1, 9, 0)
    for offset, summary in [(2, "middle"), (0, "oldest"), (5, "newest")]:
        interaction_service.create_interaction(
            repo,
            _interaction_input(customer.id, date=base + timedelta(days=offset), summary=summary),
        )

    results = interaction_service.get_interactions_by_customer(repo, customer.id)

    assert [i.summary for i in results] == ["newest", "middle", "oldest"]
    assert interaction_service.get_interactions_by_customer(repo, 999) == []

    # Unfiltered listing keeps insertion order
    assert [i.summary for i in interaction_service.get_interactions(repo)] == [
        "middle", "oldest", "newest",
    ]


def test_update_interaction_partial(repo, customer):
    created = interaction_service.create_interaction(repo, _interaction_input(customer.id))

    updated = interaction_service.update_interaction(
        repo,
        created.id,
        InteractionUpdate(type="Meeting"),
    )

    assert updated.type == InteractionType.MEETING
    assert updated.summary == created.summary
    assert updated.date == created.date
    assert updated.created_at == created.created_at


def test_update_missing_interaction(repo, customer):
    created = interaction_service.create_interaction(repo, _interaction_input(customer.id))

    with pytest.raises(NotFoundError, match="Interaction with id 999 not found"):
        interaction_service.update_interaction(repo, 999, InteractionUpdate(summary="Nope"))

    assert interaction_service.get_interactions(repo) == [created]


def test_ids_beyond_integer_range(repo, customer):
    huge = 10**20

    with pytest.raises(ReferentialIntegrityError):
        interaction_service.create_interaction(repo, _interaction_input(huge))

    assert interaction_service.get_interaction(repo, huge) is None
    assert interaction_service.get_interactions_by_customer(repo, huge) == []

    with pytest.raises(NotFoundError):
        interaction_service.update_interaction(repo, huge, InteractionUpdate(summary="Nope"))


def test_interaction_dates_are_returned_in_utc(repo, customer):
    created = interaction_service.create_interaction(
        repo,
        _interaction_input(customer.id, date="2024-01-15T10:00:00+02:00"),
    )

    fetched = interaction_service.get_interactions_by_customer(repo, customer.id)[0]

    for interaction in (created, fetched):
        assert interaction.date == datetime(2024, 1, 15, 8, 0, tzinfo=timezone.utc)
        assert interaction.date.tzinfo == timezone.utc
        assert interaction.created_at.tzinfo == timezone.utc
