"""Tests for the ledger append boundary."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

import pytest

from fintrack.domain.entities import (
    LedgerCollection,
    RecurringInterval,
    TransactionType,
)
from fintrack.domain.errors import DomainError, ValidationError


def test_add_transaction(ledger_service, make_transaction):
    """Test appending a transaction."""
    transaction = make_transaction("42.00", description="Lunch")
    ledger_service.add_transaction(transaction)

    assert ledger_service.list_transactions() == (transaction,)


def test_insertion_order_is_preserved(ledger_service, make_transaction):
    """Test that listings come back in the order records were appended."""
    records = [
        make_transaction("1", id="z"),
        make_transaction("2", id="a"),
        make_transaction("3", id="m"),
    ]
    for record in records:
        ledger_service.add_transaction(record)

    assert [t.id for t in ledger_service.list_transactions()] == ["z", "a", "m"]


def test_duplicate_id_is_rejected(ledger_service, make_transaction):
    """Test that a duplicate id fails and leaves the collection unchanged."""
    ledger_service.add_transaction(make_transaction("10", id="dup"))

    with pytest.raises(ValidationError, match="already exists"):
        ledger_service.add_transaction(make_transaction("99", id="dup"))

    assert len(ledger_service.list_transactions()) == 1
    assert ledger_service.list_transactions()[0].amount == Decimal("10")


def test_same_id_in_different_collections(ledger_service, make_transaction, make_asset):
    """Test that ids only need to be unique within one collection."""
    ledger_service.add_transaction(make_transaction(id="shared"))
    ledger_service.add_asset(make_asset(id="shared"))

    assert len(ledger_service.list_transactions()) == 1
    assert len(ledger_service.list_assets()) == 1


def test_validation_error_is_value_error(ledger_service, make_transaction):
    """Test that ValidationError keeps ValueError compatibility."""
    with pytest.raises(ValueError):
        ledger_service.add_transaction(make_transaction("-1"))
    assert issubclass(ValidationError, DomainError)


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"amount": Decimal("-0.01")}, "must not be negative"),
        ({"amount": None}, "'amount' is required"),
        ({"amount": 12.5}, "decimal amount"),
        ({"amount": Decimal("NaN")}, "finite"),
        ({"category": ""}, "'category' is required"),
        ({"category": "   "}, "'category' is required"),
        ({"id": ""}, "'id' is required"),
        ({"type": "transfer"}, "Invalid type"),
        ({"date": "2024-01-01"}, "must be a datetime"),
        ({"date": None}, "'date' is required"),
    ],
)
def test_invalid_transactions_are_rejected(
    ledger_service, make_transaction, changes, message
):
    """Test validation rules on transactions."""
    record = replace(make_transaction(), **changes)

    with pytest.raises(ValidationError, match=message):
        ledger_service.add_transaction(record)

    assert ledger_service.list_transactions() == ()


def test_empty_description_is_allowed(ledger_service, make_transaction):
    """Test that description is optional."""
    ledger_service.add_transaction(make_transaction(description=""))
    ledger_service.add_transaction(replace(make_transaction(), description=None))

    descriptions = [t.description for t in ledger_service.list_transactions()]
    assert descriptions == ["", ""]


def test_zero_amount_is_allowed(ledger_service, make_transaction):
    """Test that zero is a valid non-negative amount."""
    ledger_service.add_transaction(make_transaction("0"))
    assert ledger_service.list_transactions()[0].amount == Decimal("0")


def test_integer_amount_is_accepted(ledger_service, make_transaction):
    """Test that integer amounts are stored as exact decimals."""
    ledger_service.add_transaction(replace(make_transaction(), amount=25))
    assert ledger_service.list_transactions()[0].amount == Decimal("25")


def test_string_enum_values_are_accepted(ledger_service, make_transaction):
    """Test that plain enum spellings are accepted and come back as enums."""
    ledger_service.add_transaction(replace(make_transaction(), type="income"))
    assert ledger_service.list_transactions()[0].type is TransactionType.INCOME


def test_wrong_record_kind_is_rejected(ledger_service, make_asset):
    """Test appending an asset to the transactions collection."""
    with pytest.raises(ValidationError, match="expected Transaction"):
        ledger_service.append(LedgerCollection.TRANSACTIONS, make_asset())


def test_unknown_collection_is_rejected(ledger_service, make_asset):
    """Test appending to a collection that does not exist."""
    with pytest.raises(ValidationError, match="Invalid collection"):
        ledger_service.append("budgets", make_asset())


def test_append_by_collection_name(ledger_service, make_asset):
    """Test append with the collection given as a plain string."""
    asset = make_asset("250")
    ledger_service.append("assets", asset)
    assert ledger_service.list_assets() == (asset,)


class TestRecurringTransactions:
    """Tests for appending recurring transactions."""

    def test_add_recurring(self, ledger_service, make_recurring):
        recurring = make_recurring(
            "15.99", interval=RecurringInterval.WEEKLY, description="Gym"
        )
        ledger_service.add_recurring_transaction(recurring)
        assert ledger_service.list_recurring_transactions() == (recurring,)

    def test_inactive_is_stored(self, ledger_service, make_recurring):
        ledger_service.add_recurring_transaction(make_recurring(is_active=False))
        assert ledger_service.list_recurring_transactions()[0].is_active is False

    def test_invalid_interval(self, ledger_service, make_recurring):
        with pytest.raises(ValidationError, match="Invalid interval"):
            ledger_service.add_recurring_transaction(
                replace(make_recurring(), interval="daily")
            )

    def test_is_active_must_be_boolean(self, ledger_service, make_recurring):
        with pytest.raises(ValidationError, match="is_active"):
            ledger_service.add_recurring_transaction(
                replace(make_recurring(), is_active="yes")
            )

    def test_start_date_is_required(self, ledger_service, make_recurring):
        with pytest.raises(ValidationError, match="start_date"):
            ledger_service.add_recurring_transaction(
                replace(make_recurring(), start_date=None)
            )

    def test_duplicate_id(self, ledger_service, make_recurring):
        ledger_service.add_recurring_transaction(make_recurring(id="r1"))
        with pytest.raises(ValidationError):
            ledger_service.add_recurring_transaction(make_recurring(id="r1"))
        assert len(ledger_service.list_recurring_transactions()) == 1


class TestAssetsAndLiabilities:
    """Tests for appending assets and liabilities."""

    def test_add_asset_and_liability(self, ledger_service, make_asset, make_liability):
        asset = make_asset("5000", name="Brokerage")
        liability = make_liability("1200", name="Car loan")
        ledger_service.add_asset(asset)
        ledger_service.add_liability(liability)

        assert ledger_service.list_assets() == (asset,)
        assert ledger_service.list_liabilities() == (liability,)

    def test_empty_name_is_rejected(self, ledger_service, make_asset, make_liability):
        with pytest.raises(ValidationError, match="'name' is required"):
            ledger_service.add_asset(make_asset(name=""))
        with pytest.raises(ValidationError, match="'name' is required"):
            ledger_service.add_liability(make_liability(name=""))

    def test_negative_value_is_rejected(self, ledger_service, make_asset):
        with pytest.raises(ValidationError, match="'value' must not be negative"):
            ledger_service.add_asset(make_asset("-1"))
        assert ledger_service.list_assets() == ()

    def test_liability_type_must_match(self, ledger_service, make_liability):
        with pytest.raises(ValidationError, match="Invalid type 'cash'"):
            ledger_service.add_liability(replace(make_liability(), type="cash"))

    def test_asset_type_must_match(self, ledger_service, make_asset):
        with pytest.raises(ValidationError, match="Invalid type 'mortgage'"):
            ledger_service.add_asset(replace(make_asset(), type="mortgage"))


def test_records_keep_timezone(ledger_service, make_transaction):
    """Test that dates round-trip with their offset."""
    from datetime import timezone

    stamp = datetime(2024, 3, 1, 9, 15, tzinfo=timezone.utc)
    ledger_service.add_transaction(make_transaction(date=stamp))
    assert ledger_service.list_transactions()[0].date == stamp
