import copy

import pytest

from awesome_pizza.models import OrderStatus
from awesome_pizza.services.orders import OrderErrorKind
from awesome_pizza.services.validation import ValidationReason

PIZZA = {"itemName": "Pizza", "quantity": 1}


def test_valid_creation_builds_trimmed_draft(validator):
    result = validator.validate_creation(
        {"customerName": "  Mike  ", "contents": [{"itemName": " Quattro Stagioni ", "quantity": 3}]}
    )
    assert result.is_valid
    assert result.reason is None
    assert result.draft.customer_name == "Mike"
    assert result.draft.contents[0].item_name == "Quattro Stagioni"
    assert result.draft.contents[0].quantity == 3


@pytest.mark.parametrize(
    "payload, reason",
    [
        ({"customerName": "", "contents": [PIZZA]}, ValidationReason.MISSING_NAME),
        ({"customerName": "   ", "contents": [PIZZA]}, ValidationReason.MISSING_NAME),
        ({"contents": [PIZZA]}, ValidationReason.MISSING_NAME),
        ({"customerName": 42, "contents": [PIZZA]}, ValidationReason.MISSING_NAME),
        ({"customerName": "Alice", "contents": []}, ValidationReason.MISSING_CONTENTS),
        ({"customerName": "Alice"}, ValidationReason.MISSING_CONTENTS),
        ({"customerName": "Alice", "contents": {"itemName": "Pizza"}}, ValidationReason.MISSING_CONTENTS),
        ({"customerName": "Alice", "contents": [{"itemName": "", "quantity": 1}]}, ValidationReason.INVALID_ITEM_NAME),
        ({"customerName": "Alice", "contents": [{"quantity": 1}]}, ValidationReason.INVALID_ITEM_NAME),
        ({"customerName": "Alice", "contents": ["Pizza"]}, ValidationReason.INVALID_ITEM_NAME),
        ({"customerName": "Alice", "contents": [{"itemName": "Pizza", "quantity": 0}]}, ValidationReason.INVALID_ITEM_QUANTITY),
        ({"customerName": "Alice", "contents": [{"itemName": "Pizza", "quantity": -2}]}, ValidationReason.INVALID_ITEM_QUANTITY),
        ({"customerName": "Alice", "contents": [{"itemName": "Pizza", "quantity": "2"}]}, ValidationReason.INVALID_ITEM_QUANTITY),
        ({"customerName": "Alice", "contents": [{"itemName": "Pizza", "quantity": 1.5}]}, ValidationReason.INVALID_ITEM_QUANTITY),
        ({"customerName": "Alice", "contents": [{"itemName": "Pizza", "quantity": True}]}, ValidationReason.INVALID_ITEM_QUANTITY),
        ({"customerName": "Alice", "contents": [{"itemName": "Pizza"}]}, ValidationReason.INVALID_ITEM_QUANTITY),
    ],
)
def test_creation_rejections(validator, payload, reason):
    result = validator.validate_creation(payload)
    assert not result.is_valid
    assert result.reason == reason
    assert result.draft is None
    assert result.error_message


def test_creation_rejects_bad_item_after_good_ones(validator):
    result = validator.validate_creation(
        {"customerName": "Alice", "contents": [PIZZA, {"itemName": "Pizza", "quantity": 0}]}
    )
    assert result.reason == ValidationReason.INVALID_ITEM_QUANTITY


def test_integral_float_quantity_is_normalized(validator):
    result = validator.validate_creation(
        {"customerName": "Alice", "contents": [{"itemName": "Pizza", "quantity": 2.0}]}
    )
    assert result.is_valid
    assert result.draft.contents[0].quantity == 2
    assert isinstance(result.draft.contents[0].quantity, int)


def test_creation_ignores_status_and_id(validator):
    result = validator.validate_creation(
        {"id": "order-x", "status": "DELIVERED", "customerName": "Alice", "contents": [PIZZA]}
    )
    assert result.is_valid
    assert not hasattr(result.draft, "status")
    assert not hasattr(result.draft, "id")


def test_validation_does_not_mutate_input(validator):
    payload = {"customerName": "  Alice ", "contents": [{"itemName": " Pizza ", "quantity": 2.0}]}
    snapshot = copy.deepcopy(payload)
    validator.validate_creation(payload)
    validator.validate_update(payload)
    assert payload == snapshot


def test_update_accepts_empty_patch(validator):
    result = validator.validate_update({})
    assert result.is_valid
    assert result.patch.model_fields_set == set()


def test_update_status_only(validator):
    result = validator.validate_update({"status": "DELIVERING"})
    assert result.is_valid
    assert result.patch.status == OrderStatus.DELIVERING
    assert result.patch.customer_name is None
    assert result.patch.contents is None


@pytest.mark.parametrize("status", [s.value for s in OrderStatus])
def test_update_accepts_every_status(validator, status):
    assert validator.validate_update({"status": status}).is_valid


@pytest.mark.parametrize("status", ["SHIPPED", "received", "", None, 1])
def test_update_rejects_unknown_status(validator, status):
    result = validator.validate_update({"status": status})
    assert not result.is_valid
    assert result.reason == ValidationReason.INVALID_STATUS


def test_update_rejects_invalid_status_with_valid_fields(validator):
    result = validator.validate_update(
        {"customerName": "Alice", "status": "SHIPPED", "contents": [PIZZA]}
    )
    assert result.reason == ValidationReason.INVALID_STATUS


@pytest.mark.parametrize(
    "payload, reason",
    [
        ({"customerName": ""}, ValidationReason.MISSING_NAME),
        ({"customerName": None}, ValidationReason.MISSING_NAME),
        ({"contents": []}, ValidationReason.MISSING_CONTENTS),
        ({"contents": [{"itemName": "  ", "quantity": 1}]}, ValidationReason.INVALID_ITEM_NAME),
        ({"contents": [{"itemName": "Pizza", "quantity": -1}]}, ValidationReason.INVALID_ITEM_QUANTITY),
    ],
)
def test_update_checks_present_fields(validator, payload, reason):
    result = validator.validate_update(payload)
    assert not result.is_valid
    assert result.reason == reason


def test_update_ignores_id(validator):
    result = validator.validate_update({"id": "order-999", "customerName": "Bob"})
    assert result.is_valid
    assert result.patch.customer_name == "Bob"
    assert not hasattr(result.patch, "id")



def test_rejection_carries_validation_kind(validator):
    result = validator.validate_update({"status": "SHIPPED"})
    assert result.error_kind == OrderErrorKind.VALIDATION
    assert result.error_message == "Status must be one of: RECEIVED, DELIVERING, DELIVERED, CANCELED"


def test_accepted_payload_has_no_error_kind(validator):
    result = validator.validate_creation({"customerName": "Alice", "contents": [PIZZA]})
    assert result.error_kind is None
    assert result.error_message is None


def test_blank_name_with_loosely_typed_quantities_is_rejected(validator):
    result = validator.validate_creation(
        {
            "customerName": "   ",
            "contents": [{"itemName": "P", "quantity": "2"}, {"itemName": "Q", "quantity": True}],
        }
    )
    assert not result.is_valid
    assert result.reason == ValidationReason.MISSING_NAME
    assert result.draft is None


@pytest.mark.parametrize("quantity", ["2", True, False, 1.5, None])
def test_string_bool_and_fractional_quantities_never_build_a_draft(validator, quantity):
    result = validator.validate_creation(
        {"customerName": "Alice", "contents": [{"itemName": "Pizza", "quantity": quantity}]}
    )
    assert not result.is_valid
    assert result.reason == ValidationReason.INVALID_ITEM_QUANTITY


def test_update_patch_remembers_which_fields_were_sent(validator):
    result = validator.validate_update({"status": "CANCELED", "contents": [PIZZA]})
    assert result.patch.model_fields_set == {"status", "contents"}
