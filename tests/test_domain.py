import uuid

import pytest

from helptrix_user.domain import (
    AuthPayload,
    CategoryHasLinkedServicesError,
    NotOwnerError,
    ProfileFilters,
    ProfileResponse,
    UpdateProfileRequest,
    UserError,
    UserNotFoundError,
    UserType,
)


@pytest.mark.parametrize(
    "cls", [NotOwnerError, UserNotFoundError, CategoryHasLinkedServicesError]
)
def test_errors_share_base_class(cls):
    error = cls("boom")
    assert isinstance(error, UserError)
    assert str(error) == "boom"


@pytest.mark.parametrize(
    "cls", [NotOwnerError, UserNotFoundError, CategoryHasLinkedServicesError]
)
def test_errors_are_caught_by_base_class(cls):
    with pytest.raises(UserError) as excinfo:
        raise cls()
    assert type(excinfo.value) is cls
    assert str(excinfo.value) == cls.default_message


def test_error_default_message_is_used():
    assert str(UserNotFoundError()) == UserNotFoundError.default_message


def test_error_custom_message():
    assert str(NotOwnerError("custom")) == "custom"


def test_user_type_compares_with_plain_strings():
    assert UserType.BUSINESS == "business"
    assert UserType("helper") is UserType.HELPER


def test_auth_payload_fields():
    payload = AuthPayload(user_id="abc", user_type=UserType.HELPER)
    assert payload.user_id == "abc"
    assert payload.user_type == UserType.HELPER


def test_profile_filters_default_empty():
    filters = ProfileFilters()
    assert filters.category_id is None
    assert filters.actuation_days == []


def test_update_request_round_trip():
    request = UpdateProfileRequest(
        email="novo@example.com", biography="Meu perfil", categories=[1, 2]
    )
    assert UpdateProfileRequest.from_json(request.to_json()) == request


def test_update_request_to_json_omits_empty():
    request = UpdateProfileRequest(email="novo@example.com")
    assert request.to_json() == {"email": "novo@example.com"}


def test_update_request_from_json_ignores_unknown_keys():
    request = UpdateProfileRequest.from_json({"categories": [1], "other": 3})
    assert request.categories == [1]
    assert request.email == ""


@pytest.mark.parametrize(
    "data",
    [
        [],
        "text",
        {"email": 5},
        {"biography": ["x"]},
        {"categories": "1"},
        {"categories": [-1]},
        {"categories": [True]},
        {"categories": [1.5]},
    ],
)
def test_update_request_from_json_rejects_bad_input(data):
    with pytest.raises(ValueError):
        UpdateProfileRequest.from_json(data)


def test_profile_response_to_json():
    user_id = uuid.uuid4()
    response = ProfileResponse(
        id=user_id, name="Maria Silva", email="maria@example.com", user_type=UserType.HELPER
    )
    body = response.to_json()
    assert body["id"] == str(user_id)
    assert body["name"] == "Maria Silva"
    assert body["email"] == "maria@example.com"
    assert body["user_type"] == UserType.HELPER.value
    assert body["reviews"] == []