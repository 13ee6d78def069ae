"""HTTP handlers for the user profile endpoints."""

from __future__ import annotations

import functools
import uuid

from flask import Blueprint, g, jsonify, request

from helptrix_user.domain import (
    CategoryHasLinkedServicesError,
    NotOwnerError,
    ProfileFilters,
    UpdateProfileRequest,
    UserNotFoundError,
)

_MAX_UINT64 = 2**64 - 1


class _Abort(Exception):
    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.status = status


def _responds(handler):
    @functools.wraps(handler)
    def wrapper(*args, **kwargs):
        try:
            return handler(*args, **kwargs)
        except _Abort as err:
            return jsonify({"error": str(err)}), err.status

    return wrapper


def _parse_uuid(value, message: str) -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise _Abort(message, 400) from None


def _ids(user_id: str):
    payload = g.authorization_payload
    target_id = _parse_uuid(user_id, "invalid user id")
    return payload, target_id, _parse_uuid(payload.user_id, "invalid requester id")


def _call(action, *statuses):
    try:
        return action()
    except Exception as err:
        for kind, status in statuses:
            if isinstance(err, kind):
                raise _Abort(str(err), status) from err
        raise _Abort("internal server error", 500) from err


class UserController:
    """Turns HTTP requests into service calls and service errors into status codes."""

    def __init__(self, service) -> None:
        self.service = service

    @_responds
    def get_profile(self, user_id):
        payload, target_id, requester_id = _ids(user_id)
        filters = ProfileFilters()
        category = request.args.get("category_id", "")
        if category.isascii() and category.isdigit() and int(category) <= _MAX_UINT64:
            filters.category_id = int(category)
        if day := request.args.get("actuation_day", ""):
            filters.actuation_days = [day]
        response = _call(
            lambda: self.service.get_profile(requester_id, payload.user_type, target_id, filters),
            (UserNotFoundError, 404),
        )
        return jsonify(response.to_json()), 200

    @_responds
    def update_profile(self, user_id):
        _, target_id, requester_id = _ids(user_id)
        body = request.get_json(silent=True)
        if body is None:
            raise _Abort("invalid request body", 400)
        try:
            update = UpdateProfileRequest.from_json(body)
        except ValueError as err:
            raise _Abort(str(err), 400) from err
        _call(
            lambda: self.service.update_profile(requester_id, target_id, update),
            (NotOwnerError, 403),
            (UserNotFoundError, 404),
            (CategoryHasLinkedServicesError, 409),
        )
        return "", 204

    @_responds
    def delete_profile(self, user_id):
        _, target_id, requester_id = _ids(user_id)
        _call(
            lambda: self.service.delete_profile(requester_id, target_id),
            (NotOwnerError, 403),
            (UserNotFoundError, 404),
        )
        return "", 204


def create_blueprint(controller: UserController) -> Blueprint:
    """Build a blueprint serving /user/profile/<id> with the given controller."""
    blueprint = Blueprint("user", __name__)
    for name, method in (("get_profile", "GET"), ("update_profile", "PUT"), ("delete_profile", "DELETE")):
        blueprint.add_url_rule(
            "/user/profile/<user_id>", name, getattr(controller, name), methods=[method]
        )
    return blueprint