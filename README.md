# helptrix-user

User profile handling for the Helptrix API: a service layer that enforces
ownership and filter rules, and a Flask blueprint that exposes profiles over
HTTP.

## Modules

- `helptrix_user.domain`: data types and errors.
  - `UserType` (`HELPER = "helper"`, `BUSINESS = "business"`), a `str` enum.
  - `AuthPayload(user_id, user_type)`: identity of the authenticated caller.
  - `ProfileFilters(category_id=None, actuation_days=[])`.
  - `UpdateProfileRequest(email="", biography="", categories=[])`, with
    `UpdateProfileRequest.from_json(data)` (raises `ValueError` on a body that
    is not an object, on non-string `email`/`biography`, or on `categories`
    that is not a list of non-negative integers; `null` counts as empty) and
    `to_json()` (leaves out empty fields).
  - `ProfileResponse(id, name="", email="", user_type="", reviews=[])`, whose
    `to_json()` returns `id` (as a string), `name`, `email`, `user_type` and
    `reviews`.
  - `UserError` and its subclasses `NotOwnerError`, `UserNotFoundError` and
    `CategoryHasLinkedServicesError`, each with a default message.
- `helptrix_user.service`: `UserService(repo)`, built on any object that
  satisfies the `UserRepository` protocol (`get_profile(user_id, filters)`,
  `update_profile(user_id, request)`, `delete_profile(user_id)`).
- `helptrix_user.controller`: `UserController(service)` and
  `create_blueprint(controller)`.

## Rules enforced by the service

- `get_profile(requester_id, requester_type, target_id, filters)`: any
  requester may view any profile. The filters are passed to the repository
  only when `requester_type` is `UserType.BUSINESS` (or the string
  `"business"`); otherwise an empty `ProfileFilters()` is passed instead.
- `update_profile(requester_id, target_id, request)` and
  `delete_profile(requester_id, target_id)`: only the owner may act. When the
  two ids differ, `NotOwnerError` is raised and the repository is not called.
- Errors raised by the repository pass through unchanged.

## Wiring it into a Flask application

```python
from flask import Flask, g

from helptrix_user.controller import UserController, create_blueprint
from helptrix_user.domain import AuthPayload
from helptrix_user.service import UserService

repo = MyUserRepository()  # your implementation of UserRepository
controller = UserController(UserService(repo))

app = Flask(__name__)
app.register_blueprint(create_blueprint(controller))


@app.before_request
def authenticate():
    # Replace with real authentication.
    g.authorization_payload = AuthPayload(user_id="...", user_type="business")
```

The handlers read the caller's identity from `flask.g.authorization_payload`,
which must hold an `AuthPayload` before the request reaches them.

## Endpoints

| Method | Path                 | Success                                     |
|--------|----------------------|---------------------------------------------|
| GET    | `/user/profile/<id>` | 200 with `ProfileResponse.to_json()` as JSON |
| PUT    | `/user/profile/<id>` | 204; the JSON body is an update request     |
| DELETE | `/user/profile/<id>` | 204                                         |

`GET` accepts two optional query parameters: `category_id`, used only when it
is made of ASCII digits and fits in an unsigned 64-bit integer (anything else
is ignored), and `actuation_day`, passed as a one-element list of days.

Failures are reported as JSON of the form `{"error": "<message>"}`:

| Status | When |
|--------|------|
| 400    | the path id is not a UUID (`invalid user id`), the requester id is not a UUID (`invalid requester id`), the body is not JSON (`invalid request body`), or the body fails `UpdateProfileRequest.from_json` |
| 403    | `NotOwnerError` (update and delete) |
| 404    | `UserNotFoundError` |
| 409    | `CategoryHasLinkedServicesError` (update) |
| 500    | any other error; the message is always `internal server error` |

## What this package does not do

- It has no storage: there is no `UserRepository` implementation, so you must
  supply one backed by your own database.
- It does no authentication: no tokens are checked, and the application must
  set `g.authorization_payload` itself.
- It provides no server or command to run; it is a blueprint to register in
  your own Flask application.