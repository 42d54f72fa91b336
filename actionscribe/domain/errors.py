"""Error taxonomy shared by the store, the services and the web layer."""


class ActionScribeError(Exception):
    """Base class for every handled ActionScribe error."""

    status_code = 500


class Unauthorized(ActionScribeError):
    """No session, or a session token nobody issued."""

    status_code = 401


class Forbidden(ActionScribeError):
    """The caller does not own the action it is touching."""

    status_code = 403


class NotFound(ActionScribeError):
    """Missing user record or unknown action id."""

    status_code = 404


class InvalidAction(ActionScribeError):
    status_code = 422


class ProviderFailure(ActionScribeError):
    """The language-model call failed (network, auth, quota, config)."""

    status_code = 500
