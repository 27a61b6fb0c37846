"""Exceptions raised by the construction app's integrations and flows."""


class IntegrationError(Exception):
    """An upstream call (CRM, chat, identity provider, store) failed."""

    def __init__(self, message, details=None, status_code=None):
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else message
        self.status_code = status_code


class HubSpotError(IntegrationError):
    pass


class SlackError(IntegrationError):
    pass


class IdentityError(IntegrationError):
    pass


class ProfileError(IntegrationError):
    pass


class InconsistentStateError(IntegrationError):
    """A compensating action failed; an orphaned resource was left behind."""


class UploadError(IntegrationError):
    """One step of the document upload chain failed; later steps were skipped."""

    def __init__(self, step, message, details=None):
        super().__init__(message, details=details)
        self.step = step


class StatusTransitionError(Exception):
    pass
