"""
Error kinds raised by the career pilot core.

AgentError is the single error the agent client surfaces to its callers.
The ServiceException family is raised by controller operations and mapped
to HTTP responses by the web layer.
"""


class CareerPilotError(Exception):
    """Base exception for all career pilot errors."""
    pass


class AgentError(CareerPilotError):
    """Raised when a remote agent operation fails for any reason.

    Covers transport failures, non-2xx responses and responses that do not
    match the requested schema. The underlying exception is chained.
    """
    pass


class ServiceException(CareerPilotError):
    """Base exception for controller/service layer errors."""
    pass


class JobNotFoundError(ServiceException):
    """Raised when a job id is neither in the discovery list nor tracked."""
    pass


class TrackedJobNotFoundError(ServiceException):
    """Raised when a status update targets an id absent from the tracking store."""
    pass


class InvalidTransitionError(ServiceException):
    """Raised when a navigation move is not allowed from the current step."""
    pass


class InvalidTrackingStatusError(ServiceException):
    """Raised when a tracking operation is given a status it cannot assign."""
    pass
