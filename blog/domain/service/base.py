"""Base class for domain services."""


class Service:
    """Domain service: read logic spanning more than one repository.

    Services never open sessions; they receive request-scoped repositories.
    """
