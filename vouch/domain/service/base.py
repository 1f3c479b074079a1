"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold workflow logic that spans repository calls.
    """

    pass
