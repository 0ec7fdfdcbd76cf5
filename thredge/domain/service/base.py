"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span threads and their entries,
    on top of the repositories.
    """

    pass
