"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services orchestrate repositories and aggregates; the rules about
    likes and comments themselves live on the Post aggregate.
    """

    pass
