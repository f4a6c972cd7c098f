"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span aggregates (votes touching product
    scores, replies checking their parent) and are built per request by the
    container.
    """

    pass
