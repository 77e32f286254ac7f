"""Custom Dishka scopes for YOST."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """YOST dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (engine, HTTP clients, blob store)
    - UOW: Unit of Work (one HTTP request or CLI invocation)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
