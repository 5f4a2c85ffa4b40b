"""Connection pool shared by every unit of work."""

from psycopg_pool import AsyncConnectionPool


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create the application's async pool; each unit of work borrows one connection.

    The pool starts closed. PoolLifespanMiddleware opens it on ASGI startup and
    the readiness endpoint pings through it.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )
