"""
Testing helpers for recordql.

Generated resolvers are coroutines, so schemas are executed through
``Schema.execute_async``. These helpers drive it from synchronous code.
"""

from __future__ import annotations

from typing import Any, Optional

from asgiref.sync import async_to_sync


def execute_schema(
    schema: Any,
    query: str,
    variables: Optional[dict[str, Any]] = None,
    context: Any = None,
):
    """Execute ``query`` against ``schema`` and return the ExecutionResult."""
    return async_to_sync(schema.execute_async)(
        query, variable_values=variables, context_value=context
    )


def run(coroutine_function, *args: Any, **kwargs: Any) -> Any:
    """Call an async storage or resolver function from synchronous code."""
    return async_to_sync(coroutine_function)(*args, **kwargs)
