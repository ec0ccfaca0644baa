"""Base Pydantic model for cognito-auth.

Every record the adapter hands around (settings, token bundles, profiles)
inherits from this class so that they all share the same configuration:

- Strict field validation (no extra fields allowed)
- Immutable instances, so a settings object can be shared between
  concurrent requests without copying

Example:
    >>> from cognito_auth._base import FrozenModel
    >>>
    >>> class Point(FrozenModel):
    ...     x: int
    ...     y: int = 0
    >>>
    >>> Point(x=1).model_dump()
    {'x': 1, 'y': 0}
"""

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Base model for all cognito-auth Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable

    Use ``model_copy(update=...)`` to derive a modified instance.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
