"""ID generators."""

import uuid


def generate_id() -> str:
    """Generate a new entity identifier (canonical UUID4 string).

    Returns:
        Lowercase hyphenated UUID, the same form EntityId.parse produces.
    """
    return str(uuid.uuid4())
