from ulid import ULID


def new_id() -> str:
    """Time-ordered, lexicographically sortable identifier (26 chars)."""
    return str(ULID())


def is_valid_id(value: str) -> bool:
    try:
        ULID.from_str(value)
    except (TypeError, ValueError):
        return False
    return True
