"""Shared schema helpers — name normalization used by both entities."""


def strip_required_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v
