"""Shared pydantic base and field types for API payloads.

Python attributes stay snake_case; JSON uses camelCase aliases and accepts either form on input.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _unique_strings(values: list[str] | None) -> list[str] | None:
    """Drop blanks and duplicates, keeping first-seen order."""
    if values is None:
        return None
    seen: dict[str, None] = {}
    for value in values:
        value = value.strip()
        if value:
            seen.setdefault(value, None)
    return list(seen)


def _strip(value):
    return value.strip() if isinstance(value, str) else value


def _reject_null(value):
    if value is None:
        raise ValueError("may not be null")
    return value


# Skills behave as a set but keep the order they were entered in
SkillSet = Annotated[list[str], AfterValidator(_unique_strings)]

# Surrounding whitespace is dropped before any length or pattern check
TrimmedStr = Annotated[str, BeforeValidator(_strip)]

# Optional in a partial update, but an explicit null is refused
PatchStr = Annotated[str | None, AfterValidator(_reject_null)]
PatchBool = Annotated[bool | None, AfterValidator(_reject_null)]
PatchSkillSet = Annotated[list[str] | None, AfterValidator(_reject_null), AfterValidator(_unique_strings)]
