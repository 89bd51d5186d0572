"""Field visitor emitting description comments above annotated fields."""

from __future__ import annotations

from ..metadata import field_description
from .encoder import FieldEmission


class CommentVisitor:
    """Attach each field's description as a standalone `#` line above its key."""

    def __call__(self, emission: FieldEmission) -> None:
        description = field_description(emission.owner, emission.field)
        if description is None:
            return
        emission.mapping.yaml_set_comment_before_after_key(
            emission.key,
            before=description,
            indent=emission.column,
        )
