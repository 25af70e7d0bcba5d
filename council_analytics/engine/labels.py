"""Anonymous label resolution."""

from collections.abc import Mapping
from typing import Any


def resolve_label(label: Any, label_to_model: Mapping[str, str] | None) -> str | None:
    """
    Resolve an anonymous label to the model it stood for in one turn.

    Evaluator text often carries stray whitespace around labels, so the
    label is stripped before lookup.

    Returns:
        The model identifier, or None if the label cannot be resolved
    """
    if not label_to_model or not isinstance(label, str):
        return None
    return label_to_model.get(label.strip())
