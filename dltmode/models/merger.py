"""Deep merge algorithm for pipeline definition inheritance."""

import copy
from typing import Any, Dict, List


def merge_definitions(parent: Dict[str, Any], child: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge parent definition into child definition.

    Rules:
    - Scalars: child overrides parent
    - Dicts: deep merge (recursive)
    - Lists: special handling
      - steps: parent steps followed by child steps; a child step with the
        same name as a parent step replaces it in place
      - Other lists: child overrides
    - Missing keys: inherit from parent

    Args:
        parent: Parent definition dictionary
        child: Child definition dictionary

    Returns:
        Merged definition dictionary
    """
    result = parent.copy()

    child_delete = child.get("delete")
    if child_delete is not None:
        result["delete"] = child_delete

    for key, child_value in child.items():
        if key == "delete":
            continue

        if key not in result:
            result[key] = child_value
        elif key == "steps" and isinstance(child_value, list) and isinstance(result[key], list):
            result[key] = _merge_steps(result[key], child_value)
        elif isinstance(child_value, dict) and isinstance(result[key], dict):
            result[key] = merge_definitions(result[key], child_value)
        else:
            result[key] = child_value

    return result


def _merge_steps(parent_steps: List[Any], child_steps: List[Any]) -> List[Any]:
    """Concatenate step lists, letting same-named child steps replace parent ones."""
    merged = list(parent_steps)
    index_by_name = {
        step["name"]: i
        for i, step in enumerate(merged)
        if isinstance(step, dict) and "name" in step
    }

    for step in child_steps:
        name = step.get("name") if isinstance(step, dict) else None
        if name is not None and name in index_by_name:
            merged[index_by_name[name]] = step
        else:
            merged.append(step)

    return merged


def apply_delete_semantics(definition: Dict[str, Any], delete_paths: List[str]) -> Dict[str, Any]:
    """
    Remove the given keys from a definition.

    Args:
        definition: Definition dictionary
        delete_paths: List of dot-separated paths to delete (e.g., ['settings.default_language'])

    Returns:
        Definition dictionary with specified paths removed
    """
    result = copy.deepcopy(definition)

    for path in delete_paths:
        _delete_path(result, path)

    return result


def _delete_path(data: Dict[str, Any], path: str) -> None:
    """Delete a nested path from dictionary using dot notation."""
    parts = path.split(".")
    current = data

    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            return
        current = current[part]

    if parts[-1] in current:
        del current[parts[-1]]
