"""
Helpers de l'éditeur de propriétés.

Mise à jour par chemin dans le sac de props d'un bloc (Dict[str, Any]).
Toutes les fonctions renvoient le dict partiel à passer à update_block_props,
sans jamais modifier les props d'origine.
"""
import copy
from typing import Any, Dict, List, Mapping, Sequence, Union

PathPart = Union[str, int]


def set_prop_path(props: Mapping[str, Any], path: Sequence[PathPart], value: Any) -> Dict[str, Any]:
    """
    Affecte `value` au chemin `path` ; crée les dicts intermédiaires manquants.

    >>> set_prop_path({"hours": {"monday": "9-18"}}, ["hours", "sunday"], "Closed")
    {'hours': {'monday': '9-18', 'sunday': 'Closed'}}
    """
    if not path:
        raise ValueError("chemin vide")
    head = path[0]
    if not isinstance(head, str):
        raise TypeError("le premier segment du chemin doit être une clé de props")
    current = props.get(head)
    return {head: _set_in(current, list(path[1:]), value)}


def _set_in(node: Any, path: List[PathPart], value: Any) -> Any:
    if not path:
        return copy.deepcopy(value)
    key, rest = path[0], path[1:]
    if isinstance(key, int):
        items = list(node) if isinstance(node, list) else []
        if not 0 <= key < len(items):
            raise IndexError(f"index {key} hors de la liste ({len(items)} éléments)")
        items[key] = _set_in(items[key], rest, value)
        return items
    container = dict(node) if isinstance(node, Mapping) else {}
    container[key] = _set_in(container.get(key), rest, value)
    return container


def add_array_item(props: Mapping[str, Any], array_key: str, item: Any) -> Dict[str, Any]:
    current = props.get(array_key) or []
    return {array_key: [*current, copy.deepcopy(item)]}


def remove_array_item(props: Mapping[str, Any], array_key: str, index: int) -> Dict[str, Any]:
    current = props.get(array_key) or []
    return {array_key: [x for i, x in enumerate(current) if i != index]}


def update_array_item(props: Mapping[str, Any], array_key: str, index: int, item: Any) -> Dict[str, Any]:
    current = list(props.get(array_key) or [])
    if not 0 <= index < len(current):
        return {array_key: current}
    current[index] = copy.deepcopy(item)
    return {array_key: current}
