"""
Snapshot file loading for podcheck.

Snapshot files hold a Kubernetes list document in YAML or JSON, either
as a typed list (PodList, NamespaceList) or as a generic List whose items
each declare their own kind, as produced by ``kubectl get -o yaml``.
Both forms decode to the same collection.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import yaml

from podcheck.errors import DecodeError, FileReadError
from podcheck.models import Namespace, Pod

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERIC_LIST_KIND = "List"


def read_document(path: str) -> Any:
    """
    Read and parse a YAML or JSON document.

    Raises:
        FileReadError: If the file cannot be read
        DecodeError: If the content is not valid YAML
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, getattr(e, "strerror", None) or str(e)) from e

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DecodeError(path, f"invalid YAML: {e}") from e


def decode_list(
    document: Any,
    item_kind: str,
    decode_item: Callable[[dict[str, Any]], T],
    path: str,
) -> list[T]:
    """
    Decode a typed or generic list document into model objects.

    Args:
        document: Parsed document
        item_kind: Expected item kind (e.g. "Pod")
        decode_item: Builds a model object from one item mapping
        path: Source path, used in error messages

    Returns:
        Decoded objects in document order

    Raises:
        DecodeError: If the document or any item does not match
    """
    typed_list_kind = f"{item_kind}List"

    if not isinstance(document, dict):
        got = "empty document" if document is None else type(document).__name__
        raise DecodeError(path, f"expected {typed_list_kind} or List, got {got}")

    kind = document.get("kind")
    if kind not in (typed_list_kind, GENERIC_LIST_KIND):
        raise DecodeError(path, f"expected {typed_list_kind} or List, got {kind or 'no kind'}")

    items = document.get("items")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise DecodeError(path, f"items: expected list, got {type(items).__name__}")

    # Typed list items usually omit kind; generic list items must declare it
    require_kind = kind == GENERIC_LIST_KIND

    decoded: list[T] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise DecodeError(
                path, f"expected {item_kind} mapping, got {type(item).__name__}", index=index
            )

        declared = item.get("kind")
        if declared is None and require_kind:
            raise DecodeError(path, f"item has no kind, expected {item_kind}", index=index)
        if declared is not None and declared != item_kind:
            raise DecodeError(
                path, f"expected {item_kind}, got {declared}", index=index, kind=str(declared)
            )

        try:
            decoded.append(decode_item(item))
        except ValueError as e:
            raise DecodeError(path, str(e), index=index, kind=item_kind) from e

    logger.debug(f"Decoded {len(decoded)} {item_kind} items from {kind} in {path}")
    return decoded


def load_pods_from_file(path: str) -> list[Pod]:
    """Load pods from a PodList or List snapshot file."""
    return decode_list(read_document(path), "Pod", Pod.from_dict, path)


def load_namespaces_from_file(path: str) -> list[Namespace]:
    """Load namespaces from a NamespaceList or List snapshot file."""
    return decode_list(read_document(path), "Namespace", Namespace.from_dict, path)
