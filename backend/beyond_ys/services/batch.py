from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Iterator

from pymongo import ReplaceOne, UpdateOne

from ..collections import CACHE, CACHE_LIST_PAGES, PAGE_PREFIXES


class _DeleteField:
    def __repr__(self) -> str:
        return "DELETE_FIELD"


DELETE_FIELD = _DeleteField()


@dataclass(frozen=True)
class ArrayUnion:
    """Append each value that is not already in the array."""

    values: tuple[Any, ...]

    def __init__(self, *values: Any):
        object.__setattr__(self, "values", tuple(values))


@dataclass(frozen=True)
class ArrayRemove:
    """Remove every occurrence of each value from the array."""

    values: tuple[Any, ...]

    def __init__(self, *values: Any):
        object.__setattr__(self, "values", tuple(values))


@dataclass
class BatchOp:
    kind: str  # "set" | "update"
    collection: str
    doc_id: str
    data: dict[str, Any] = field(default_factory=dict)
    guard_absent: str | None = None


class WriteBatch:
    """Ordered writes across documents, committed all-or-nothing by a store."""

    def __init__(self) -> None:
        self.ops: list[BatchOp] = []

    def __len__(self) -> int:
        return len(self.ops)

    def __bool__(self) -> bool:
        return bool(self.ops)

    def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> "WriteBatch":
        self.ops.append(BatchOp("set", collection, doc_id, dict(data)))
        return self

    def update(
        self,
        collection: str,
        doc_id: str,
        fields: dict[str, Any],
        guard_absent: str | None = None,
    ) -> "WriteBatch":
        if not fields:
            return self
        self.ops.append(BatchOp("update", collection, doc_id, dict(fields), guard_absent))
        return self

    def extend(self, other: "WriteBatch") -> "WriteBatch":
        self.ops.extend(other.ops)
        return self

    def touched(self) -> list[tuple[str, str]]:
        seen: dict[tuple[str, str], None] = {}
        for op in self.ops:
            seen.setdefault((op.collection, op.doc_id), None)
        return list(seen)

    def ops_for(self, collection: str, doc_id: str) -> list[BatchOp]:
        return [op for op in self.ops if op.collection == collection and op.doc_id == doc_id]

    def cache_updates(self) -> Iterator[BatchOp]:
        for op in self.ops:
            if op.collection == CACHE:
                yield op

    def affected_paths(self) -> list[str]:
        """Page paths whose rendered output depends on a touched document."""
        paths: dict[str, None] = {}
        for collection, doc_id in self.touched():
            if collection == CACHE:
                page = CACHE_LIST_PAGES.get(doc_id)
                if page:
                    paths.setdefault(page, None)
            elif collection in PAGE_PREFIXES:
                paths.setdefault(f"{PAGE_PREFIXES[collection]}/{doc_id}", None)
        return list(paths)

    def to_requests(self) -> tuple[list[tuple[str, UpdateOne, str]], list[tuple[str, Any]]]:
        """Compile to pymongo requests.

        Returns ``(guarded, rest)``. Guarded requests carry the key that must
        be absent and have to run before everything else.
        """
        guarded: list[tuple[str, UpdateOne, str]] = []
        rest: list[tuple[str, Any]] = []
        for op in self.ops:
            request = compile_op(op)
            if op.guard_absent is not None:
                guarded.append((op.collection, request, op.guard_absent))
            else:
                rest.append((op.collection, request))
        return guarded, rest


def compile_op(op: BatchOp) -> ReplaceOne | UpdateOne:
    if op.kind == "set":
        return ReplaceOne({"_id": op.doc_id}, op.data, upsert=True)

    update: dict[str, dict[str, Any]] = {}
    for path, value in op.data.items():
        if value is DELETE_FIELD:
            update.setdefault("$unset", {})[path] = ""
        elif isinstance(value, ArrayUnion):
            update.setdefault("$addToSet", {})[path] = {"$each": list(value.values)}
        elif isinstance(value, ArrayRemove):
            update.setdefault("$pull", {})[path] = {"$in": list(value.values)}
        else:
            update.setdefault("$set", {})[path] = value

    if op.guard_absent is not None:
        return UpdateOne({"_id": op.doc_id, op.guard_absent: {"$exists": False}}, update)
    # cache documents are created on first write
    return UpdateOne({"_id": op.doc_id}, update, upsert=op.collection == CACHE)


def _walk(document: dict[str, Any], path: str, create: bool) -> tuple[dict[str, Any] | None, str]:
    parts = path.split(".")
    node: Any = document
    for part in parts[:-1]:
        child = node.get(part)
        if not isinstance(child, dict):
            if not create:
                return None, parts[-1]
            child = {}
            node[part] = child
        node = child
    return node, parts[-1]


def apply_update(document: dict[str, Any], fields: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``document`` with an update applied the way the store applies it."""
    result = copy.deepcopy(document)
    for path, value in fields.items():
        if value is DELETE_FIELD:
            parent, key = _walk(result, path, create=False)
            if parent is not None:
                parent.pop(key, None)
        elif isinstance(value, ArrayUnion):
            parent, key = _walk(result, path, create=True)
            current = list(parent.get(key) or [])
            for item in value.values:
                if item not in current:
                    current.append(item)
            parent[key] = current
        elif isinstance(value, ArrayRemove):
            parent, key = _walk(result, path, create=False)
            if parent is not None and key in parent:
                parent[key] = [item for item in parent[key] if item not in value.values]
        else:
            parent, key = _walk(result, path, create=True)
            parent[key] = copy.deepcopy(value)
    return result


def apply_op(document: dict[str, Any] | None, op: BatchOp) -> dict[str, Any] | None:
    """Apply one batch operation to a stored document (None when absent)."""
    if op.kind == "set":
        return copy.deepcopy(op.data)
    if document is None:
        if op.collection != CACHE or op.guard_absent is not None:
            return None
        document = {}
    if op.guard_absent is not None and op.guard_absent in document:
        return document
    return apply_update(document, op.data)
