"""Consistent hash ring with virtual nodes."""

from __future__ import annotations

import threading
from bisect import bisect_left, insort
from collections.abc import Callable
from dataclasses import dataclass, field

__all__ = [
    "DEFAULT_VIRTUAL_NODES_PER_NODE",
    "DuplicateNodeError",
    "HashRingError",
    "NoNodesError",
    "NodeNotFoundError",
    "Ring",
    "fnv1a_64",
]

DEFAULT_VIRTUAL_NODES_PER_NODE = 1000

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF

HashFunc = Callable[[bytes], int]


class HashRingError(Exception):
    """Base class for hash ring errors."""


class NoNodesError(HashRingError, LookupError):
    """Raised when a lookup is made on a ring without nodes."""

    def __init__(self, message: str = "no nodes available") -> None:
        super().__init__(message)


class NodeNotFoundError(HashRingError, KeyError):
    """Raised when a node is not part of the ring."""

    def __init__(self, message: str = "node not found") -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class DuplicateNodeError(HashRingError, ValueError):
    """Raised when a node is already part of the ring."""

    def __init__(self, message: str = "node already exists") -> None:
        super().__init__(message)


def fnv1a_64(data: bytes) -> int:
    """Return the 64-bit FNV-1a hash of ``data``."""
    value = _FNV64_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV64_PRIME) & _MASK64
    return value


@dataclass
class _Node:
    key: str
    virtual_nodes: list[int] = field(default_factory=list)


class Ring:
    """A consistent hash ring mapping keys to nodes via virtual nodes."""

    def __init__(
        self,
        replicas: int = DEFAULT_VIRTUAL_NODES_PER_NODE,
        hash_func: HashFunc = fnv1a_64,
    ) -> None:
        if replicas < 0:
            raise ValueError("replicas must not be negative")
        self._replicas = replicas
        self._hash_func = hash_func
        self._lock = threading.RLock()
        self._nodes: dict[str, _Node] = {}
        # Sorted hashes of all virtual nodes: the ring itself.
        self._virtual_nodes: list[int] = []
        # Virtual node hash -> owning node key.
        self._mapping: dict[int, str] = {}

    @property
    def replicas(self) -> int:
        """Number of virtual nodes created per node."""
        return self._replicas

    def _hash(self, key: str) -> int:
        return self._hash_func(key.encode("utf-8")) & _MASK64

    def add_node(self, node_key: str) -> None:
        """Add a node and its virtual nodes to the ring."""
        with self._lock:
            node = _Node(node_key)
            for index in range(self._replicas):
                virtual_hash = self._hash(f"{node_key}:{index}")
                insort(self._virtual_nodes, virtual_hash)
                self._mapping[virtual_hash] = node_key
                node.virtual_nodes.append(virtual_hash)
            self._nodes[node_key] = node

    def delete_node(self, node_key: str) -> None:
        """Remove a node and its virtual nodes from the ring."""
        with self._lock:
            node = self._nodes.pop(node_key, None)
            if node is None:
                raise NodeNotFoundError()
            for virtual_hash in node.virtual_nodes:
                self._mapping.pop(virtual_hash, None)
            self._virtual_nodes = sorted(self._mapping)

    def get_node(self, key: str) -> str:
        """Return the node responsible for ``key``."""
        with self._lock:
            if not self._virtual_nodes:
                raise NoNodesError()
            position = bisect_left(self._virtual_nodes, self._hash(key))
            if position == len(self._virtual_nodes):
                position = 0
            return self._mapping[self._virtual_nodes[position]]

    def nodes(self) -> list[str]:
        """Return the keys of all nodes in the ring."""
        with self._lock:
            return list(self._nodes)

    def virtual_nodes(self) -> list[int]:
        """Return the sorted hashes of all virtual nodes."""
        with self._lock:
            return list(self._virtual_nodes)

    def virtual_nodes_of(self, node_key: str) -> list[int]:
        """Return the virtual node hashes belonging to ``node_key``."""
        with self._lock:
            node = self._nodes.get(node_key)
            if node is None:
                raise NodeNotFoundError()
            return list(node.virtual_nodes)