# hashring

A small consistent hash ring for spreading keys across a set of nodes.

Each node is placed on the ring many times as *virtual nodes*. This keeps the
spread of keys even. When a node is added or removed, only the keys that
belong to that node move. All other keys stay where they were.

## Installation

```
pip install .
```

The package uses only the standard library.

## Usage

```python
from hashring.ring import Ring

ring = Ring()                 # 1000 virtual nodes per node, 64-bit FNV-1a hash
ring.add_node("node1")
ring.add_node("node2")
ring.add_node("node3")

owner = ring.get_node("user:42")   # one of "node1", "node2", "node3"

ring.delete_node("node2")          # only keys owned by node2 move
```

A key is hashed, and the first virtual node whose hash is equal to or greater
than the key's hash owns it. If no virtual node's hash is that large, the lookup
wraps around to the lowest hash on the ring.

### Options

- `replicas` sets how many virtual nodes each node gets. The default is
  `DEFAULT_VIRTUAL_NODES_PER_NODE` (1000). A negative value raises
  `ValueError`. The value can be read back from `ring.replicas`.
- `hash_func` is any callable that takes `bytes` and returns an integer. The
  result is cut down to 64 bits. The default is `fnv1a_64`, the 64-bit FNV-1a
  hash, which you can also call yourself.

Virtual node `i` of node `name` is hashed from the UTF-8 text `"name:i"`.

```python
from hashring.ring import Ring, fnv1a_64

ring = Ring(replicas=100, hash_func=fnv1a_64)
```

### Inspecting the ring

- `ring.nodes()` lists the node keys on the ring.
- `ring.virtual_nodes()` returns the sorted hashes of all virtual nodes.
- `ring.virtual_nodes_of(node_key)` returns the hashes that belong to a single
  node. It raises `NodeNotFoundError` for an unknown node.

### Errors

All errors derive from `HashRingError`:

- `NoNodesError` (also a `LookupError`): `get_node` was called on an empty ring.
- `NodeNotFoundError` (also a `KeyError`): `delete_node` or `virtual_nodes_of`
  was given a node that is not on the ring.
- `DuplicateNodeError` (also a `ValueError`) is available for callers to use.
  `add_node` does not check for duplicates and never raises it. Adding a node
  that is already present adds its virtual nodes to the ring again.

All operations take a lock, so one ring can be shared between threads.

## Limits

This is a library only. It has no command-line tool, and it does not store the
ring anywhere. The ring lives in memory for as long as the `Ring` object does.

## Running the tests

```
pip install .[test]
pytest
```