# scenemodel

Building blocks for learning scene models from object observations:

- `scenemodel.math_helper`: `distance_between_points`, `deg2rad` and
  `rad2deg`.
- `scenemodel.objects`: the dataclasses `SceneObject` (one observation with
  type, position and orientation quaternion), `ObjectSet` (a trajectory of
  observations) and `ObjectInformation` (type, instance id and 7D pose). It
  also holds `ExamplesListSource`, which collects object sets verbatim through
  `add_scene_graph_message`.
- `scenemodel.relation`: `Relation`, a frozen, undirected relation between two
  object types, with `contains_object` and `other_type`.
- `scenemodel.connectivity`: `ConnectivityChecker`, whose `is_connected` tells
  whether a relation bit vector describes a connected topology.
- `scenemodel.tree_node`: `TreeNode`, the object relation tree. It supports
  `add_child`, `copy`, `number_of_nodes`, re-rooting by object type with
  `set_new_root_node_by_type`, reference nodes, depth-first ID assignment with
  `set_ids`, and text output with `format_tree` and `print_tree`.
- `scenemodel.topology`: `Topology`, a set of relations with an identifier,
  evaluation results, cost and tree. Reading the results, the cost or the tree
  before they are set raises `RuntimeError`.
- `scenemodel.topology_creator`: `TopologyCreator`. It generates star,
  fully meshed, random and neighbouring topologies, converts between
  topologies and bit vectors, and collects every topology reachable from the
  fully meshed one.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Relation bit vectors

A topology over `n` object types is a bit vector of length `n * (n - 1) / 2`.
The bits follow the pairs `(i, j)` with `i < j` in order:
`(0, 1), (0, 2), ..., (0, n-1), (1, 2), ...`. A topology's `identifier` is
its bit vector written as a string of `0` and `1`.

```python
from scenemodel.topology_creator import TopologyCreator

creator = TopologyCreator(["Cup", "Plate", "Spoon"], 10, True, True)

fully_meshed = creator.generate_fully_meshed_topology()
print(fully_meshed.identifier)          # "111"

for star in creator.generate_star_topologies():
    print(star.identifier)              # "110", "101", "011"

neighbours = creator.generate_neighbours(fully_meshed)
reachable = creator.generate_all_connected_topologies()
```

The arguments are the object types, the maximum number of neighbours
returned by `generate_neighbours`, and whether neighbours may remove a
relation or swap one relation for another (adding a relation is always
allowed). When there are more connected neighbours than the maximum, a random
selection of exactly that many is made. An optional `rng` keyword takes a
`random.Random` for reproducible random topologies and selections. Progress is
reported through the `logging` module at debug level.

## Connectivity

```python
from scenemodel.connectivity import ConnectivityChecker

checker = ConnectivityChecker(3)
checker.is_connected([True, True, False])    # True
checker.is_connected([True, False, False])   # False
```

## What this package does not do

It does not build relation trees from trajectories: there are no trainers or
tree generators, and nothing reads recorded observations from storage.
`TreeNode` trees are put together by the caller with `add_child`, and the
evaluation results and costs of a `Topology` are supplied by the caller. There
is no command-line program.