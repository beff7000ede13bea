import pytest

from scenemodel.objects import ObjectSet, SceneObject
from scenemodel.relation import Relation
from scenemodel.topology import Topology
from scenemodel.tree_node import TreeNode


def make_node(object_type):
    return TreeNode(ObjectSet(object_type, [SceneObject(object_type)]))


def test_new_topology_is_not_evaluated():
    topology = Topology()
    assert topology.is_evaluated is False
    assert topology.is_cost_valid is False
    assert topology.is_tree_valid is False
    assert topology.used_in_optimization is False


@pytest.mark.parametrize(
    "attribute", ["average_recognition_runtime", "false_positives", "false_negatives"]
)
def test_evaluation_results_require_evaluation(attribute):
    topology = Topology()
    with pytest.raises(RuntimeError) as excinfo:
        _ = getattr(topology, attribute)
    assert "evaluated" in str(excinfo.value)
    assert topology.is_evaluated is False


def test_set_evaluation_result_round_trip():
    topology = Topology()
    topology.set_evaluation_result(1.5, 2.0, 3.0)
    assert topology.is_evaluated
    assert topology.average_recognition_runtime == 1.5
    assert topology.false_positives == 2.0
    assert topology.false_negatives == 3.0


def test_cost_requires_setting():
    topology = Topology()
    with pytest.raises(RuntimeError) as excinfo:
        _ = topology.cost
    assert "cost" in str(excinfo.value)
    assert topology.is_cost_valid is False


def test_set_cost_round_trip():
    topology = Topology()
    topology.set_cost(0.25)
    assert topology.is_cost_valid
    assert topology.cost == 0.25


def test_tree_requires_setting():
    topology = Topology()
    with pytest.raises(RuntimeError) as excinfo:
        _ = topology.tree
    assert "tree" in str(excinfo.value)
    assert topology.is_tree_valid is False


def test_tree_walks_up_to_root():
    root, child, grandchild = make_node("A"), make_node("B"), make_node("C")
    root.add_child(child)
    child.add_child(grandchild)
    topology = Topology()
    topology.tree = grandchild
    assert topology.is_tree_valid
    assert topology.tree is root


def test_tree_follows_rerooting():
    a, b = make_node("A"), make_node("B")
    a.add_child(b)
    topology = Topology()
    topology.tree = a
    a.set_new_root_node_by_type("B")
    assert topology.tree is b


def test_relations_and_identifier_are_kept():
    relations = [Relation("A", "B")]
    topology = Topology(relations=relations, identifier="1")
    assert topology.relations == [Relation("A", "B")]
    assert topology.identifier == "1"