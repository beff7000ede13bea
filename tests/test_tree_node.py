import pytest

from scenemodel.objects import ObjectSet, SceneObject
from scenemodel.tree_node import TreeNode


def make_node(object_type, observations=1):
    return TreeNode(
        ObjectSet(object_type, [SceneObject(object_type) for _ in range(observations)])
    )


def make_reference(target):
    node = TreeNode(target.object_set)
    node.is_reference = True
    node.reference_to = target
    return node


def test_add_child_sets_parent_and_children():
    root = make_node("A")
    child = make_node("B")
    root.add_child(child)
    assert child.parent is root
    assert root.children == [child]


def test_number_of_nodes_counts_subtree():
    a, b, c, d = (make_node(t) for t in "ABCD")
    a.add_child(b)
    b.add_child(c)
    a.add_child(d)
    assert a.number_of_nodes() == 4
    assert b.number_of_nodes() == 2
    assert d.number_of_nodes() == 1


def test_set_ids_numbers_references_after_plain_nodes():
    a, b, c, d = (make_node(t) for t in "ABCD")
    a.add_child(b)
    b.add_child(c)
    a.add_child(d)
    ref = make_reference(d)
    b.add_child(ref)
    a.set_ids()
    plain = [a, b, c, d]
    assert a.id == 0
    assert sorted(n.id for n in plain + [ref]) == list(range(5))
    assert ref.id > max(n.id for n in plain)
    # depth-first order among the plain nodes
    assert a.id < b.id < c.id < d.id


def test_reroot_reverses_chain():
    a, b, c = (make_node(t) for t in "ABC")
    a.add_child(b)
    b.add_child(c)
    new_root = a.set_new_root_node_by_type("C")
    assert new_root is c
    assert c.parent is None
    assert c.children == [b]
    assert b.children == [a]
    assert a.children == []
    assert a.parent is b
    assert new_root.number_of_nodes() == 3


def test_reroot_to_current_root_keeps_structure():
    a, b = make_node("A"), make_node("B")
    a.add_child(b)
    assert a.set_new_root_node_by_type("A") is a
    assert a.children == [b]
    assert a.parent is None


def test_reroot_flips_references_to_new_root():
    a, b, c = (make_node(t) for t in "ABC")
    a.add_child(b)
    a.add_child(c)
    ref = make_reference(b)
    c.add_child(ref)

    new_root = a.set_new_root_node_by_type("B")

    assert new_root is b
    assert b.children[0] is a
    assert a.children == [c]
    assert c.children == []
    flipped = b.children[1]
    assert flipped.is_reference
    assert flipped.reference_to is c
    assert flipped.object_set is c.object_set
    assert flipped.parent is b


def test_reroot_from_inner_node_searches_parents():
    a, b, c = (make_node(t) for t in "ABC")
    a.add_child(b)
    a.add_child(c)
    new_root = c.set_new_root_node_by_type("B")
    assert new_root is b
    assert b.parent is None
    assert new_root.number_of_nodes() == 3


def test_reroot_never_chooses_reference():
    a, b = make_node("A"), make_node("B")
    a.add_child(b)
    other = make_node("Z")
    ref = make_reference(other)
    a.add_child(ref)
    with pytest.raises(ValueError):
        a.set_new_root_node_by_type("Z")


def test_reroot_unknown_type_raises():
    a = make_node("A")
    with pytest.raises(ValueError):
        a.set_new_root_node_by_type("missing")


def test_format_tree_single_node():
    a = make_node("A")
    a.set_ids()
    assert a.format_tree(0) == "-A(0/1) ID 0 -> 0\n"


def test_format_tree_shows_referenced_id():
    a, b = make_node("A"), make_node("B", observations=2)
    a.add_child(b)
    a.add_child(make_reference(b))
    a.set_ids()
    assert a.format_tree(0) == (
        "-A(2/1) ID 0 -> 0\n"
        " -B(0/2) ID 1 -> 1\n"
        " -B(0/2) ID 2 -> 1\n"
    )


def test_format_tree_indents_by_space():
    a = make_node("A")
    assert a.format_tree(3).startswith("   -A")


def test_print_tree_matches_format(capsys):
    a, b = make_node("A"), make_node("B")
    a.add_child(b)
    a.set_ids()
    a.print_tree(1)
    assert capsys.readouterr().out == a.format_tree(1)


def test_copy_shares_object_set_and_adopts_children():
    a, b, c = (make_node(t) for t in "ABC")
    parent = make_node("P")
    parent.add_child(a)
    a.add_child(b)
    a.add_child(c)
    duplicate = a.copy()
    assert duplicate is not a
    assert duplicate.object_set is a.object_set
    assert duplicate.parent is None
    assert duplicate.children == [b, c]
    assert b.parent is duplicate
    assert c.parent is duplicate