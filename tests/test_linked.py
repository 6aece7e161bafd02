from ftkit.linked import Node, lst_add_front, lst_new


def test_lst_new():
    node = lst_new("data")
    assert node.content == "data"
    assert node.next is None
    assert list(node) == ["data"]


def test_add_front_orders_newest_first():
    head = None
    for value in [1, 2, 3]:
        head = lst_add_front(head, lst_new(value))
    assert list(head) == [3, 2, 1]


def test_add_front_links_to_old_head():
    old = lst_new("old")
    new = lst_new("new")
    head = lst_add_front(old, new)
    assert head is new
    assert head.next is old


def test_add_front_none_node_keeps_head():
    old = lst_new("x")
    assert lst_add_front(old, None) is old
    assert lst_add_front(None, None) is None


def test_add_front_to_empty_keeps_node_link():
    tail = lst_new("tail")
    node = Node("front", tail)
    head = lst_add_front(None, node)
    assert head is node
    assert list(head) == ["front", "tail"]


def test_iteration_follows_links():
    chain = Node("a", Node("b", Node("c")))
    assert list(chain) == ["a", "b", "c"]
    assert len(list(chain.next)) == 2


def test_nodes_compare_by_identity():
    first = Node(1)
    second = Node(1)
    assert first.content == second.content == 1
    assert (first == second) is False
    assert (first == first) is True