from algokit.trees import TreeNode, iter_list, min_depth, to_doubly_linked_list


def sample_tree():
    root = TreeNode(1, TreeNode(2), TreeNode(3))
    root.left.left = TreeNode(4)
    root.left.right = TreeNode(5)
    root.right.left = TreeNode(6)
    root.right.right = TreeNode(7)
    return root


def chain(length):
    root = TreeNode(0)
    node = root
    for value in range(1, length):
        node.left = TreeNode(value)
        node = node.left
    return root


def bst(values):
    root = None
    for value in values:
        node = TreeNode(value)
        if root is None:
            root = node
            continue
        current = root
        while True:
            side = "left" if value < current.data else "right"
            child = getattr(current, side)
            if child is None:
                setattr(current, side, node)
                break
            current = child
    return root


def test_min_depth_source_example():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    assert min_depth(root) == 2


def test_min_depth_empty():
    assert min_depth(None) == 0


def test_min_depth_chain_equals_length():
    for length in (1, 3, 7):
        assert min_depth(chain(length)) == length


def test_min_depth_not_more_than_any_leaf_path():
    root = sample_tree()
    root.left.left.left = TreeNode(8)
    assert min_depth(root) == min_depth(sample_tree())


def test_dll_source_example():
    head = to_doubly_linked_list(sample_tree())
    assert list(iter_list(head)) == [4, 2, 5, 1, 6, 3, 7]


def test_dll_backward_links_mirror_forward():
    head = to_doubly_linked_list(sample_tree())
    nodes = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.right
    assert head.left is None
    assert all(b.left is a for a, b in zip(nodes, nodes[1:]))
    tail = nodes[-1]
    backward = []
    while tail is not None:
        backward.append(tail.data)
        tail = tail.left
    assert backward == list(reversed(list(iter_list(head))))


def test_dll_of_bst_is_sorted():
    values = [50, 30, 70, 20, 40, 60, 80, 35, 65]
    head = to_doubly_linked_list(bst(values))
    assert list(iter_list(head)) == sorted(values)


def test_dll_empty_tree():
    assert to_doubly_linked_list(None) is None
    assert list(iter_list(None)) == []


def test_dll_repeated_conversion_is_independent():
    first = list(iter_list(to_doubly_linked_list(bst([3, 1, 2]))))
    second = list(iter_list(to_doubly_linked_list(bst([3, 1, 2]))))
    assert first == second == sorted([3, 1, 2])