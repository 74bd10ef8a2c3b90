import pytest

from pgnboard.linkedlist import LinkedList, ListNode


def test_append_keeps_order_and_size():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3
    assert lst.first.data == "a"
    assert lst.last.data == "c"


def test_append_ignores_duplicates():
    lst = LinkedList([1, 2])
    assert lst.append(1) is None
    assert list(lst) == [1, 2]
    assert len(lst) == 2


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert not lst
    assert lst.first is None and lst.last is None
    assert lst.format() == ""
    assert lst.format_reverse() == ""


def test_contains_and_search():
    lst = LinkedList(["x", "y"])
    assert "y" in lst
    assert "z" not in lst
    node = lst.search("y")
    assert node.data == "y"
    assert lst.search("z") is None


def test_insert_after_middle_and_tail():
    lst = LinkedList([1, 3])
    first = lst.search(1)
    new = lst.insert_after(first, 2)
    assert new.data == 2
    assert list(lst) == [1, 2, 3]
    tail = lst.insert_after(lst.last, 4)
    assert lst.last is tail
    assert list(lst) == [1, 2, 3, 4]
    assert len(lst) == 4


def test_insert_after_none_appends():
    lst = LinkedList([1])
    node = lst.insert_after(None, 2)
    assert node is lst.last
    assert list(lst) == [1, 2]


def test_erase_root_middle_tail():
    lst = LinkedList([1, 2, 3, 4])
    following = lst.erase(lst.first)
    assert following.data == 2
    assert list(lst) == [2, 3, 4]
    following = lst.erase(lst.search(3))
    assert following.data == 4
    assert list(lst) == [2, 4]
    assert lst.erase(lst.last) is None
    assert list(lst) == [2]
    assert lst.last.data == 2
    assert len(lst) == 1


def test_erase_only_node_empties_list():
    lst = LinkedList(["only"])
    lst.erase(lst.first)
    assert len(lst) == 0
    assert lst.first is None and lst.last is None


def test_erase_foreign_or_none_node():
    lst = LinkedList([1, 2])
    assert lst.erase(None) is None
    assert lst.erase(ListNode(5)) is None
    assert list(lst) == [1, 2]
    assert len(lst) == 2


def test_reverse():
    lst = LinkedList([1, 2, 3])
    lst.reverse()
    assert list(lst) == [3, 2, 1]
    assert lst.first.data == 3
    assert lst.last.data == 1
    assert lst.last.next is None
    lst.append(0)
    assert list(lst) == [3, 2, 1, 0]


@pytest.mark.parametrize("items", [[], [7], [1, 2], list(range(10))])
def test_reverse_twice_is_identity(items):
    lst = LinkedList(items)
    lst.reverse()
    assert list(lst) == list(reversed(items))
    lst.reverse()
    assert list(lst) == items


def test_clear():
    lst = LinkedList([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []
    lst.append(9)
    assert list(lst) == [9]


def test_copy_is_independent():
    original = LinkedList([1, 2, 3])
    duplicate = original.copy()
    assert list(duplicate) == list(original)
    assert len(duplicate) == len(original)
    duplicate.append(4)
    duplicate.erase(duplicate.first)
    assert list(original) == [1, 2, 3]
    assert all(a is not b for a, b in zip(original.nodes(), duplicate.nodes()))


def test_nodes_yields_linked_nodes():
    lst = LinkedList(["a", "b"])
    nodes = list(lst.nodes())
    assert [n.data for n in nodes] == ["a", "b"]
    assert nodes[0].next is nodes[1]


def test_node_comparisons_use_data():
    assert ListNode(1) == ListNode(1)
    assert ListNode(1) < ListNode(2)
    assert ListNode(3) > ListNode(2)
    assert str(ListNode("e4")) == "e4"


def test_format():
    lst = LinkedList(["a", "b", "c"])
    assert lst.format() == "Start: a | End: c\nList content: a --> b --> c --> /"


def test_format_reverse():
    lst = LinkedList(["a", "b", "c"])
    assert lst.format_reverse() == "Reverse list content: c --> b --> a --> /"


def test_custom_equality_deduplicates():
    class Keyed:
        def __init__(self, key, count=0):
            self.key = key
            self.count = count

        def __eq__(self, other):
            return self.key == other.key

    lst = LinkedList()
    for key in ["x", "y", "x"]:
        lst.append(Keyed(key))
        lst.search(Keyed(key)).data.count += 1
    assert [item.key for item in lst] == ["x", "y"]
    assert [item.count for item in lst] == [2, 1]