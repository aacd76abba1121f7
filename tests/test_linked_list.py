"""Tests for the singly linked list and Floyd's cycle detection."""

from hypothesis import given, strategies as st

from structures.linked_list import CycleLinkedList, ListNode


def nodes(linked_list: CycleLinkedList, count: int) -> list[ListNode]:
    """First `count` nodes from the head, following next pointers."""
    result = []
    current = linked_list.head
    while current is not None and len(result) < count:
        result.append(current)
        current = current.next
    return result


class TestListNode:
    def test_equality_is_identity(self):
        a, b = ListNode(7), ListNode(7)
        assert a == a
        assert a != b
        assert len({a, b}) == 2

    def test_not_equal_to_other_types(self):
        assert ListNode(1) != 1


class TestAdd:
    def test_first_value_becomes_head(self):
        linked_list = CycleLinkedList()
        node = linked_list.add(10)
        assert linked_list.head is node
        assert node.next is None

    def test_appends_in_order(self, acyclic_list):
        assert list(acyclic_list.values(100)) == [1, 2, 3, 4, 5]


class TestCreateCycle:
    def test_links_tail_to_position(self, cyclic_list):
        first_five = nodes(cyclic_list, 5)
        assert first_five[-1].next is first_five[2]

    def test_loop_length(self):
        linked_list = CycleLinkedList.from_values([1, 2, 3, 4, 5])
        linked_list.create_cycle(3)
        # 4 -> 5 -> 4 -> 5 ...
        assert list(linked_list.values(9)) == [1, 2, 3, 4, 5, 4, 5, 4, 5]

    def test_position_zero_closes_whole_list(self):
        linked_list = CycleLinkedList.from_values([1, 2, 3])
        linked_list.create_cycle(0)
        assert linked_list.find_cycle_start() is linked_list.head

    def test_empty_list_is_noop(self):
        linked_list = CycleLinkedList()
        linked_list.create_cycle(0)
        assert linked_list.head is None
        assert not linked_list.has_cycle()

    def test_negative_position_is_noop(self, acyclic_list):
        acyclic_list.create_cycle(-1)
        assert not acyclic_list.has_cycle()
        assert list(acyclic_list.values(100)) == [1, 2, 3, 4, 5]

    def test_position_of_last_node_is_noop(self, acyclic_list):
        acyclic_list.create_cycle(4)
        assert not acyclic_list.has_cycle()

    def test_position_past_end_is_noop(self, acyclic_list):
        acyclic_list.create_cycle(10)
        assert not acyclic_list.has_cycle()
        assert list(acyclic_list.values(100)) == [1, 2, 3, 4, 5]

    def test_single_node_never_cycles(self):
        linked_list = CycleLinkedList.from_values([1])
        linked_list.create_cycle(0)
        assert linked_list.head.next is None


class TestHasCycle:
    def test_empty_list(self):
        assert not CycleLinkedList().has_cycle()

    def test_single_node(self):
        assert not CycleLinkedList.from_values([1]).has_cycle()

    def test_acyclic(self, acyclic_list):
        assert not acyclic_list.has_cycle()

    def test_cyclic(self, cyclic_list):
        assert cyclic_list.has_cycle()

    def test_equal_values_are_not_a_cycle(self):
        assert not CycleLinkedList.from_values([3, 3, 3, 3]).has_cycle()


class TestFindCycleStart:
    def test_acyclic_returns_none(self, acyclic_list):
        assert acyclic_list.find_cycle_start() is None

    def test_short_lists_return_none(self):
        assert CycleLinkedList().find_cycle_start() is None
        assert CycleLinkedList.from_values([1]).find_cycle_start() is None

    def test_finds_node_not_just_value(self):
        linked_list = CycleLinkedList.from_values([9, 9, 9, 9, 9, 9])
        linked_list.create_cycle(3)
        assert linked_list.find_cycle_start() is nodes(linked_list, 6)[3]

    def test_cyclic(self, cyclic_list):
        start = cyclic_list.find_cycle_start()
        assert start is nodes(cyclic_list, 3)[2]
        assert start.value == 3


class TestDisplay:
    def test_empty(self):
        assert CycleLinkedList().display() == "Empty list"

    def test_acyclic(self, acyclic_list):
        assert acyclic_list.display() == "1 -> 2 -> 3 -> 4 -> 5 -> null"

    def test_cyclic_is_capped(self, cyclic_list):
        rendered = cyclic_list.display(max_display=7)
        assert rendered == "1 -> 2 -> 3 -> 4 -> 5 -> 3 -> 4 -> ... (possibly cyclic)"

    def test_default_cap(self, cyclic_list):
        assert cyclic_list.display().count("->") == 20

    def test_values_respects_limit(self, cyclic_list):
        assert len(list(cyclic_list.values(50))) == 50


@given(values=st.lists(st.integers(), max_size=50))
def test_acyclic_lists_have_no_cycle(values):
    linked_list = CycleLinkedList.from_values(values)
    assert not linked_list.has_cycle()
    assert linked_list.find_cycle_start() is None


@given(data=st.data())
def test_injected_cycle_is_found(data):
    values = data.draw(st.lists(st.integers(min_value=-5, max_value=5), min_size=2, max_size=60))
    position = data.draw(st.integers(min_value=0, max_value=len(values) - 2))
    linked_list = CycleLinkedList.from_values(values)
    expected = nodes(linked_list, len(values))[position]

    linked_list.create_cycle(position)

    assert linked_list.has_cycle()
    assert linked_list.find_cycle_start() is expected
