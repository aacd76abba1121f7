"""Pytest configuration and fixtures for the test suite."""

import pytest

from structures.bst import BinarySearchTree
from structures.linked_list import CycleLinkedList


@pytest.fixture
def acyclic_list() -> CycleLinkedList:
    """Provide the list 1 -> 2 -> 3 -> 4 -> 5."""
    return CycleLinkedList.from_values([1, 2, 3, 4, 5])


@pytest.fixture
def cyclic_list() -> CycleLinkedList:
    """Provide 1..5 with the tail pointing back at the node holding 3."""
    linked_list = CycleLinkedList.from_values([1, 2, 3, 4, 5])
    linked_list.create_cycle(2)
    return linked_list


@pytest.fixture
def sample_tree() -> BinarySearchTree:
    """
    Provide the tree

            20
           /  \\
          8    22
         / \\
        4   12
           /  \\
          10   14
    """
    return BinarySearchTree([20, 8, 22, 4, 12, 10, 14])
