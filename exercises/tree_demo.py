"""Binary search tree: sample tree with LCA queries followed by an interactive session."""

import logging
from typing import TextIO

from exercises.console import build_parser, configure_logging, parse_int, prompt
from structures.bst import BinarySearchTree

logger = logging.getLogger(__name__)

SAMPLE_VALUES = [20, 8, 22, 4, 12, 10, 14]
SAMPLE_QUERIES = [(10, 14), (14, 8), (10, 22)]


def show(tree: BinarySearchTree) -> None:
    print(tree.print_tree())
    print("In-order traversal: " + " ".join(str(v) for v in tree.in_order_traversal()))


def report_lca(tree: BinarySearchTree, n1: int, n2: int) -> None:
    # find_lca trusts its inputs, so membership is checked here
    missing = [v for v in (n1, n2) if v not in tree]
    if missing:
        print(f"Value(s) not in tree: {', '.join(map(str, missing))}")
        return
    lca = tree.find_lca(n1, n2)
    print(f"LCA of {n1} and {n2} is: {lca.value}")


def run_samples() -> None:
    tree = BinarySearchTree(SAMPLE_VALUES)
    show(tree)
    for n1, n2 in SAMPLE_QUERIES:
        report_lca(tree, n1, n2)


def run_interactive(stdin: TextIO | None = None) -> None:
    print("\nInteractive Mode")
    print("===============")

    tree = BinarySearchTree()
    while True:
        answer = prompt("\nEnter a value to insert (or 'done' to finish): ", stdin)
        if answer is None or answer.strip().lower() == "done":
            break
        value = parse_int(answer)
        if value is None:
            print("Invalid input. Please enter a number or 'done'.")
            continue
        if not tree.insert(value):
            print(f"{value} is already in the tree")

    show(tree)
    if tree.root is None:
        return

    while True:
        answer = prompt("\nEnter two values to find their LCA (or 'exit' to quit): ", stdin)
        if answer is None or answer.strip().lower() == "exit":
            break
        parts = answer.split()
        numbers = [parse_int(part) for part in parts]
        if len(numbers) != 2 or None in numbers:
            print("Invalid input. Please enter two numbers separated by a space.")
            continue
        report_lca(tree, numbers[0], numbers[1])


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> None:
    args = build_parser("Binary search tree with lowest common ancestor queries").parse_args(argv)
    configure_logging(args.verbose)

    print("Binary Search Tree")
    print("==================")
    run_samples()
    if not args.no_interactive:
        run_interactive(stdin)
    logger.info("Tree demo finished")


if __name__ == "__main__":
    main()
