"""Linked list cycle detection: built-in test cases followed by an interactive session."""

import logging
from typing import TextIO

from exercises.console import build_parser, configure_logging, parse_int, prompt
from structures.linked_list import CycleLinkedList

logger = logging.getLogger(__name__)


def report(linked_list: CycleLinkedList, max_display: int) -> None:
    print(linked_list.display(max_display))
    print(f"Has cycle: {linked_list.has_cycle()}")
    cycle_start = linked_list.find_cycle_start()
    if cycle_start is not None:
        print(f"Cycle starts at node with value: {cycle_start.value}")


def run_test_cases(max_display: int) -> None:
    print("\nTest Case 1:")
    report(CycleLinkedList.from_values([1, 2, 3, 4, 5]), max_display)

    print("\nTest Case 2:")
    list2 = CycleLinkedList.from_values([1, 2, 3, 4, 5])
    list2.create_cycle(2)  # back to the node holding 3
    report(list2, max_display)


def run_interactive(max_display: int, stdin: TextIO | None = None) -> None:
    print("\nInteractive Mode")
    print("===============")
    print("Create your own linked list:")

    user_list = CycleLinkedList()
    while True:
        answer = prompt("\nEnter a value to add to the list (or 'done' to finish): ", stdin)
        if answer is None or answer.strip().lower() == "done":
            break
        value = parse_int(answer)
        if value is None:
            print("Invalid input. Please enter a number or 'done'.")
            continue
        user_list.add(value)

    choice = prompt("Create a cycle? (yes/no): ", stdin)
    if choice is not None and choice.strip().lower() == "yes":
        answer = prompt("Enter position to create cycle at: ", stdin)
        position = parse_int(answer) if answer is not None else None
        if position is None:
            logger.info("No valid position given, list left as is")
        else:
            user_list.create_cycle(position)

    print("\nYour linked list:")
    report(user_list, max_display)


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> None:
    parser = build_parser("Linked list cycle detection (Floyd's tortoise and hare)")
    parser.add_argument("--max-display", type=int, default=20, help="Maximum number of nodes to print")
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    print("Linked List Cycle Detection")
    print("===========================")
    run_test_cases(args.max_display)
    if not args.no_interactive:
        run_interactive(args.max_display, stdin)


if __name__ == "__main__":
    main()
