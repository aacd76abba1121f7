"""Postfix expression evaluation: sample expressions followed by a read-evaluate loop."""

from typing import TextIO

from exercises.console import build_parser, configure_logging, prompt
from structures.postfix import PostfixError, evaluate

SAMPLE_EXPRESSIONS = [
    "2 3 +",  # 5
    "4 13 5 / +",  # 6
    "10 6 9 3 + -11 * / * 17 + 5 +",  # 22
]

PROMPT = "\nEnter a postfix expression (or 'exit' to quit):\n"


def run_samples() -> None:
    for expression in SAMPLE_EXPRESSIONS:
        try:
            print(f"Expression: {expression} = {evaluate(expression)}")
        except PostfixError as e:
            print(f"Error evaluating {expression}: {e}")


def run_interactive(stdin: TextIO | None = None) -> None:
    while True:
        expression = prompt(PROMPT, stdin)
        if expression is None or expression.strip().lower() == "exit":
            break
        try:
            print(f"Result: {evaluate(expression)}")
        except PostfixError as e:
            print(f"Error: {e}")


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> None:
    args = build_parser("Evaluate postfix (RPN) integer expressions").parse_args(argv)
    configure_logging(args.verbose)

    run_samples()
    if not args.no_interactive:
        run_interactive(stdin)


if __name__ == "__main__":
    main()
