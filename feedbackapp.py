# Password Feedback Tool
# Purpose: Explain which warning and suggestion keys a password's match sequence earns.
# Run without arguments for the interactive menu, or with --file for a single explanation.

import argparse
import sys

from core import MatchError, StorageError, configure_logging
from cli import explain_file, explain_flow, list_messages_flow


def main_menu():
    while True:
        print("\n=== Password Feedback Menu ===")
        print("1. Explain feedback for a match file")
        print("2. List message keys")
        print("3. Exit")

        choice = input("Choose an option (1-3): ").strip()
        if choice == '1':
            explain_flow()
        elif choice == '2':
            list_messages_flow()
        elif choice == '3':
            print("Exiting the program. Goodbye.")
            break
        else:
            print("Invalid choice. Please enter a number from 1 to 3.")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="feedbackapp",
        description="Password feedback selection",
    )
    parser.add_argument("--file", help="Match JSON file to explain (skips the menu)")
    parser.add_argument("--score", type=int, choices=range(0, 5), help="Override the file's score")
    args = parser.parse_args(argv)

    configure_logging()

    if args.file is None:
        main_menu()
        return 0

    try:
        explain_file(args.file, args.score)
    except (StorageError, MatchError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
