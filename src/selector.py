"""One-shot numbered menu. A bad answer ends the run; there is no re-prompt."""

from patcher_errors import SelectionError


def print_menu(files):
    print("Select a file to patch:")
    for i, name in enumerate(files, start=1):
        print(f"{i}) {name}")


def choose_file(files, input_source=input):
    """
    Shows the menu and reads one answer from input_source.

    input_source is called once with the prompt and must return the line
    typed by the user (the builtin input by default).

    Raises SelectionError for anything that isn't a number in 1..len(files).
    """
    print_menu(files)

    try:
        choice = int(input_source("Enter your choice: ").strip())
    except (ValueError, EOFError) as e:
        raise SelectionError("Invalid choice.") from e

    if choice < 1 or choice > len(files):
        raise SelectionError("Invalid choice.")

    selected = files[choice - 1]
    print(f"You selected: {selected}")
    return selected
