from __future__ import annotations

"""
Terminal front end for the hello message API:

  python -m hello_ui --base-url http://127.0.0.1:8000

Commands: e = edit, r = reload, q = quit.
While editing: type the new text, empty line = Enter (save), :q = Escape (cancel).
"""

import argparse
import os
import sys
from typing import List, Optional, TextIO

from hello_ui.client import HelloClient
from hello_ui.component import HelloMessage


def run(view: HelloMessage, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
    view.mount()
    print(view.render(), file=stdout)

    for raw in stdin:
        line = raw.rstrip("\n")

        if view.editing:
            if line == ":q":
                view.handle_key("Escape")
            elif line == "":
                view.handle_key("Enter")
            else:
                view.set_draft(line)
        elif line == "q":
            break
        elif line == "e":
            view.start_edit()
        elif line == "r":
            view.mount()

        print(view.render(), file=stdout)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="hello_ui")
    parser.add_argument("--base-url", default=os.getenv("HELLO_API_URL", "http://127.0.0.1:8000"))
    args = parser.parse_args(argv)

    with HelloClient(args.base_url) as client:
        run(HelloMessage(client))


if __name__ == "__main__":
    main()
