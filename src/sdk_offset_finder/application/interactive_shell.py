#!/usr/bin/env python3

"""Interactive offset lookup shell.

Reads hex offsets line by line and prints every field declared at that
offset. The session ends on an empty line, ``exit``, or end of input.

Example session::

    enter offset (hex): 0x344
    int32_t C_BaseEntity::m_iHealth (client.dll)
    enter offset (hex): 1a8
    no field at offset 0x1a8
    enter offset (hex): exit
"""

import sys
from typing import TextIO

from colorama import Fore, Style

from ..domain.models.sdk import FieldEntry
from ..domain.services.indexing import OffsetIndex, lookup
from ..infrastructure.logging import get_logger
from ..utils.offset_parser import parse_offset_input

logger = get_logger(__name__)

EXIT_COMMAND = "exit"
UNKNOWN_TYPE = "Unknown type"


class InteractiveShell:
    """Read-evaluate loop over a built offset index.

    The index is only read; each query is independent of the others.
    """

    def __init__(
        self,
        index: OffsetIndex,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        color: bool = False,
    ):
        """Initialize shell.

        Args:
            index: Offset index to query
            stdin: Input stream (defaults to sys.stdin)
            stdout: Output stream (defaults to sys.stdout)
            color: Render with ANSI colors
        """
        self.index = index
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.color = color

    def _style(self, text: str, style: str) -> str:
        if not self.color:
            return text
        return f"{style}{text}{Style.RESET_ALL}"

    @property
    def prompt(self) -> str:
        return f"enter offset {self._style('(hex)', Style.DIM)}: "

    def format_entry(self, entry: FieldEntry) -> str:
        """Render one field entry as ``<type> <class>::<field> [(<scope>)]``."""
        if entry.type_name is not None:
            type_text = self._style(entry.type_name, Fore.MAGENTA)
        else:
            type_text = self._style(UNKNOWN_TYPE, Fore.RED)

        text = (
            f"{type_text} {self._style(entry.class_name, Fore.YELLOW)}"
            f"{self._style('::', Style.DIM)}{entry.name}"
        )
        if entry.scope_name is not None:
            text += f" {self._style(f'({entry.scope_name})', Style.DIM)}"
        return text

    def evaluate(self, text: str) -> list[str]:
        """Answer one query.

        Args:
            text: Raw user input (not a terminating command)

        Returns:
            Output lines for the query
        """
        offset = parse_offset_input(text)
        if offset is None:
            logger.debug(f"Rejected offset input {text!r}")
            return ["invalid offset"]

        entries = lookup(self.index, offset)
        if not entries:
            return [f"no field at offset 0x{offset:x}"]
        return [self.format_entry(entry) for entry in entries]

    def run(self) -> int:
        """Run the loop until a terminating input.

        Returns:
            Exit status (always 0)
        """
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                logger.debug("End of input, leaving shell")
                break

            text = line.strip()
            if not text or text == EXIT_COMMAND:
                break

            for output_line in self.evaluate(text):
                self.stdout.write(output_line + "\n")

        return 0
