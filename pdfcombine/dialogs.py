"""
Interactive surface of PDF Combine.

The merge pipeline only talks to the :class:`Dialogs` protocol. Two
implementations ship with the package: :class:`TkDialogs` shows native
message boxes for drag-and-drop use, :class:`ConsoleDialogs` prompts on the
terminal.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

import click
from rich.console import Console
from rich.markup import escape

APP_TITLE = "PDF Combine"
NAME_PROMPT = "Enter output file name (no folder)"


def overwrite_question(filename: str, directory: Path) -> str:
    return f'"{filename}" already exists in:\n{directory}\n\nOverwrite?'


class Dialogs(Protocol):
    """Prompts and notices used by the merge pipeline."""

    def prompt_for_output_name(self) -> Optional[str]:
        """Return the filename typed by the user, or ``None`` if cancelled."""

    def confirm_overwrite(self, filename: str, directory: Path) -> bool:
        """Return ``True`` if the existing output may be replaced."""

    def show_info(self, message: str) -> None:
        """Display an informational notice."""

    def show_error(self, message: str) -> None:
        """Display an error notice."""

    def close(self) -> None:
        """Release any window or terminal resources."""


class TkDialogs:
    """Native dialogs built on :mod:`tkinter` with a hidden root window."""

    def __init__(self) -> None:
        import tkinter as tk
        from tkinter import messagebox, simpledialog

        self._messagebox = messagebox
        self._simpledialog = simpledialog
        self.root = tk.Tk()
        self.root.withdraw()
        self.root.attributes("-topmost", True)

    def prompt_for_output_name(self) -> Optional[str]:
        return self._simpledialog.askstring("Output file name", f"{NAME_PROMPT}:", parent=self.root)

    def confirm_overwrite(self, filename: str, directory: Path) -> bool:
        return bool(
            self._messagebox.askyesno(
                "Confirm overwrite",
                overwrite_question(filename, directory),
                icon=self._messagebox.WARNING,
                parent=self.root,
            )
        )

    def show_info(self, message: str) -> None:
        self._messagebox.showinfo(APP_TITLE, message, parent=self.root)

    def show_error(self, message: str) -> None:
        self._messagebox.showerror(APP_TITLE, message, parent=self.root)

    def close(self) -> None:
        self.root.destroy()


class ConsoleDialogs:
    """Terminal prompts using :mod:`click` with :mod:`rich` output."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def prompt_for_output_name(self) -> Optional[str]:
        try:
            return click.prompt(NAME_PROMPT, default="", show_default=False)
        except click.Abort:
            return None

    def confirm_overwrite(self, filename: str, directory: Path) -> bool:
        try:
            return click.confirm(overwrite_question(filename, directory), default=False)
        except click.Abort:
            return False

    def show_info(self, message: str) -> None:
        self.console.print(f"[bold green]{escape(message)}[/bold green]")

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]✗ {escape(message)}[/bold red]")

    def close(self) -> None:
        pass


__all__ = ["Dialogs", "TkDialogs", "ConsoleDialogs", "APP_TITLE", "NAME_PROMPT", "overwrite_question"]
