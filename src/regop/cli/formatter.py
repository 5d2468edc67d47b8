# src/regop/cli/formatter.py
import difflib
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

# Initialize the Rich console for high-quality terminal output
console = Console()
err_console = Console(stderr=True)


class DiffFormatter:
    """
    DiffFormatter: The visual side of the CLI.
    Renders preview diffs and error messages.
    """

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None):
        self.out = out or console
        self.err = err or err_console

    def build_diff(self, original_text: str, new_text: str, file_name: str) -> str:
        # keepends so a change in the final newline still shows up
        diff = difflib.unified_diff(
            original_text.splitlines(keepends=True),
            new_text.splitlines(keepends=True),
            fromfile=f"a/{file_name}",
            tofile=f"b/{file_name}",
        )
        return "".join(line if line.endswith("\n") else line + "\n" for line in diff)

    def display_diff(self, original_text: str, new_text: str, file_name: str):
        """
        Renders a colorized unified diff of the proposed changes for one file.
        """
        diff_output = self.build_diff(original_text, new_text, file_name)
        if not diff_output:
            return

        syntax = Syntax(diff_output.rstrip("\n"), "diff", theme="monokai", background_color="default")
        self.out.print(Panel(syntax, title=f"[bold]{escape(file_name)}[/bold]", title_align="left", border_style="dim"))

    def display_content(self, content: str):
        """Writes transformed stdin content verbatim."""
        self.out.file.write(content)
        self.out.file.flush()

    def display_error(self, message: str):
        self.err.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
