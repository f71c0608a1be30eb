"""System diagnostic command"""

import shutil
import subprocess
import sys

import click
from rich import box
from rich.table import Table

from ..utils.output import console
from ...constants import ARCHIVE_TOOL, SUBMIT_TOOL


class DiagnosticCheck:
    """Base class for diagnostic checks"""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.passed = False
        self.message = ""

    def run(self) -> 'DiagnosticCheck':
        """Run the diagnostic check"""
        raise NotImplementedError


class PlatformCheck(DiagnosticCheck):
    """Check the host is macOS"""

    def __init__(self):
        super().__init__("Platform", "Notarization tools only exist on macOS")

    def run(self):
        if sys.platform == "darwin":
            self.passed = True
            self.message = "macOS"
        else:
            self.passed = False
            self.message = f"Unsupported platform: {sys.platform}"
        return self


class ToolCheck(DiagnosticCheck):
    """Check a program is on PATH"""

    def __init__(self, tool: str):
        super().__init__(tool, f"Locate {tool} on PATH")
        self.tool = tool

    def run(self):
        path = shutil.which(self.tool)
        if path:
            self.passed = True
            self.message = path
        else:
            self.passed = False
            self.message = f"{self.tool} not found. Xcode command line tools are required."
        return self


class NotarytoolCheck(DiagnosticCheck):
    """Check xcrun can find notarytool"""

    def __init__(self):
        super().__init__("notarytool", "Locate notarytool through xcrun")

    def run(self):
        try:
            result = subprocess.run(
                [SUBMIT_TOOL, '--find', 'notarytool'],
                capture_output=True,
                text=True
            )
        except (subprocess.SubprocessError, FileNotFoundError):
            self.passed = False
            self.message = f"{SUBMIT_TOOL} is not available"
            return self

        if result.returncode == 0:
            self.passed = True
            self.message = result.stdout.strip()
        else:
            self.passed = False
            self.message = result.stderr.strip() or "notarytool not found (Xcode 13 or later required)"
        return self


@click.command()
def doctor():
    """Run system diagnostics

    Checks that this machine can archive and notarize products.

    Examples:

        notarize-tool doctor
    """
    console.print("[bold]Notarize Tool Diagnostics[/bold]\n")

    checks = [
        PlatformCheck(),
        ToolCheck(ARCHIVE_TOOL),
        ToolCheck(SUBMIT_TOOL),
        NotarytoolCheck(),
    ]

    failed_checks = [check for check in checks if not check.run().passed]

    # Display results
    table = Table(title="Diagnostic Results", box=box.ROUNDED)
    table.add_column("Check", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Details")

    for check in checks:
        status = "[green]✓ PASS[/green]" if check.passed else "[red]✗ FAIL[/red]"
        table.add_row(check.name, status, check.message)

    console.print(table)

    if failed_checks:
        console.print(f"\n[red]{len(failed_checks)} check(s) failed[/red]")
        sys.exit(1)

    console.print("\n[green]All checks passed[/green]")
