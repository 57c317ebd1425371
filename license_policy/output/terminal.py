"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from license_policy.models.dependency import Verdict
from license_policy.models.policy import ViolationKind
from license_policy.models.scan import CheckResult, ModuleReport, Verbosity

_VERDICT_STYLES = {
    Verdict.ALLOWED: "[green]allowed[/green]",
    Verdict.NOT_ALLOWED: "[red]not allowed[/red]",
    Verdict.NOT_FOUND: "[yellow]not found[/yellow]",
}


class TerminalFormatter:
    """Format check results for terminal display using Rich.

    Shows one table per module with a color-coded verdict column,
    followed by the module's violations.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_check_result(self, result: CheckResult) -> None:
        """Format and display check results.

        Args:
            result: The check result to display.
        """
        if self._verbosity == Verbosity.QUIET:
            self._print_quiet_output(result)
            return

        if result.total_dependencies == 0:
            self._console.print("[yellow]No dependencies found[/yellow]")
            return

        self._print_summary(result)

        for module in result.modules:
            self._print_module(module)

    def _print_quiet_output(self, result: CheckResult) -> None:
        """Print only the status line and the violations.

        Args:
            result: The check result to display.
        """
        if not result.has_violations:
            self._console.print(
                f"[green]PASS[/green] - All {result.total_dependencies} "
                "dependencies use allowed licenses"
            )
            return

        self._console.print(
            f"[red]VIOLATIONS FOUND[/red] - "
            f"{result.total_violations} violation(s) require attention"
        )
        for module in result.modules:
            for violation in module.report.violations:
                self._console.print(f"  - {escape(violation.message)}")

    def _print_summary(self, result: CheckResult) -> None:
        """Print summary panel.

        Args:
            result: The check result to summarize.
        """
        if result.has_violations:
            status = "VIOLATIONS FOUND"
            status_color = "red"
        else:
            status = "PASS"
            status_color = "green"

        allowed = sum(m.report.count(Verdict.ALLOWED) for m in result.modules)
        summary_lines = [
            f"Modules: {len(result.modules)}",
            f"Dependencies: {result.total_dependencies}",
            f"Allowed: {allowed}",
            f"Violations: {result.total_violations}",
            "",
            f"Status: [{status_color}]{status}[/{status_color}]",
        ]

        panel = Panel(
            "\n".join(summary_lines),
            title="[bold]LICENSE CHECK[/bold]",
            border_style=status_color,
        )
        self._console.print(panel)
        self._console.print("")

    def _print_module(self, module: ModuleReport) -> None:
        """Print the dependency table and violations of one module.

        Args:
            module: The module report to display.
        """
        table = Table(title=f"Dependencies of {escape(module.module)}")

        table.add_column("Dependency", style="cyan", no_wrap=True)
        table.add_column("Version", style="magenta")
        table.add_column("License")
        table.add_column("Verdict")
        if self._verbosity == Verbosity.VERBOSE:
            table.add_column("Reason")

        for dep_result in module.report.results:
            dep = dep_result.dependency
            row = [
                escape(dep.name),
                escape(dep.version or ""),
                escape(dep.license or "") if dep.has_license else "[yellow]None[/yellow]",
                _VERDICT_STYLES[dep_result.verdict],
            ]
            if self._verbosity == Verbosity.VERBOSE:
                row.append(escape(dep_result.reason or ""))
            table.add_row(*row)

        self._console.print(table)

        if module.report.violations:
            self._console.print(
                f"[bold red]Violations ({len(module.report.violations)})[/bold red]"
            )
            for violation in module.report.violations:
                marker = "!" if violation.kind == ViolationKind.NOT_ALLOWED else "?"
                self._console.print(f"  [red]{marker}[/red] {escape(violation.message)}")

        if self._verbosity == Verbosity.VERBOSE and module.used_licenses:
            used = escape(", ".join(lic.identifier for lic in module.used_licenses))
            self._console.print(f"[bold]Licenses in use:[/bold] {used}")

        self._console.print("")
