"""Console reporter: FilterRegistry → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from tagfilter.domain.model.enums import Matcher
    from tagfilter.domain.model.filter import Filter
    from tagfilter.domain.model.registry import FilterRegistry


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in columns.
        show_empty: Show matchers with an empty bucket.
        color: Emit ANSI styles.
    """

    width: int = 120
    show_empty: bool = True
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class RegistryConsoleReporter:
    """Renders configured filters as a table, one section per matcher.

    Output is str, not print(). Caller decides destination.
    Filters are listed in evaluation order.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, registry: FilterRegistry) -> str:
        """Format registry as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            color_system="standard" if self._config.color else None,
            width=self._config.width,
        )

        console.rule("[bold]FILTERS[/bold]")
        if registry.is_empty:
            console.print("No filters: every event passes.")
            return output.getvalue()

        console.print(f"[bold]Filters:[/bold] {len(registry)} in {len(registry.matchers)} bucket(s)")

        for matcher in registry.matchers:
            bucket = registry.get(matcher) or ()
            if not bucket and not self._config.show_empty:
                continue
            console.print(self._render_bucket(matcher, bucket))

        return output.getvalue()

    def _render_bucket(self, matcher: Matcher, bucket: tuple[Filter, ...]) -> Table:
        """Table for one bucket."""
        table = Table(title=matcher.name_in_rules, title_justify="left")
        table.add_column("#", justify="right")
        table.add_column("Rule")
        table.add_column("Negate")
        table.add_column("In path")

        if not bucket:
            table.add_row("-", "[dim](empty)[/dim]", "", "")
            return table

        for position, flt in enumerate(bucket, start=1):
            table.add_row(
                str(position),
                escape(str(flt)),
                "yes" if flt.negate else "no",
                escape(str(flt.in_path)) if flt.in_path is not None else "",
            )
        return table
