"""User interface components - notices, settings display, sync reports."""

from rich.console import Console
from rich.table import Table
from rich.markup import escape

from heading_sync.constants import CONSOLE_STYLES
from heading_sync.core.results import SyncOutcome, SyncResult
from heading_sync.core.ignore_filter import list_regex_ignored

console = Console()


# Outcome -> (style, label) used when reporting results
_OUTCOME_STYLES = {
    SyncOutcome.RENAMED:        (CONSOLE_STYLES['success'], 'Renamed'),
    SyncOutcome.WOULD_RENAME:   (CONSOLE_STYLES['info'], 'Would rename'),
    SyncOutcome.UNCHANGED:      (CONSOLE_STYLES['dim'], 'Up to date'),
    SyncOutcome.NO_HEADING:     (CONSOLE_STYLES['dim'], 'No heading'),
    SyncOutcome.EMPTY_NAME:     (CONSOLE_STYLES['warning'], 'Heading has no usable characters'),
    SyncOutcome.IGNORED:        (CONSOLE_STYLES['dim'], 'Ignored'),
    SyncOutcome.SKIPPED:        (CONSOLE_STYLES['dim'], 'Skipped'),
    SyncOutcome.BUSY:           (CONSOLE_STYLES['warning'], 'Already syncing'),
    SyncOutcome.FAILED:         (CONSOLE_STYLES['error'], 'Failed'),
}


def show_notice(message: str):
    """Transient user-visible notice. Never raises, never blocks."""
    style = CONSOLE_STYLES['warning']
    console.print(f"[{style}]{escape(message)}[/{style}]")


def report_sync_result(result: SyncResult, verbose: bool = False):
    """Print a one-line report for a sync attempt."""
    style, label = _OUTCOME_STYLES.get(result.outcome, ('white', result.outcome))
    
    if result.outcome in (SyncOutcome.RENAMED, SyncOutcome.WOULD_RENAME):
        console.print(f"[{style}]{label}: {escape(str(result.document))} → {escape(str(result.new_path))}[/{style}]")
    elif result.outcome == SyncOutcome.FAILED:
        console.print(f"[{style}]{label}: {escape(str(result.document))}[/{style}]")
    elif verbose:
        console.print(f"[{style}]{label}: {escape(str(result.document))}[/{style}]")


def display_sync_summary(results: list[SyncResult]):
    """Show counts per outcome after a batch sync."""
    if not results:
        console.print("[dim]No Markdown notes found[/dim]")
        return
    
    counts = {}
    for result in results:
        counts[result.outcome] = counts.get(result.outcome, 0) + 1
    
    table = Table(title="Sync Summary")
    table.add_column("Outcome", style="cyan")
    table.add_column("Notes", justify="right", style="magenta")
    
    for outcome, count in counts.items():
        _, label = _OUTCOME_STYLES.get(outcome, ('white', outcome))
        table.add_row(label, str(count))
    
    console.print(table)


def display_settings_table(settings, settings_path=None):
    """Display current settings in a formatted table."""
    title = "Heading Sync Settings"
    if settings_path is not None:
        title += f" ({settings_path})"
    
    table = Table(title=title)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    
    replacement = settings.user_illegal_symbol_replacement
    
    table.add_row("Alphanumeric ASCII only", "on" if settings.allow_alphanumeric_only else "off")
    table.add_row("Custom characters/strings", escape(','.join(settings.user_illegal_symbols)) or "[dim](none)[/dim]")
    table.add_row("Replacement", escape(repr(replacement)) if replacement else "[dim](remove)[/dim]")
    table.add_row("File save hook", "on" if settings.use_file_save_hook else "off")
    table.add_row("File open hook", "on" if settings.use_file_open_hook else "off")
    table.add_row("Ignore regex", escape(settings.ignore_regex) or "[dim](disabled)[/dim]")
    table.add_row("Excluded folders", escape(', '.join(settings.excluded_folders)) or "[dim](none)[/dim]")
    
    console.print(table)


def display_regex_ignored_files(paths: list[str], pattern: str):
    """List the notes the ignore regex currently matches."""
    console.print("\n[cyan]Files matching the ignore regex:[/cyan]")
    
    matched = list_regex_ignored(paths, pattern)
    if not matched:
        console.print("  [dim](none)[/dim]")
        return
    
    for path in matched:
        console.print(f"  {escape(path)}")


def display_ignored_files(ignored_files):
    """List the manually ignored notes."""
    console.print("\n[cyan]Manually ignored files:[/cyan]")
    
    if not ignored_files:
        console.print("  [dim](none) - use --ignore-current to ignore a note[/dim]")
        return
    
    for path in ignored_files:
        console.print(f"  {escape(path)}")
    console.print("[dim]Remove an entry with --unignore PATH[/dim]")
