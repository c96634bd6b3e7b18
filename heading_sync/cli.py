"""Command-line interface for syncing note filenames with their first heading."""

import sys
import signal
import argparse

from pathlib import Path
from rich.console import Console

from heading_sync._version import __version__
from heading_sync.constants import DEFAULT_SETTINGS_FILENAME, DEFAULT_WATCH_INTERVAL
from heading_sync.ui import (
    report_sync_result,
    display_sync_summary,
    display_settings_table,
    display_regex_ignored_files,
    display_ignored_files,
)
from heading_sync.core.vault import FileSystemVault, Workspace
from heading_sync.core.results import SyncOutcome
from heading_sync.core.watcher import PollingWatcher
from heading_sync.core.settings import SettingsContext, SettingsStore
from heading_sync.core.exceptions import SettingsError
from heading_sync.core.orchestrator import SyncOrchestrator


console = Console()


def setup_signal_handlers():
    """Setup graceful handling of Ctrl+C interruptions."""
    def signal_handler(sig, frame):
        console.print("\n[yellow]Operation interrupted by user[/yellow]")
        sys.exit(130)  # Standard exit code for Ctrl+C
    
    signal.signal(signal.SIGINT, signal_handler)


epilog_for_argparse = """
Operations:
    --sync              Rename the note after its first level 1 heading now
    --open FILE         Deliver an "opened" event for FILE (honors the open hook)
    --watch             Watch the vault and sync notes as they are saved
    --ignore-current    Add the given note to the manual ignore list
    --unignore PATH     Remove a path from the manual ignore list
    --show-settings     Show settings, regex-ignored and manually ignored notes

How a name is derived from a heading:
    1. The note body starts after a leading metadata block (--- ... ---)
    2. The first line starting with "# " is the heading
    3. Surrounding whitespace is trimmed
    4. Characters \\ / : | # ^ [ ] are replaced with the replacement string
    5. With --alphanumeric-only, accents are dropped (é -> e) and anything
       that is not an ASCII letter or digit is replaced
    6. Custom characters/strings (--illegal-symbols) are replaced
    7. Repeated replacement strings collapse to one, a trailing one is removed

Examples:
    %(prog)s notes/todo.md --sync              # Rename one note now
    %(prog)s notes/ --sync --batch             # Rename every note in the vault
    %(prog)s notes/ --sync --batch --dry-run   # Show what would be renamed
    %(prog)s notes/ --watch                    # Sync notes as they are saved
    %(prog)s notes/ --open notes/todo.md       # Simulate opening a note

    Settings (saved to .heading-sync.json in the vault):
    %(prog)s notes/ --replacement="-" --illegal-symbols="?,!,tmp"
    %(prog)s notes/ --alphanumeric-only=on
    %(prog)s notes/ --ignore-regex="drafts/.*" --show-settings
    %(prog)s notes/ --save-hook=off --open-hook=on
    %(prog)s notes/ --exclude-folder=templates --exclude-folder=archive

Note: No short arguments are provided to ensure clarity and prevent accidents.
"""


def _on_off(value: str) -> bool:
    value = value.strip().lower()
    if value in ('on', 'true', 'yes', '1'):
        return True
    if value in ('off', 'false', 'no', '0'):
        return False
    raise argparse.ArgumentTypeError(f"expected on/off, got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heading-sync",
        description="Heading Sync - Keep Markdown note filenames in sync with their first heading",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog_for_argparse
    )
    
    parser.add_argument('path', type=Path, default=Path('.'), nargs='?',
        help='Markdown note or vault folder (default: current directory)')
    
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}',
        help='Show program version and exit')
    
    parser.add_argument('--vault', type=Path, metavar='DIR',
        help='Vault root folder (default: the folder given, or the note\'s folder)')
    
    # Operations
    operations = parser.add_argument_group('operations')
    operations.add_argument('--sync', action='store_true',
        help='Rename the note after its first heading now (manual command, no hook or ignore checks)')
    operations.add_argument('--open', type=Path, metavar='FILE', dest='open_file',
        help='Deliver an "opened" event for FILE')
    operations.add_argument('--watch', action='store_true',
        help='Watch the vault and sync notes when they are saved')
    operations.add_argument('--ignore-current', action='store_true',
        help='Add the given note to the manual ignore list')
    operations.add_argument('--unignore', metavar='PATH',
        help='Remove a vault path from the manual ignore list')
    operations.add_argument('--show-settings', action='store_true',
        help='Show current settings and ignored notes')
    
    # Renaming rules
    rules = parser.add_argument_group('rules for renaming')
    rules.add_argument('--alphanumeric-only', type=_on_off, metavar='on|off',
        help='Allow alphanumeric ASCII characters only (plus the replacement string)')
    rules.add_argument('--illegal-symbols', metavar='LIST',
        help='Custom characters/strings to replace, separated by commas (e.g. "?,!,tmp,..")')
    rules.add_argument('--replacement', metavar='STR',
        help='Replacement for unwanted characters/strings; empty removes them')
    
    # Hooks
    hooks = parser.add_argument_group('hooks')
    hooks.add_argument('--save-hook', type=_on_off, metavar='on|off',
        help='Sync automatically when a note is saved')
    hooks.add_argument('--open-hook', type=_on_off, metavar='on|off',
        help='Sync automatically when a note is opened')
    
    # Ignoring
    ignoring = parser.add_argument_group('ignored files')
    ignoring.add_argument('--ignore-regex', metavar='PATTERN',
        help='Ignore notes whose vault path matches this regex (empty disables)')
    ignoring.add_argument('--exclude-folder', action='append', metavar='DIR',
        help='Exclude every note under this vault folder (can be used multiple times)')
    
    # Processing modes
    modes = parser.add_argument_group('processing modes')
    modes.add_argument('--batch', action='store_true',
        help='With --sync on a folder: sync every note in the vault')
    modes.add_argument('--dry-run', action='store_true',
        help='Show what would be renamed without renaming')
    modes.add_argument('--interval', type=float, default=DEFAULT_WATCH_INTERVAL, metavar='SECONDS',
        help=f'Polling interval for --watch (default: {DEFAULT_WATCH_INTERVAL})')
    modes.add_argument('--settings-file', type=Path, metavar='FILE',
        help=f'Settings file (default: <vault>/{DEFAULT_SETTINGS_FILENAME})')
    modes.add_argument('--verbose', action='store_true',
        help='Report every note, including ones left unchanged')
    
    return parser


def resolve_vault_root(args: argparse.Namespace) -> Path:
    if args.vault:
        return args.vault
    if args.path.is_file():
        return args.path.parent
    return args.path


def apply_settings_changes(args: argparse.Namespace, settings: SettingsContext) -> bool:
    """
    Apply settings given on the command line.
    
    Returns:
        True if anything was changed
    """
    changed = False
    
    if args.alphanumeric_only is not None:
        settings.set_alphanumeric_only(args.alphanumeric_only)
        changed = True
    
    if args.illegal_symbols is not None:
        settings.set_user_illegal_symbols(args.illegal_symbols)
        changed = True
    
    if args.replacement is not None:
        settings.set_replacement(args.replacement)
        changed = True
    
    if args.save_hook is not None:
        settings.set_use_file_save_hook(args.save_hook)
        changed = True
    
    if args.open_hook is not None:
        settings.set_use_file_open_hook(args.open_hook)
        changed = True
    
    if args.ignore_regex is not None:
        if not settings.set_ignore_regex(args.ignore_regex):
            console.print(f"[yellow]Invalid ignore regex, rule disabled: {args.ignore_regex}[/yellow]")
        changed = True
    
    if args.exclude_folder:
        settings.set_excluded_folders(args.exclude_folder)
        changed = True
    
    if changed:
        console.print("[green]Settings saved[/green]")
    
    return changed


def validate_arguments(args: argparse.Namespace) -> tuple[bool, str]:
    """Validate argument combinations."""
    is_file = args.path.is_file()
    is_folder = args.path.is_dir()
    
    if not is_file and not is_folder:
        return False, f"{args.path} is not a valid file or directory"
    
    if args.batch and not args.sync:
        return False, "--batch can only be used with --sync"
    
    if args.batch and is_file:
        return False, "--batch requires a vault folder, not a single note"
    
    if args.sync and is_folder and not args.batch:
        return False, "--sync on a folder requires --batch"
    
    if args.dry_run and not args.sync:
        return False, "--dry-run can only be used with --sync"
    
    if args.ignore_current and not is_file:
        return False, "--ignore-current requires a note path"
    
    if args.open_file is not None and not args.open_file.is_file():
        return False, f"{args.open_file} is not a file"
    
    if args.interval <= 0:
        return False, "--interval must be positive"
    
    operations = sum([args.sync, args.open_file is not None, args.watch])
    if operations > 1:
        return False, "Please specify only one of --sync, --open, --watch"
    
    return True, ""


def main():
    """
    Main entry point for Heading Sync.

    Design note: only long arguments (--flag) are provided, so renaming
    operations are always spelled out.
    """
    setup_signal_handlers()
    
    parser = build_parser()
    args = parser.parse_args()
    
    is_valid, error_msg = validate_arguments(args)
    if not is_valid:
        console.print(f"[red]Error: {error_msg}[/red]")
        sys.exit(1)
    
    vault = FileSystemVault(resolve_vault_root(args))
    settings_path = args.settings_file or vault.root / DEFAULT_SETTINGS_FILENAME
    
    try:
        settings = SettingsContext(SettingsStore(settings_path))
        settings_changed = apply_settings_changes(args, settings)
    except SettingsError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    
    workspace = Workspace()
    if args.path.is_file():
        try:
            workspace.set_active_file(vault.document_for(args.path))
        except ValueError:
            console.print(f"[red]Error: {args.path} is not inside the vault {vault.root}[/red]")
            sys.exit(1)
    
    orchestrator = SyncOrchestrator(vault, workspace, settings)
    did_something = settings_changed
    
    try:
        if args.unignore:
            if settings.unignore_file(args.unignore):
                console.print(f"[green]No longer ignoring {args.unignore}[/green]")
            else:
                console.print(f"[yellow]{args.unignore} was not in the ignore list[/yellow]")
            did_something = True
        
        if args.ignore_current:
            if orchestrator.ignore_current_file():
                console.print(f"[green]Ignoring {workspace.get_active_file()}[/green]")
            did_something = True
    except SettingsError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    
    if args.show_settings:
        current = settings.get()
        display_settings_table(current, settings_path)
        display_regex_ignored_files([d.path for d in vault.list_files()], current.ignore_regex)
        display_ignored_files(current.ignored_files)
        did_something = True
    
    if args.sync:
        if args.batch:
            results = orchestrator.sync_folder(vault.list_files(), dry_run=args.dry_run)
            for result in results:
                report_sync_result(result, verbose=args.verbose)
            display_sync_summary(results)
            if any(r.outcome == SyncOutcome.FAILED for r in results):
                sys.exit(1)
        else:
            result = orchestrator.sync_active(dry_run=args.dry_run)
            report_sync_result(result, verbose=True)
            if result.outcome == SyncOutcome.FAILED:
                sys.exit(1)
        return
    
    if args.open_file is not None:
        try:
            document = vault.document_for(args.open_file)
        except ValueError:
            console.print(f"[red]Error: {args.open_file} is not inside the vault {vault.root}[/red]")
            sys.exit(1)
        workspace.set_active_file(document)
        report_sync_result(orchestrator.handle_open(document), verbose=True)
        return
    
    if args.watch:
        watcher = PollingWatcher(vault, orchestrator, workspace, interval=args.interval,
                                 on_result=lambda r: report_sync_result(r, verbose=args.verbose))
        watcher.run()
        return
    
    if not did_something:
        console.print("\nAvailable operations:")
        console.print("  --sync             Rename the note after its first heading")
        console.print("  --sync --batch     Rename every note in the vault")
        console.print("  --watch            Sync notes as they are saved")
        console.print("  --show-settings    Show settings and ignored notes")
        console.print("\nRun with --help for all options")


if __name__ == "__main__":
    main()

# End of file #
