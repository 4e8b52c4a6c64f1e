import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from owns.discovery import DiscoveryService
from owns.errors import OwnsAppError, TargetNotFoundError
from owns.owners_file import OwnersFile
from owns.tui import OwnsConsoleUI


def _configure_logging(verbose: bool) -> None:
    # Diagnostics are rendered as panels; keep their log records quiet unless -v.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_target(path: Path) -> Path:
    target = path.expanduser()
    if not target.exists():
        raise TargetNotFoundError(path)
    return target.resolve()


def _locate_owners_file(target: Path, codeowners: Optional[Path]) -> Optional[Path]:
    if codeowners is not None:
        return codeowners.expanduser().resolve()
    discovery = DiscoveryService()
    return discovery.locate_codeowners_in_dir(discovery.find_repo_root(target))


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Print the CODEOWNERS owners of FILE, one per line.",
)
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--codeowners",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Use this CODEOWNERS file instead of searching the repository.",
)
@click.option("--explain", is_flag=True, help="Show which rule matched FILE.")
@click.option("--strict", is_flag=True, help="Fail when CODEOWNERS has invalid patterns.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(file: Path, codeowners: Optional[Path], explain: bool, strict: bool, verbose: bool) -> None:
    _configure_logging(verbose)
    ui = OwnsConsoleUI(Console(), Console(stderr=True))

    try:
        target = _resolve_target(file)
        owners_path = _locate_owners_file(target, codeowners)
        if owners_path is None:
            if explain:
                ui.render_no_codeowners(target)
            return
        owners_file = OwnersFile.load(owners_path)
    except OwnsAppError as exc:
        raise click.ClickException(str(exc))

    ui.render_diagnostics(owners_file.path, owners_file.diagnostics)
    if strict and owners_file.diagnostics:
        raise click.ClickException(
            f"{len(owners_file.diagnostics)} invalid pattern(s) in {owners_file.path}"
        )

    rule = owners_file.rule_for(target)
    if explain:
        ui.render_explain(owners_file.relative_path(target), owners_file.path, rule)
    ui.render_owners(rule.owners if rule is not None else None)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.exceptions.Abort:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
