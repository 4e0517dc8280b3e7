import logging
from pathlib import Path
from typing import Any, Dict

import click
from rich.console import Console
from rich.logging import RichHandler

from codeowners_lens.config import LensConfig, load_config
from codeowners_lens.errors import CodeOwnersError, ProjectNotFoundError
from codeowners_lens.globs.matcher import GlobMatcher
from codeowners_lens.labels import owner_label
from codeowners_lens.models import OwnerRow, OwnerStatus, RuleRow
from codeowners_lens.rules.models import FileCodeOwnerState, NoRuleFileFound, RuleMatched
from codeowners_lens.service import CodeOwnerService
from codeowners_lens.tui.renderers import OwnersConsoleUI


def _project_option():
    return click.option(
        "-p",
        "--project",
        type=click.Path(path_type=Path),
        default=".",
        show_default=True,
        help="Project root governed by the CODEOWNERS file.",
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_project(project: Path) -> Path:
    resolved = project.expanduser().resolve()
    if not resolved.is_dir():
        raise ProjectNotFoundError(resolved)
    return resolved


def _service_from_obj(
    _obj: Dict[str, Any], project: Path
) -> tuple[Path, LensConfig, CodeOwnerService]:
    try:
        project_dir = _resolve_project(project)
        config = load_config(project_dir)
    except CodeOwnersError as exc:
        raise click.ClickException(str(exc))

    service = CodeOwnerService(GlobMatcher(), config.files_helper())
    service.refresh_code_owner_rules(str(project_dir))
    return project_dir, config, service


def _owner_row(service: CodeOwnerService, path: Path, state: FileCodeOwnerState) -> OwnerRow:
    if isinstance(state, NoRuleFileFound):
        return OwnerRow(path=str(path), status=OwnerStatus.NO_RULE_FILE, label=owner_label(state), owners=[])
    if not isinstance(state, RuleMatched):
        return OwnerRow(path=str(path), status=OwnerStatus.UNOWNED, label=owner_label(state), owners=[])

    rule = state.rule
    rule_file = service.get_code_owner_file_for_rule(rule)
    return OwnerRow(
        path=str(path),
        status=OwnerStatus.OWNED,
        label=owner_label(state),
        owners=service.get_true_owners(rule),
        line_number=rule.line_number,
        pattern=rule.pattern,
        rule_file=str(rule_file) if rule_file is not None else None,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Log rule loading details to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Find out who owns a file according to CODEOWNERS."""
    _configure_logging(verbose)
    ctx.obj = {}


@cli.command(help="Show the code owners of one or more paths.")
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@_project_option()
@click.pass_obj
def owner(obj: Dict[str, Any], paths: tuple[Path, ...], project: Path) -> None:
    ui = OwnersConsoleUI(Console())
    project_dir, config, service = _service_from_obj(obj, project)

    rows: list[OwnerRow] = []
    for path in paths:
        absolute = path.expanduser().resolve()
        state = service.get_file_code_owner_state(str(project_dir), str(absolute))
        rows.append(_owner_row(service, absolute, state))

    if rows and all(row.status == OwnerStatus.NO_RULE_FILE for row in rows):
        ui.render_missing_rule_file(str(project_dir), config.rule_file_paths)
        raise click.exceptions.Exit(1)

    ui.render_owners(rows, owner_prefix=service.owner_prefix)


@cli.command(help="List the CODEOWNERS rules that apply to a project.")
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@_project_option()
@click.pass_obj
def rules(obj: Dict[str, Any], paths: tuple[Path, ...], project: Path) -> None:
    ui = OwnersConsoleUI(Console())
    project_dir, config, service = _service_from_obj(obj, project)

    # Paths pull in the rule files of the modules they live in.
    for path in paths:
        service.ensure_loaded(str(project_dir), str(path.expanduser().resolve()))

    if service.table.is_empty():
        ui.render_missing_rule_file(str(project_dir), config.rule_file_paths)
        raise click.exceptions.Exit(1)

    rows = [
        RuleRow(
            rule_file=str(handle.file),
            base_dir=handle.base_dir_path,
            line_number=rule.line_number,
            pattern=rule.pattern,
            owners=service.get_true_owners(rule),
        )
        for handle, rule in service.list_rules()
    ]
    ui.render_rules(rows)


if __name__ == "__main__":
    cli()
