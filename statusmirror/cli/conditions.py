"""
CLI condition commands — mirror a condition between resource files, list conditions.

Usage:
    statusmirror mirror --source infra.yaml --target machine.yaml --type Ready
        [--target-type InfraReady]
        [--fallback-status False --fallback-reason R --fallback-message M]
        [--dry-run] [--json]
    statusmirror conditions machine.yaml [--json]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import click

from ..conditions import (
    FallbackCondition,
    MirrorOption,
    TargetConditionType,
    get_condition,
    set_mirror_condition_from_unstructured,
)
from ..models.condition import Condition, ConditionStatus
from ..persistence.object_file import load_object, load_resource, save_resource
from ..validation import ValidationError

STATUS_STYLES = {
    ConditionStatus.TRUE: ("✅", "green"),
    ConditionStatus.FALSE: ("❌", "red"),
    ConditionStatus.UNKNOWN: ("❓", "yellow"),
}


def _echo_condition(condition: Condition) -> None:
    icon, color = STATUS_STYLES[condition.status]
    click.echo(f"  {icon} ", nl=False)
    click.secho(condition.type, fg=color, bold=True, nl=False)
    click.echo(f": {condition.status.value}", nl=False)
    if condition.reason:
        click.echo(f" ({condition.reason})", nl=False)
    click.echo()
    if condition.message:
        click.echo(f"      {condition.message}")
    if condition.last_transition_time:
        click.echo(f"      Since: {condition.last_transition_time.isoformat()}")


@click.command("mirror")
@click.option("--source", "source_file", required=True, type=click.Path(path_type=Path),
              help="Resource file to read the condition from")
@click.option("--target", "target_file", required=True, type=click.Path(path_type=Path),
              help="Resource file to write the mirror condition to")
@click.option("--type", "condition_type", required=True, help="Condition type on the source")
@click.option("--target-type", default=None, help="Condition type on the target (default: --type)")
@click.option("--fallback-status", type=click.Choice([s.value for s in ConditionStatus]),
              default=None, help="Status to use when the source condition is missing")
@click.option("--fallback-reason", default="", help="Reason to use with --fallback-status")
@click.option("--fallback-message", default="", help="Message to use with --fallback-status")
@click.option("--dry-run", is_flag=True, help="Don't write the target file")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def mirror_cmd(
    source_file: Path,
    target_file: Path,
    condition_type: str,
    target_type: Optional[str],
    fallback_status: Optional[str],
    fallback_reason: str,
    fallback_message: str,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Mirror a condition from one resource file onto another."""
    opts: List[MirrorOption] = []
    if target_type:
        opts.append(TargetConditionType(target_type))
    if fallback_status:
        opts.append(FallbackCondition(ConditionStatus(fallback_status), fallback_reason, fallback_message))
    elif fallback_reason or fallback_message:
        raise click.UsageError("--fallback-reason and --fallback-message require --fallback-status")

    try:
        source = load_object(source_file)
        target = load_resource(target_file)
        set_mirror_condition_from_unstructured(source, target, condition_type, *opts)
    except ValidationError as e:
        raise click.ClickException(str(e)) from e

    result = get_condition(target, target_type or condition_type)

    if not dry_run:
        save_resource(target, target_file)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo()
    verb = "Would set" if dry_run else "Set"
    click.echo(f"🔀 {verb} condition on {target.kind}/{target.metadata.name}:")
    _echo_condition(result)
    click.echo()


@click.command("conditions")
@click.argument("resource_file", type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def conditions_cmd(resource_file: Path, as_json: bool) -> None:
    """List the conditions of a resource file."""
    try:
        resource = load_resource(resource_file)
    except ValidationError as e:
        raise click.ClickException(str(e)) from e

    items = resource.get_conditions()

    if as_json:
        click.echo(json.dumps([c.to_dict() for c in items], indent=2))
        return

    click.echo()
    click.secho(f"📋 {resource.kind}/{resource.metadata.name}", bold=True)
    click.echo(f"   Generation: {resource.generation}")
    click.echo()

    if not items:
        click.echo("  No conditions reported.")
        click.echo()
        return

    for condition in items:
        _echo_condition(condition)
    click.echo()
