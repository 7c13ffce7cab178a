"""
CLI interface for the verification-form engine.
Uses Typer for commands and Rich for output.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from caseflow_forms.config import get_settings
from caseflow_forms.models.enums import FormType
from caseflow_forms.models.mapping import VerificationSchema
from caseflow_forms.services.engine import VerificationFormEngine, get_engine

app = typer.Typer(
    name="caseflow-forms",
    help="Verification form schemas, storage mapping and validation",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Configure logging for every command."""
    settings = get_settings()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# ============================================================================
# Helpers
# ============================================================================

def _load_submission(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        console.print(f"[red]Cannot read {path}: {e}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON ({e}): {path}[/red]")
        raise typer.Exit(1)

    if not isinstance(data, dict):
        console.print(f"[red]Submission must contain a JSON object, got {type(data).__name__}: {path}[/red]")
        raise typer.Exit(1)
    return data


def _require_schema(engine: VerificationFormEngine, verification_type: str) -> VerificationSchema:
    schema = engine.schema_for(verification_type)
    if schema is None:
        valid = ", ".join(s.verification_type.value for s in engine.config)
        console.print(f"[red]Unknown verification type: {verification_type}. Valid options: {valid}[/red]")
        raise typer.Exit(1)
    return schema


def _require_form_type(form_type: str) -> FormType:
    parsed = FormType.parse(form_type)
    if parsed is None:
        valid = ", ".join(f.value for f in FormType)
        console.print(f"[red]Invalid form type: {form_type}. Valid options: {valid}[/red]")
        raise typer.Exit(1)
    return parsed


# ============================================================================
# Schema Commands
# ============================================================================
@app.command("types")
def list_types():
    """List verification types and their destination tables."""
    engine = get_engine()

    table = Table(title="Verification Types", box=box.ROUNDED)
    table.add_column("Type", style="cyan")
    table.add_column("Aliases")
    table.add_column("Table", style="green")
    table.add_column("Fields", justify="right")
    table.add_column("Columns", justify="right")

    for schema in engine.config:
        table.add_row(
            schema.verification_type.value,
            ", ".join(schema.aliases) or "-",
            schema.table_name,
            str(len(schema.fields)),
            str(len(schema.all_columns)),
        )

    console.print(table)


@app.command("sections")
def show_sections(
    verification_type: str = typer.Argument(..., help="Verification type, e.g. RESIDENCE"),
    form_type: Optional[str] = typer.Option(None, "--form-type", "-f", help="Form type filter"),
):
    """Show the ordered sections and fields of a form."""
    engine = get_engine()
    schema = _require_schema(engine, verification_type)
    parsed = _require_form_type(form_type) if form_type else None

    title = schema.verification_type.value
    if parsed:
        title += f" / {parsed.label}"
    console.print(Panel.fit(f"[bold]{title}[/bold]", border_style="blue"))

    for section in engine.get_sections(schema.verification_type, parsed):
        table = Table(title=section, box=box.SIMPLE, title_justify="left")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Field", style="cyan")
        table.add_column("Label")
        table.add_column("Type")
        table.add_column("Required")

        for definition in engine.get_fields_for_section(schema.verification_type, section, parsed):
            table.add_row(
                str(definition.order),
                definition.name,
                definition.label,
                definition.value_type.value,
                "[green]yes[/green]" if definition.is_required else "",
            )
        console.print(table)


# ============================================================================
# Submission Commands
# ============================================================================
@app.command("render")
def render_submission(
    verification_type: str = typer.Argument(..., help="Verification type"),
    form_type: str = typer.Argument(..., help="Form type, e.g. POSITIVE"),
    path: Path = typer.Argument(..., help="JSON file with the submission"),
):
    """Render a submission as display sections."""
    engine = get_engine()
    schema = _require_schema(engine, verification_type)
    parsed = _require_form_type(form_type)
    submission = _load_submission(path)

    for section in engine.build_sections(submission, schema.verification_type, parsed):
        lines = []
        for populated in section.fields:
            if populated.value is None:
                lines.append(f"{populated.label}: [dim]{populated.display_value}[/dim]")
            else:
                lines.append(f"{populated.label}: {populated.display_value}")
        console.print(Panel(
            "\n".join(lines),
            title=f"{section.order}. {section.title}",
            border_style="green" if section.is_required else "blue",
        ))


@app.command("map")
def map_submission(
    verification_type: str = typer.Argument(..., help="Verification type"),
    path: Path = typer.Argument(..., help="JSON file with the submission"),
    form_type: Optional[str] = typer.Option(None, "--form-type", "-f", help="Form type for the relevance check"),
    complete: bool = typer.Option(True, "--complete/--no-complete", help="Fill every known column"),
):
    """Map a submission to storage columns and print it as JSON."""
    engine = get_engine()
    schema = _require_schema(engine, verification_type)
    submission = _load_submission(path)

    if complete:
        parsed = _require_form_type(form_type or get_settings().default_form_type)
        record = engine.map_to_storage(submission, schema.verification_type, parsed)
    else:
        record = engine.map_to_storage(submission, schema.verification_type)

    console.print(f"[blue]Table:[/blue] {schema.table_name}")
    console.print_json(json.dumps(record, default=str))


@app.command("validate")
def validate_submission(
    verification_type: str = typer.Argument(..., help="Verification type"),
    form_type: str = typer.Argument(..., help="Form type"),
    path: Path = typer.Argument(..., help="JSON file with the submission"),
    report: bool = typer.Option(False, "--report", "-r", help="Print the full coverage report"),
):
    """Validate a submission; exits with status 1 when required fields are missing."""
    engine = get_engine()
    schema = _require_schema(engine, verification_type)
    parsed = _require_form_type(form_type)
    submission = _load_submission(path)

    result, record = engine.validate_and_prepare(submission, schema.verification_type, parsed)

    if result.is_valid:
        console.print("[green]Valid submission[/green]")
    else:
        console.print(f"[red]Missing {len(result.missing_fields)} required field(s):[/red]")
        for name in result.missing_fields:
            console.print(f"  - {name}")

    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")

    coverage = result.coverage
    if coverage is not None:
        console.print(
            f"Coverage: {coverage.populated_fields}/{coverage.total_fields} "
            f"({coverage.coverage_percentage}%)"
        )

    if report:
        console.print()
        console.print(engine.coverage_report(submission, schema.verification_type, parsed), markup=False)

    if not result.is_valid:
        raise typer.Exit(1)


@app.command("detect")
def detect_form_type(
    verification_type: str = typer.Argument(..., help="Verification type"),
    path: Path = typer.Argument(..., help="JSON file with the submission"),
):
    """Detect which form type a submission was filled for."""
    engine = get_engine()
    schema = _require_schema(engine, verification_type)
    submission = _load_submission(path)

    analysis = engine.analyze_form_type_detection(submission, schema.verification_type)
    result = analysis["result"]
    details = analysis["analysis"]

    console.print(Panel.fit(
        f"[bold]{result['formType']}[/bold] - {result['verificationOutcome']}\n"
        f"Confidence: {result['confidence']}%\n"
        f"Method: {result['detectionMethod']}",
        title="Detected Form Type",
        border_style="blue",
    ))

    table = Table(title="Indicator Scores", box=box.ROUNDED)
    table.add_column("Form Type", style="cyan")
    table.add_column("Score", justify="right", style="green")
    for name, score in details["fieldIndicators"].items():
        table.add_row(name, str(score))
    console.print(table)

    console.print(f"Patterns: {', '.join(details['patternMatches']) or '-'}")
    console.print(f"Confidence factors: {', '.join(details['confidenceFactors']) or '-'}")
    console.print(f"Fields submitted: {details['totalFields']}")


if __name__ == "__main__":
    app()
