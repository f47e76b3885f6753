"""Command-line interface for the steel beam design engine.

Usage::

    steelbeam run <input_yaml> [-o report.json] [--heavier-than NAME]
    steelbeam template
    steelbeam sections <standard> <family>
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from steelbeam.catalog import load_default_catalog
from steelbeam.core.beam_design import run_analysis
from steelbeam.errors import BeamDesignError
from steelbeam.input_parser import generate_template, parse_input


# ---------------------------------------------------------------------------
# Top-level group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(package_name="steel-beam-design")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose: bool):
    """Steel Beam Design - AISC 360-16 & ASCE 7-16 (LRFD)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

@main.command()
@click.argument("input_file", type=click.Path(exists=True))
@click.option(
    "-o", "--output",
    default=None,
    help="Write the JSON report to this file.",
)
@click.option(
    "--heavier-than",
    default=None,
    help="Only consider sections heavier than this one.",
)
def run(input_file: str, output: str, heavier_than: str) -> None:
    """Design a beam from INPUT_FILE and print a summary."""
    click.echo(f"Reading input file: {input_file}")
    try:
        inputs = parse_input(input_file)
        report = run_analysis(inputs, heavier_than=heavier_than)
    except BeamDesignError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc

    forces = report.internal_forces
    section = report.selected_section

    click.echo("")
    click.secho("=" * 60, bold=True)
    click.secho("  STEEL BEAM DESIGN SUMMARY", bold=True)
    click.secho("=" * 60, bold=True)
    click.echo(f"\n  Code          : {report.design_code}")
    click.echo(f"  Governing     : {report.governing_combination.name} "
               f"({report.governing_combination.formula}) = "
               f"{report.governing_combination.factored_load:.2f} kN/m")
    click.echo(f"  Mu / Vu       : {forces.moment:.2f} kNm / {forces.shear:.2f} kN")
    click.echo(f"  Section       : {section.name} ({section.properties.unit_weight:.1f} kg/m)")
    click.echo("")

    for check in report.design_checks:
        colour = "green" if check.passed else "red"
        click.echo(f"  {check.check_name:<26}: ", nl=False)
        click.secho(f"{check.ratio:.3f} {check.status.value}", fg=colour)
    for check in report.serviceability_checks:
        colour = "red" if not check.acceptable else "green"
        click.echo(f"  {check.check_name:<26}: ", nl=False)
        click.secho(check.status.value, fg=colour)

    click.echo(f"\n  Camber        : {report.cambering_info.recommendation}")
    for warning in report.warnings:
        click.secho(f"  Warning: {warning}", fg="yellow")
    click.echo("")
    click.secho(report.summary.message, fg="green" if report.summary.is_adequate else "red", bold=True)

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(report.to_json(), encoding="utf-8")
        click.echo(f"\nReport written to {out_path}")


# ---------------------------------------------------------------------------
# template
# ---------------------------------------------------------------------------

@main.command()
def template() -> None:
    """Print a sample input YAML file."""
    click.echo(generate_template(), nl=False)


# ---------------------------------------------------------------------------
# sections
# ---------------------------------------------------------------------------

@main.command()
@click.argument("standard")
@click.argument("family")
def sections(standard: str, family: str) -> None:
    """List the sections of FAMILY in STANDARD, lightest first."""
    try:
        records = load_default_catalog().lookup(standard, family)
    except BeamDesignError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc

    click.echo(f"{'Section':<12}{'kg/m':>10}{'d (mm)':>10}{'Zx (10³mm³)':>14}{'Ix (10⁶mm⁴)':>14}")
    for rec in records:
        click.echo(
            f"{rec.name:<12}{rec.unit_weight:>10.1f}{rec.d:>10.1f}"
            f"{rec.Zx / 1e3:>14.1f}{rec.Ix / 1e6:>14.1f}"
        )


if __name__ == "__main__":
    main()
