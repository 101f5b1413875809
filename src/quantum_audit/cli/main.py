"""quantum-audit command line.

Audit JavaScript/TypeScript code for quantum-vulnerable cryptography.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console

from .. import __version__
from ..core.algorithms import check_algorithm
from ..core.config import OUTPUT_FORMATS, get_effective_config
from ..core.report import generate_report
from ..core.scanner import scan_file, scan_project
from ..core.scoring import get_exit_code, risk_level
from ..formatters.junit import export_junit_results, render_junit
from ..models.algorithm import PARTIALLY

console = Console(stderr=True)

RISK_COLORS = {
    "LOW": "green",
    "MODERATE": "yellow",
    "ELEVATED": "dark_orange",
    "CRITICAL": "red",
}

THREAT_INFO = """\
Quantum computers use quantum bits (qubits) that can solve
certain mathematical problems exponentially faster than
classical computers.

Shor's Algorithm:
   Can factor large numbers quickly, breaking:
   - RSA (public-key encryption)
   - ECDSA (elliptic curve signatures)
   - Diffie-Hellman (key exchange)

Timeline Estimates:
   - 2024-2026: First demonstrations of breaking RSA-2048
   - 2026-2030: Practical quantum attacks emerge
   - 2030+: Current public-key crypto becomes obsolete

"Harvest Now, Decrypt Later":
   Attackers are collecting encrypted data TODAY to
   decrypt it LATER when quantum computers are available.
"""

PQC_INFO = """\
NIST (National Institute of Standards and Technology)
has selected quantum-resistant algorithms:

Key Encapsulation:
   - CRYSTALS-Kyber: Lattice-based, efficient
   - NTRU: Established, patent-free

Digital Signatures:
   - CRYSTALS-Dilithium: Primary recommendation
   - FALCON: For smaller signatures
   - SPHINCS+: Conservative hash-based

Resources:
   - NIST PQC Project: https://csrc.nist.gov/projects/post-quantum-cryptography
   - Open Quantum Safe: https://openquantumsafe.org
"""

WHY_MIGRATE = """\
1. Data Lifetime: Encrypted data today can be decrypted tomorrow
2. Migration Time: Large systems take years to migrate
3. Compliance: Regulations will require PQC by 2026-2030
4. Competitive Edge: Early adopters will be more secure
"""


def print_welcome() -> None:
    console.print()
    console.print(f"  [bold cyan]QUANTUM-SAFE AUDIT[/bold cyan] v{__version__}")
    console.print("  Audit your code for quantum vulnerabilities")
    console.print()


def _save_report(output: str, content: str) -> None:
    Path(output).write_text(content + "\n", encoding="utf-8")
    console.print(f"  [green]OK[/green] Report saved to {output}")


@click.group(name="quantum-audit")
@click.version_option(__version__, prog_name="quantum-audit")
def cli() -> None:
    """Audit your JavaScript/TypeScript code for quantum-vulnerable cryptography."""


@cli.command()
@click.argument("path", default=".", type=click.Path())
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Save report to file")
@click.option("--json", "-j", "as_json", is_flag=True, help="Output in JSON format")
@click.option("--output-format", "-f", type=click.Choice(OUTPUT_FORMATS), help="Report format")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output")
@click.option("--fail-under", type=click.IntRange(0, 100), help="Exit 1 when the risk score is below this")
def audit(
    path: str,
    output: str | None,
    as_json: bool,
    output_format: str | None,
    quiet: bool,
    fail_under: int | None,
) -> None:
    """Audit a project directory for quantum vulnerabilities."""
    project_path = Path(path).resolve()
    if not project_path.exists():
        console.print(f"  [red]ERROR[/red] Path does not exist: {project_path}")
        sys.exit(1)

    overrides: dict = {"output": {}, "ci": {}}
    if as_json:
        overrides["output"]["format"] = "json"
    elif output_format:
        overrides["output"]["format"] = output_format
    if quiet:
        overrides["output"]["quiet"] = True
    if fail_under is not None:
        overrides["ci"]["fail_under"] = fail_under

    config_root = project_path if project_path.is_dir() else project_path.parent
    config = get_effective_config(config_root, cli_overrides=overrides)
    fmt = config["output"]["format"]
    quiet = bool(config["output"].get("quiet"))
    threshold = config["ci"]["fail_under"]

    if not quiet:
        print_welcome()
        console.print("  [cyan]Scanning for quantum vulnerabilities...[/cyan]")
        console.print(f"  [dim]Path: {project_path}[/dim]")
        console.print()

    results = scan_project(project_path)

    if results.error:
        console.print(f"  [yellow]WARN[/yellow] Scan incomplete: {results.error}")

    if fmt == "junit" and output:
        stats = export_junit_results(results, Path(output))
        console.print(
            f"  [green]OK[/green] JUnit report saved to {output} "
            f"({stats['total_tests']} tests, {stats['failures']} failures)"
        )
    elif fmt == "junit":
        click.echo(render_junit(results))
    else:
        report = generate_report(results, format=fmt)
        # Text reports are shown even when saved; JSON only goes to the file.
        if fmt == "text" or not output:
            click.echo(report)
        if output:
            _save_report(output, report)

    if not quiet:
        level = risk_level(results.risk_score)
        color = RISK_COLORS[level]
        console.print(
            f"\n  [{color}]Risk Score: {results.risk_score}/100 ({level})[/{color}]"
        )

    exit_code = get_exit_code(results.risk_score, fail_under=threshold)
    if exit_code:
        sys.exit(exit_code)


@cli.command()
@click.argument("file", type=click.Path())
@click.option("--json", "-j", "as_json", is_flag=True, help="Output in JSON format")
def scan(file: str, as_json: bool) -> None:
    """Scan a single file for quantum vulnerabilities."""
    if not Path(file).exists():
        console.print(f"  [red]ERROR[/red] Path does not exist: {file}")
        sys.exit(1)

    result = scan_file(file)
    click.echo(generate_report(result, format="json" if as_json else "text"))

    if result.error:
        sys.exit(1)


@cli.command()
def info() -> None:
    """Display information about quantum threats and migration."""
    print_welcome()
    for title, body in (
        ("QUANTUM COMPUTING THREAT", THREAT_INFO),
        ("POST-QUANTUM CRYPTOGRAPHY (PQC)", PQC_INFO),
        ("WHY MIGRATE NOW?", WHY_MIGRATE),
    ):
        click.echo(f"\n{title}")
        click.echo("-" * 50)
        click.echo(body)


@cli.command()
@click.argument("algorithm")
def check(algorithm: str) -> None:
    """Check if a specific algorithm is quantum-vulnerable."""
    verdict = check_algorithm(algorithm)

    if not verdict.known:
        click.echo(f'No information found for "{algorithm}"')
        return

    name = verdict.name
    click.echo(f"\n{name} Quantum Security Analysis")
    click.echo("-" * 50)

    if verdict.safe is True:
        click.echo(f"{name} is considered quantum-safe")
        if verdict.note:
            click.echo(f"Note: {verdict.note}")
    elif verdict.safe == PARTIALLY:
        click.echo(f"{name} has reduced quantum security")
        click.echo(f"Replacement: {verdict.replacement}")
        if verdict.note:
            click.echo(f"Note: {verdict.note}")
    else:
        click.echo(f"{name} is vulnerable to quantum attacks!")
        click.echo(f"Replacement: {verdict.replacement}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
