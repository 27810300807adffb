"""
Synthetic customer CSV generator for the customer importer.

Implements deterministic pseudo-random customer rows with a configurable share
of duplicate and malformed email addresses, for manual runs and tests.
"""

from __future__ import annotations

import csv
import random
import sys
import time
from pathlib import Path

import typer

app = typer.Typer(help="Generate a synthetic customers CSV (first_name,last_name,email,...).")

HEADER = ["first_name", "last_name", "email", "gender", "ip_address"]

FIRST_NAMES = ["Mildred", "Bonnie", "Marion", "Norma", "Shawn", "Jacqueline", "Phillip", "Roger"]
LAST_NAMES = ["Hernandez", "Ortiz", "Garcia", "Harris", "Howell", "Owens", "Ramos", "Price"]
DOMAINS = ["github.io", "acquirethisname.com", "cyberchimps.com", "hubpages.com", "360.cn"]
GENDERS = ["Female", "Male"]


def _generate_rows_csv(
    csv_path: Path,
    rows: int,
    seed: int,
    duplicate_ratio: float = 0.0,
    invalid_ratio: float = 0.0,
) -> None:
    rng = random.Random(seed)
    issued: list[str] = []

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)

        for i in range(rows):
            first = rng.choice(FIRST_NAMES)
            last = rng.choice(LAST_NAMES)
            local = f"{first[0].lower()}{last.lower()}{i}"
            roll = rng.random()
            if roll < duplicate_ratio and issued:
                email = rng.choice(issued)
            elif duplicate_ratio <= roll < duplicate_ratio + invalid_ratio:
                # Missing '@' keeps the row well-formed but the email invalid.
                email = f"{local}{rng.choice(DOMAINS)}"
            else:
                # Also reached by a duplicate roll before any email was issued.
                email = f"{local}@{rng.choice(DOMAINS)}"
                issued.append(email)
            ip_address = ".".join(str(rng.randint(1, 254)) for _ in range(4))
            writer.writerow([first, last, email, rng.choice(GENDERS), ip_address])


@app.command()
def main(
    rows: int = typer.Option(
        1_000,
        "--rows",
        "-r",
        help="Number of customer rows to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    duplicate_ratio: float = typer.Option(
        0.0,
        "--duplicate-ratio",
        min=0.0,
        max=1.0,
        help="Share of rows reusing an earlier email.",
    ),
    invalid_ratio: float = typer.Option(
        0.0,
        "--invalid-ratio",
        min=0.0,
        max=1.0,
        help="Share of rows with an email lacking '@'.",
    ),
    output: Path = typer.Option(
        Path("customers.csv"),
        "--output",
        "-o",
        help="CSV output path.",
    ),
) -> None:
    """
    Generate a synthetic customers CSV.
    """
    if duplicate_ratio + invalid_ratio > 1.0:
        raise typer.BadParameter("duplicate and invalid ratios must sum to at most 1.0")

    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)
    typer.echo(f"Generating {rows:,} rows -> {output} (seed={seed})")
    _generate_rows_csv(
        output,
        rows=rows,
        seed=seed,
        duplicate_ratio=duplicate_ratio,
        invalid_ratio=invalid_ratio,
    )
    duration = time.perf_counter() - start
    typer.echo(f"CSV generation completed in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
