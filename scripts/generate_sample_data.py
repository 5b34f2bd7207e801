#!/usr/bin/env python3
"""
Generate sample input files for the Gradeflow student results pipeline.

Creates:
  - data/students.txt            (5 canonical students + generated students)
  - data/invalid/*.txt           (one malformed file per error kind)
  - data/invalid/manifest.json   (expected error kind and line for each file)

Reproducible: uses random.Random(42).
"""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
SEED = 42

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
INVALID_DIR = DATA_DIR / "invalid"

GENERATED_STUDENT_COUNT = 45

# The sample file the grading tool has always shipped with
CANONICAL_STUDENTS: list[tuple[int, str, int]] = [
    (1, "John Smith", 85),
    (2, "Jane Doe", 72),
    (3, "Michael Johnson", 91),
    (4, "Emily Williams", 68),
    (5, "Robert Brown", 55),
]

FIRST_NAMES = [
    "Ava", "Liam", "Noah", "Emma", "Olivia", "Lucas", "Mia", "Ethan",
    "Sofia", "Mateo", "Amara", "Kofi", "Yuki", "Priya", "Omar", "Ines",
]
LAST_NAMES = [
    "Garcia", "Nguyen", "Okafor", "Silva", "Kowalski", "Haddad", "Tanaka",
    "Moreau", "Patel", "Jensen", "Rossi", "Mensah", "Novak", "Costa",
]

# Score bands -> relative weight, so every grade bucket is populated
SCORE_BANDS: list[tuple[tuple[int, int], float]] = [
    ((80, 100), 0.25),
    ((70, 79), 0.25),
    ((60, 69), 0.20),
    ((50, 59), 0.15),
    ((0, 49), 0.15),
]

# file name -> (lines, expected error kind, expected line number)
INVALID_FIXTURES: dict[str, tuple[list[str], str, int | None]] = {
    "missing_field.txt": (
        ["1,John Smith,85", "2,Jane Doe"],
        "missing_field",
        2,
    ),
    "empty_name.txt": (
        ["1,John Smith,85", "2,   ,72"],
        "missing_field",
        2,
    ),
    "invalid_id.txt": (
        ["abc,John Smith,85"],
        "invalid_format",
        1,
    ),
    "invalid_score.txt": (
        ["1,John Smith,85", "2,Jane Doe,seventy"],
        "invalid_format",
        2,
    ),
    "score_out_of_range.txt": (
        ["1,John Smith,105"],
        "invalid_format",
        1,
    ),
    "duplicate_id.txt": (
        ["1,John Smith,85", "", "2,Jane Doe,72", "1,Jim Beam,60"],
        "duplicate_id",
        4,
    ),
    "empty.txt": (
        ["", "   ", ""],
        "empty_input",
        None,
    ),
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _pick_score(rng: random.Random) -> int:
    bands = [band for band, _ in SCORE_BANDS]
    weights = [weight for _, weight in SCORE_BANDS]
    low, high = rng.choices(bands, weights=weights, k=1)[0]
    return rng.randint(low, high)


def generate_students(
    count: int = GENERATED_STUDENT_COUNT, seed: int = SEED
) -> list[tuple[int, str, int]]:
    """Canonical students followed by ``count`` generated ones (unique IDs)."""
    rng = random.Random(seed)
    students = list(CANONICAL_STUDENTS)
    next_id = max(student_id for student_id, _, _ in CANONICAL_STUDENTS) + 1

    for offset in range(count):
        name = f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
        students.append((next_id + offset, name, _pick_score(rng)))
    return students


def write_students_file(path: Path, students: list[tuple[int, str, int]]) -> None:
    """Write ``id,fullName,score`` lines, no header."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for student_id, name, score in students:
            f.write(f"{student_id},{name},{score}\n")


def write_invalid_fixtures(directory: Path) -> dict[str, Any]:
    """Write every malformed fixture and return the manifest."""
    directory.mkdir(parents=True, exist_ok=True)
    manifest: dict[str, Any] = {}
    for filename, (lines, kind, line_number) in INVALID_FIXTURES.items():
        with open(directory / filename, "w", encoding="utf-8", newline="\n") as f:
            f.write("\n".join(lines) + "\n")
        manifest[filename] = {"kind": kind, "line_number": line_number}

    with open(directory / "manifest.json", "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return manifest


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    print("=" * 70)
    print("Gradeflow - Sample Data Generator")
    print(f"Seed: {SEED}")
    print("=" * 70)

    # --- 1. Valid student file ---
    print("\n[1/2] Generating student records...")
    students = generate_students()
    students_path = DATA_DIR / "students.txt"
    write_students_file(students_path, students)
    print(f"  -> {students_path.name}: {len(students)} students")

    # --- 2. Malformed fixtures ---
    print("\n[2/2] Writing malformed input fixtures...")
    manifest = write_invalid_fixtures(INVALID_DIR)
    for filename, expected in manifest.items():
        line = expected["line_number"]
        where = f"line {line}" if line is not None else "whole file"
        print(f"  -> {filename}: {expected['kind']} ({where})")

    print("\nDone!")


if __name__ == "__main__":
    main()
