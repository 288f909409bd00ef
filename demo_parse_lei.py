"""
demo_parse_lei.py -- A short walkthrough of the lei package.

An LEI (ISO 17442) is 20 characters: a 4-character LOU ID naming the Local
Operating Unit that issued it, a 14-character entity ID, and two check
digits computed with ISO/IEC 7064 MOD 97-10.

This script parses the worked example from Annex A.1 of the standard, shows
each rejection reason, and builds an LEI from its parts.

Run this:  .venv/bin/python demo_parse_lei.py
"""

from __future__ import annotations

from lei import (
    Err,
    Ok,
    build_from_parts,
    parse,
    parse_loose,
    sequence,
)

EXAMPLE = "YZ83GD8L7GG84979J516"

REJECTED = (
    "YZ83GD8L7GG84979J51",   # 19 characters
    "yz83GD8L7GG84979J516",  # lowercase
    "YZ83GD8L7GG84979J5A6",  # letter in the check digits
    "YZ83GD8L7GG84979J517",  # check digits altered from 16 to 17
)


def main() -> None:
    # 1. The happy path: Ok(LEI) exposing its three fields.
    match parse(EXAMPLE):
        case Ok(lei):
            print(f"Parsed LEI: {lei}")
            print(f"  LOU ID: {lei.lou_id}")
            print(f"  Entity ID: {lei.entity_id}")
            print(f"  Check digits: {lei.check_digits}")
        case Err(error):
            raise SystemExit(f"Unable to parse LEI {EXAMPLE}: {error}")

    # 2. Every failure is a value, never an exception.
    for raw in REJECTED:
        match parse(raw):
            case Err(error):
                print(f"Rejected {raw!r}: [{error.code}] {error}")
            case Ok(lei):
                raise SystemExit(f"Expected {raw!r} to be rejected, got {lei!r}")

    # 3. parse_loose() tolerates case and surrounding whitespace; parse() does not.
    match parse_loose("  yz83gd8l7gg84979j516\n"):
        case Ok(lei):
            print(f"Loosely parsed: {lei}")
        case Err(error):
            raise SystemExit(f"parse_loose failed: {error}")

    # 4. Building computes the check digits.
    match build_from_parts("YZ83", "GD8L7GG84979J5"):
        case Ok(lei):
            print(f"Built from parts: {lei}")
        case Err(error):
            raise SystemExit(f"build_from_parts failed: {error}")

    # 5. A batch succeeds only if every member does.
    batch = sequence(parse(raw) for raw in (EXAMPLE, "529900T8BM49AURSDO55"))
    match batch:
        case Ok(leis):
            print(f"Batch of {len(leis)}: {', '.join(str(x) for x in leis)}")
        case Err(error):
            raise SystemExit(f"Batch rejected: {error}")


if __name__ == "__main__":
    main()
