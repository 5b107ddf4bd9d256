from __future__ import annotations

import argparse
from pathlib import Path

from tailpy import parse_offset
from tailpy.testing import generate_line_files, reference_tail


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=200)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    ap.add_argument(
        "--count-token",
        action="append",
        default=[],
        help="Count to precompute expected tails for, e.g. 3 or +2 (repeatable; default: 10 +0 +2 3)",
    )
    args = ap.parse_args(argv)
    tokens = args.count_token or ["10", "+0", "+2", "3"]
    specs = [(tok, parse_offset(tok)) for tok in tokens]

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    # Each input gets case_N.txt.n<TOKEN> (line mode) and case_N.txt.c<TOKEN>
    # (byte mode) holding the exact bytes tailpy should print for it.
    for rel, data in generate_line_files(seed=args.seed, count=args.count):
        (out_dir / rel).write_bytes(data)
        for tok, spec in specs:
            (out_dir / f"{rel}.n{tok}").write_bytes(reference_tail(data, spec))
            (out_dir / f"{rel}.c{tok}").write_bytes(reference_tail(data, spec, by_bytes=True))

    print(str(out_dir))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
