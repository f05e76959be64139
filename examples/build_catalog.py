"""
Build the reference catalog of cycle-plus-chords graphs.

Usage:
  python3 build_catalog.py                     # n = 3..6, brute force
  python3 build_catalog.py --n-max 8 --nauty   # needs shortg on PATH
  python3 build_catalog.py --out iso_db.json

Output: one JSON catalog, buckets keyed by n and total edge count.
"""
import argparse
import time

from chordclass.catalog import build_catalog, save_catalog


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n-min", type=int, default=3)
    ap.add_argument("--n-max", type=int, default=6)
    ap.add_argument("--nauty", action="store_true", help="canonicalize with nauty shortg")
    ap.add_argument("--out", default="iso_db.json")
    args = ap.parse_args()

    t0 = time.time()
    catalog = build_catalog(range(args.n_min, args.n_max + 1), use_nauty=args.nauty or None)
    print(f"Built {len(catalog)} classes in {time.time() - t0:.1f}s")

    for n, m in catalog.keys():
        print(f"  n={n} edges={m}: {len(catalog.bucket(n, m))}")

    save_catalog(catalog, args.out)
    print(f"Wrote {args.out}")


if __name__ == "__main__":
    main()
