"""
Classify C_n plus a list of chords and draw both panels.

Usage:
  python3 classify_chords.py 5 1-3
  python3 classify_chords.py 6 1-3 2-5 --catalog iso_db.json --save out.png
  python3 classify_chords.py 6 1-4 --theme dark
"""
import argparse
import logging

from chordclass.builder import GraphBuilder
from chordclass.catalog import load_catalog
from chordclass.mapping import describe_result, mapping_text
from chordclass.viz.draw import draw_classification


def parse_chord(s):
    a, b = s.split("-")
    return int(a), int(b)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("n", type=int)
    ap.add_argument("chords", nargs="*", type=parse_chord)
    ap.add_argument("--catalog", default=None)
    ap.add_argument("--theme", choices=["light", "dark"], default="light")
    ap.add_argument("--save", default=None)
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    builder = GraphBuilder(args.n, catalog=load_catalog(args.catalog))
    for a, b in args.chords:
        if not builder.toggle_edge(a, b):
            print(f"skipped {a}-{b}: not a chord of C_{args.n}")

    status, key = describe_result(builder.result)
    print("Chords:", builder.added_edges)
    print("Key:   ", key or "-")
    print("Result:", status or "not classified (no chords)")
    text = mapping_text(getattr(builder.result, "bijection", None))
    if text:
        print("Map:   ", text)

    fig = draw_classification(builder, theme=args.theme, save_path=args.save)
    if fig is not None:
        import matplotlib.pyplot as plt
        plt.show()


if __name__ == "__main__":
    main()
