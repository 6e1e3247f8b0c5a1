"""Shuffle, sample or pick a winner from a list of options.

Usage:
    python scripts/pick.py Pizza Burgers Tacos Sushi
    python scripts/pick.py Pizza Burgers Tacos Sushi --seed friday -k 2
    python scripts/pick.py Heads Tails -k 5 --replace
    python scripts/pick.py Pizza Burgers Tacos --winner --seed friday
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from rankpoll.errors import InputError
from rankpoll.polls import normalize_options
from rankpoll.sampling import pick_winner, sample, shuffle


def main():
    parser = argparse.ArgumentParser(
        description="Randomize a list of options")
    parser.add_argument("options", nargs="+", help="Options to choose from")
    parser.add_argument("--seed", default="",
                        help="Seed string for a reproducible result (default: random)")
    parser.add_argument("-k", type=int, default=None,
                        help="Number of items to draw (default: full shuffle)")
    parser.add_argument("--replace", action="store_true",
                        help="Draw with replacement")
    parser.add_argument("--winner", action="store_true",
                        help="Pick a single winner, then list the rest")
    args = parser.parse_args()

    options = normalize_options(args.options)

    try:
        if args.winner:
            winner, others = pick_winner(options, seed=args.seed)
            print(f"Winner: {winner}")
            for option in others:
                print(f"  {option}")
            return

        if args.k is None:
            picked = shuffle(options, seed=args.seed)
        else:
            picked = sample(options, max(args.k, 1), args.replace, seed=args.seed)
    except InputError as e:
        parser.error(str(e))

    for i, option in enumerate(picked, start=1):
        print(f"{i:>3}. {option}")


if __name__ == "__main__":
    main()
