"""Simulate a poll with fake options and random ballots, then score it.

Generates option names with faker using a fixed seed, casts random
complete ballots, and prints the leaderboard together with the ballot count
recovered from the point totals.

Usage:
    python scripts/simulate_poll.py
    python scripts/simulate_poll.py -n 6 -b 40 --seed 7
"""

import argparse
import sys
from pathlib import Path

from faker import Faker

sys.path.insert(0, str(Path(__file__).parent.parent))

from rankpoll.polls import MAX_OPTIONS, MIN_OPTIONS, normalize_options
from rankpoll.sampling import shuffle
from rankpoll.scoring import aggregate, ballot_count, default_point_scheme

SEED = 20260101


def generate_options(n: int, seed: int) -> list[str]:
    """Generate n distinct restaurant-style option names."""
    fake = Faker()
    Faker.seed(seed)

    options: list[str] = []
    while len(options) < n:
        # normalize_options drops case-insensitive repeats, so keep drawing
        options = normalize_options(options + [fake.company()[:30]])
    return options


def cast_ballots(options: list[str], count: int, seed: int) -> list[list[str]]:
    """Cast count random complete ballots, reproducible for the seed."""
    return [shuffle(options, seed=f"{seed}:{i}") for i in range(count)]


def main():
    parser = argparse.ArgumentParser(
        description="Simulate and score a ranked-choice poll")
    parser.add_argument("-n", "--options", type=int, default=4,
                        help=f"Number of options ({MIN_OPTIONS}-{MAX_OPTIONS}, default: 4)")
    parser.add_argument("-b", "--ballots", type=int, default=25,
                        help="Number of ballots to cast (default: 25)")
    parser.add_argument("--seed", type=int, default=SEED,
                        help=f"Seed for names and ballots (default: {SEED})")
    args = parser.parse_args()

    n = min(max(args.options, MIN_OPTIONS), MAX_OPTIONS)
    options = generate_options(n, args.seed)
    weights = default_point_scheme(n)
    ballots = cast_ballots(options, max(args.ballots, 0), args.seed)

    rows = aggregate(options, weights, ballots)

    print(f"Point scheme: {weights}")
    print(f"Cast {len(ballots)} ballots")
    for row in rows:
        marker = " (tie)" if row.tied else ""
        print(f"  {row.rank:>2}. {row.option:<30} {row.points:>5}{marker}")
    print(f"Ballots recovered from totals: {ballot_count(rows, weights)}")


if __name__ == "__main__":
    main()
