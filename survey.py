#!/usr/bin/env python3
"""
survey.py

Generate batches of mazes across a range of difficulty levels, check every
one for connectivity, tree shape and an intact border, and print summary
statistics with a live progress bar.

Usage:
  python3 survey.py --count 50
  python3 survey.py --count 200 --min-level 10 --max-level 15 --seed 7
  python3 survey.py --count 100 --csv-log survey.csv --plot
"""

import argparse
import csv
import multiprocessing
import os
import random
import statistics
import sys
from typing import Dict, List, Optional, Tuple
try:
    import matplotlib.pyplot as plt
except ImportError:
    plt = None

from dataclasses import dataclass

import difficulty
from bar import SurveyProgress
from maze_checks import MazeReport, check_maze
from maze_game import MazeGenerator

# ========== Survey records ==========

@dataclass
class SurveyResult:
    level: int
    seed: int
    report: MazeReport


def make_tasks(count: int, min_level: int, max_level: int, base_seed: Optional[int]) -> List[Tuple[int, int]]:
    """One (level, seed) pair per maze. Seeds are reproducible when base_seed is given."""
    seeder = random.Random(base_seed)
    return [(level, seeder.getrandbits(32))
            for level in range(min_level, max_level + 1)
            for _ in range(count)]


# ======== Worker for multiprocessing ========

def survey_one(task: Tuple[int, int]) -> SurveyResult:
    """Generate and check one maze. Each call owns its own generator."""
    level, seed = task
    size = difficulty.size_for(level)
    maze = MazeGenerator(random.Random(seed)).generate(size, size)
    return SurveyResult(level, seed, check_maze(maze))


def run_survey(tasks: List[Tuple[int, int]], processes: int = 1, hook_result=lambda _ : None) -> List[SurveyResult]:
    results: List[SurveyResult] = []
    if processes <= 1:
        for task in tasks:
            r = survey_one(task)
            hook_result(r)
            results.append(r)
    else:
        with multiprocessing.Pool(processes) as pool:
            for r in pool.imap_unordered(survey_one, tasks):
                hook_result(r)
                results.append(r)
    results.sort(key=lambda r: (r.level, r.seed))
    return results


# ========== Tally + summary ==========

def summarize(results: List[SurveyResult]) -> Dict[int, Dict[str, float]]:
    by_level: Dict[int, List[MazeReport]] = {}
    for r in results:
        by_level.setdefault(r.level, []).append(r.report)

    summary: Dict[int, Dict[str, float]] = {}
    for level, reports in sorted(by_level.items()):
        summary[level] = {
            "size": reports[0].size,
            "mazes": len(reports),
            "failures": sum(1 for rep in reports if not rep.ok),
            "open_mean": statistics.mean(rep.open_cells for rep in reports),
            "dead_ends_mean": statistics.mean(rep.dead_ends for rep in reports),
            "dead_ends_max": max(rep.dead_ends for rep in reports),
        }
    return summary


def plot_dead_ends(summary: Dict[int, Dict[str, float]]):
    """Plot mean dead ends per level."""
    levels = list(summary.keys())
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(levels, [summary[l]["dead_ends_mean"] for l in levels], 'b-o', label='Mean dead ends')
    ax.set_title("Dead Ends per Difficulty Level")
    ax.set_xlabel("Level")
    ax.set_ylabel("Dead ends")
    ax.legend()
    ax.grid(True, which='both', linestyle='--', linewidth=0.5)
    ax.xaxis.set_major_locator(plt.MaxNLocator(integer=True))
    plt.tight_layout()
    plt.show()


# ========== CLI orchestration ==========

def main() -> None:
    ap = argparse.ArgumentParser(description="Generate and check mazes across difficulty levels.")
    ap.add_argument("--count", type=int, default=20, help="Number of mazes to generate per level.")
    ap.add_argument("--min-level", type=int, default=difficulty.MIN_LEVEL, help="First level to survey.")
    ap.add_argument("--max-level", type=int, default=difficulty.MAX_LEVEL, help="Last level to survey.")
    ap.add_argument("--seed", type=int, default=None, help="Base seed for reproducible surveys.")
    ap.add_argument("--processes", type=int, default=1,
                    help="Number of worker processes. Use 0 for all available CPU cores.")
    ap.add_argument("--csv-log", type=str, default=None,
                    help="Path to save a CSV row for every generated maze.")
    ap.add_argument("--no-live", action="store_true",
                    help="Disable the live progress bar (useful in non-TTY logs).")
    ap.add_argument("--plot", action="store_true",
                    help="Show a plot of dead ends per level at the end (requires matplotlib).")
    args = ap.parse_args()

    if args.count < 1:
        ap.error("--count must be at least 1")
    for name in ("min_level", "max_level"):
        value = getattr(args, name)
        if not difficulty.MIN_LEVEL <= value <= difficulty.MAX_LEVEL:
            ap.error(f"--{name.replace('_', '-')} must be between {difficulty.MIN_LEVEL} and {difficulty.MAX_LEVEL}")
    if args.min_level > args.max_level:
        ap.error("--min-level cannot be greater than --max-level")

    processes = args.processes or os.cpu_count() or 1
    tasks = make_tasks(args.count, args.min_level, args.max_level, args.seed)

    print(f"--- Surveying {len(tasks)} mazes, levels {args.min_level}-{args.max_level} ---")
    bar = None
    if not args.no_live:
        bar = SurveyProgress("Surveying... ", max=len(tasks))

    def on_result(r: SurveyResult):
        if bar is not None:
            bar.record(r.level, r.report.ok)

    results = run_survey(tasks, processes=processes, hook_result=on_result)
    if bar is not None:
        bar.summarize()
        bar.finish()

    # --- CSV log ---
    if args.csv_log:
        try:
            with open(args.csv_log, 'w', newline='') as f:
                writer = csv.writer(f)
                writer.writerow(['level', 'seed', 'size', 'open', 'dead_ends', 'ok'])
                for r in results:
                    writer.writerow([r.level, r.seed, r.report.size, r.report.open_cells,
                                     r.report.dead_ends, int(r.report.ok)])
        except IOError as e:
            ap.error(f"Could not write CSV log: {e}")

    summary = summarize(results)
    print("\n=== Survey Summary ===")
    print(f"{'level':>5s} {'size':>5s} {'mazes':>6s} {'open':>8s} {'dead ends':>10s} {'max':>5s} {'failed':>7s}")
    for level, row in summary.items():
        print(f"{level:5d} {row['size']:5d} {row['mazes']:6d} {row['open_mean']:8.1f} "
              f"{row['dead_ends_mean']:10.2f} {row['dead_ends_max']:5d} {row['failures']:7d}")

    failures = [r for r in results if not r.report.ok]
    for r in failures[:10]:
        print(f"FAILED level={r.level} seed={r.seed} report={r.report}", file=sys.stderr)

    # --- Plotting ---
    if args.plot:
        if plt is None:
            print("\n--- Plotting skipped: matplotlib is not installed. ---", file=sys.stderr)
            print("--- To install, run: pip install matplotlib ---", file=sys.stderr)
        else:
            plot_dead_ends(summary)

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
