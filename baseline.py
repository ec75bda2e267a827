"""Baseline metrics collector for the nanDeck parser.

Parses all sample scripts and produces a JSON report + console summary
with per-file statistics: size, parse time, command count, warning count,
command type distribution, and visual block structure.

Usage: python baseline.py [samples_dir]
(defaults to $NANDECK_SAMPLES_DIR)
"""

import json
import os
import re
import sys
import time
from collections import Counter
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from nandeck_parser import parse_with_diagnostics, NanDeckParseError
from nandeck_parser.visitor import collect_visual_blocks

REPORT_PATH = Path(__file__).parent / "baseline_report.json"

# Warning category patterns
_WARNING_CATEGORIES = {
    "extra_fields": re.compile(r"extra field"),
    "truncated_payload": re.compile(r"after second '='"),
}


def categorize_warnings(warnings):
    """Group warnings by category."""
    cats = {k: [] for k in _WARNING_CATEGORIES}
    cats["other"] = []
    for w in warnings:
        for cat, pat in _WARNING_CATEGORIES.items():
            if pat.search(w):
                cats[cat].append(w)
                break
        else:
            cats["other"].append(w)
    return {k: len(v) for k, v in cats.items()}


def analyze_file(path):
    """Analyze a single script file and return metrics dict."""
    size = os.path.getsize(path)
    text = Path(path).read_text(encoding='utf-8', errors='replace')

    t0 = time.time()
    commands, warnings = parse_with_diagnostics(text)
    elapsed = time.time() - t0

    blocks = collect_visual_blocks(commands)
    type_counts = Counter(type(c).__name__ for c in commands)

    return {
        "file": str(path),
        "size_bytes": size,
        "parse_time_s": round(elapsed, 4),
        "commands": len(commands),
        "visual_blocks": len(blocks.blocks),
        "block_problems": blocks.problems,
        "total_warnings": len(warnings),
        "warning_categories": categorize_warnings(warnings),
        "command_type_distribution": dict(type_counts.most_common()),
    }


def find_sample_files(samples_dir):
    """Find all sample files under *samples_dir*."""
    files = []
    for dirpath, _, filenames in os.walk(samples_dir):
        for fn in sorted(filenames):
            files.append(os.path.join(dirpath, fn))
    return files


def main(argv):
    samples_dir = Path(argv[1] if len(argv) > 1
                       else os.environ.get("NANDECK_SAMPLES_DIR", ""))
    if not str(samples_dir) or not samples_dir.is_dir():
        print(f"Samples directory not found: {samples_dir}")
        return 1

    files = find_sample_files(samples_dir)
    print(f"Found {len(files)} sample files in {samples_dir}\n")

    results = []
    total_warnings = 0
    total_commands = 0
    failed = 0

    for path in files:
        rel = os.path.relpath(path, samples_dir)
        try:
            metrics = analyze_file(path)
        except NanDeckParseError as e:
            failed += 1
            print(f"  {rel:50s}  ERROR: {e}")
            results.append({"file": str(path), "error": str(e),
                            "error_type": type(e).__name__})
            continue
        results.append(metrics)
        total_warnings += metrics["total_warnings"]
        total_commands += metrics["commands"]
        print(f"  {rel:50s}  {metrics['commands']:5d} cmds  "
              f"{metrics['visual_blocks']:3d} blocks  "
              f"{metrics['total_warnings']:4d} warnings  "
              f"{metrics['parse_time_s']:.4f}s")

    # Summary
    print(f"\n{'='*70}")
    print(f"Total files:    {len(files)}")
    print(f"Failed files:   {failed}")
    print(f"Total commands: {total_commands}")
    print(f"Total warnings: {total_warnings}")

    cat_totals = Counter()
    for r in results:
        for cat, count in r.get("warning_categories", {}).items():
            cat_totals[cat] += count
    print(f"\nWarning breakdown:")
    for cat, count in cat_totals.most_common():
        print(f"  {cat:20s}: {count}")

    report = {
        "samples_dir": str(samples_dir),
        "total_files": len(files),
        "failed_files": failed,
        "total_commands": total_commands,
        "total_warnings": total_warnings,
        "warning_category_totals": dict(cat_totals),
        "files": results,
    }
    REPORT_PATH.write_text(json.dumps(report, indent=2, default=str),
                           encoding='utf-8')
    print(f"\nReport written to {REPORT_PATH}")
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
