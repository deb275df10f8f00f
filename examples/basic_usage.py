#!/usr/bin/env python3
"""
Example: Basic usage of tw-pattern-analyzer as a Python library
"""

from tw_patterns import analyze

# Analyze a workspace, clustering loosely and skipping one-off class lists
report = analyze(
    root="/path/to/workspace",
    similarity_threshold=0.5,
    min_occurrences=2,
    out=None,
    console_enabled=False,
)

# Print the strongest component candidates
for cluster in report.clusters[:10]:
    print(f"{cluster.likelihood:3d}%  {cluster.representative}")
    for member in cluster.members[1:]:
        print(f"      ~ {member}")
    print()

print(f"Analysis complete: {len(report.clusters)} cluster(s) from "
      f"{report.total_files} files")
