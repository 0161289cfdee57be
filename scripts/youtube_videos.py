#!/usr/bin/env python3
"""Fetch the latest videos of a YouTube channel and print them as JSON."""

import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wputils import configure
from wputils.integrations.youtube import fetch_videos

if __name__ == '__main__':
    if len(sys.argv) < 2:
        print(f"Usage: {sys.argv[0]} CHANNEL_ID [LIMIT]", file=sys.stderr)
        sys.exit(2)

    configure()
    limit = int(sys.argv[2]) if len(sys.argv) > 2 else 3

    videos = fetch_videos(sys.argv[1], limit=limit)
    if videos is None:
        print(f"Could not load videos for channel {sys.argv[1]}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(videos, indent=2))
