#!/usr/bin/env python3
"""Print the excerpt of an HTML file (or stdin) using the configured excerpt settings."""

import os
import sys
from dataclasses import replace

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wputils import configure
from wputils.services.excerpt_service import excerpt

if __name__ == '__main__':
    config = configure()

    args = sys.argv[1:]
    if '--finish-sentence' in args:
        args.remove('--finish-sentence')
        config = replace(config, finish_sentence=True)
    if len(args) > 1:
        config = config.with_word_limit(int(args[1]))

    if args and args[0] != '-':
        with open(args[0]) as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    print(excerpt(text, config))
