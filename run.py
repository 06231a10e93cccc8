#!/usr/bin/env python3
"""
Run the Nim game.

  python run.py                → terminal game
  python run.py cli [options]  → terminal game with options (see --help)
  python run.py analyze 3 4 5  → nim-sum analysis of a position
"""
import sys

if __name__ == '__main__':
    mode = sys.argv[1] if len(sys.argv) > 1 else 'cli'

    from nim.game.main import main
    if mode == 'analyze':
        sys.exit(main(['--analyze'] + sys.argv[2:]))
    elif mode == 'cli':
        sys.exit(main(sys.argv[2:]))
    else:
        sys.exit(main(sys.argv[1:]))
