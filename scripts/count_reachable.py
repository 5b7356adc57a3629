#!/usr/bin/env python3
"""
Count game states reachable from a new game using the packaged rules.

Prints JSON with keys:
  - reachable
  - nonterminal
  - terminal: {x, o, draw}

Set TTT_FIRST_PLAYER=O to start the walk with O.
"""
from __future__ import annotations

import argparse
import json
import logging

from tictactoe_engine.explore import reachable_states, terminal_counts


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Count reachable tic-tac-toe states")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    ns = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")
    states = reachable_states()
    term = terminal_counts(states)
    out = {
        "reachable": len(states),
        "nonterminal": len(states) - sum(term.values()),
        "terminal": term,
    }
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
