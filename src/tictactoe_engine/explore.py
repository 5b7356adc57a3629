"""
Reachable-state enumeration driven entirely by :func:`compute_next_state`.

Teaching notes:
- Breadth-first from a starting state; every empty cell is tried with the
  side to move, so the walk exercises the same transition path a host
  application would.
- States are keyed by their serialized grid. Two move orders reaching the
  same grid reach the same state, so the key is unique.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Dict, Mapping, Optional

from .board import empty_positions, serialize_grid
from .model import GameStatus, PendingState, State, WonState
from .rules import compute_next_state, new_game

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd

logger = logging.getLogger(__name__)


def reachable_states(start: Optional[State] = None) -> Dict[str, State]:
    """Enumerate every state reachable from ``start`` (default: a new game)."""
    if start is None:
        start = new_game()
    seen: Dict[str, State] = {serialize_grid(start.grid): start}
    q = deque([start])
    while q:
        s = q.popleft()
        if not isinstance(s, PendingState):
            continue
        for pos in empty_positions(s.grid):
            outcome = compute_next_state(s, s.current_player, pos)
            if not outcome.is_ok:
                raise RuntimeError(f"Empty cell rejected at {pos}: {outcome.message}")
            child = outcome.value
            key = serialize_grid(child.grid)
            if key not in seen:
                seen[key] = child
                q.append(child)
    counts = terminal_counts(seen)
    logger.info("Enumerated %d states (%d terminal)", len(seen), sum(counts.values()))
    return seen


def terminal_counts(states: Mapping[str, State]) -> Dict[str, int]:
    term = {"x": 0, "o": 0, "draw": 0}
    for s in states.values():
        if isinstance(s, WonState):
            term[s.winner.value.lower()] += 1
        elif s.status == GameStatus.DRAW:
            term["draw"] += 1
    return term


def states_frame(states: Mapping[str, State]) -> "pd.DataFrame":
    """Tabulate states, one row per grid, sorted by board key.

    Requires pandas (``pip install tictactoe-engine[analysis]``).
    """
    import pandas as pd

    rows = []
    for key, s in states.items():
        rows.append({
            'board_state': key,
            'status': s.status.value,
            'to_move': s.current_player.value if isinstance(s, PendingState) else None,
            'winner': s.winner.value if isinstance(s, WonState) else None,
            'empty_cells': key.count('_'),
        })
    cols = ['board_state', 'status', 'to_move', 'winner', 'empty_cells']
    return pd.DataFrame(rows, columns=cols).sort_values('board_state').reset_index(drop=True)
