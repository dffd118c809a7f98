"""
main.py - Host a Nuggets game from Python
=========================================

Same as the `nuggets-server` command, with the configuration in code.

    python main.py ../maps/main.txt [SEED]

The runner will:
  1. Scatter the gold over the map
  2. Print the UDP port it is listening on
  3. Serve players and one spectator until all gold is collected

Press Ctrl+C to stop.
"""

import sys
from nuggets_server import ServerConfig, ServerRunner

# ── Configuration ──
config = ServerConfig(
    # Gold economy
    gold_total=250,
    gold_min_piles=10,
    gold_max_piles=30,

    # Up to 26 players, lettered A..Z
    max_players=26,

    # 0 picks any free port
    port=0,

    # One line per datagram instead of the regular log
    trace=True,
)

# ── Run ──
if __name__ == "__main__":
    map_path = sys.argv[1] if len(sys.argv) > 1 else "../maps/main.txt"
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else None
    runner = ServerRunner(map_path=map_path, config=config, seed=seed)
    finished = runner.run()
    sys.exit(0 if finished else 1)
