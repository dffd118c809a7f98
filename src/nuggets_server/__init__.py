"""
nuggets_server - Nuggets Game Server
====================================

Authoritative UDP server for one game of Nuggets: up to 26 players
explore a shared map, picking up piles of gold, while one spectator
watches the whole board. The game ends when the last nugget is taken.

Quick Start:
    nuggets-server maps/main.txt 42

From Python:
    from nuggets_server import ServerRunner, load_config
    runner = ServerRunner(map_path="maps/main.txt", config=load_config(), seed=42)
    runner.run()
"""

from .runner import ServerRunner, load_grid
from ._runner_config import ServerConfig, load_config
from ._game import GameCoordinator, Grid
from .errors import (
    NuggetsServerError,
    ConfigurationError,
    UsageError,
    MapFileError,
    InvalidSeedError,
    InternalConsistencyError,
)

__version__ = "1.0.0"

__all__ = [
    "ServerRunner",
    "load_grid",
    "ServerConfig",
    "load_config",
    "GameCoordinator",
    "Grid",
    "NuggetsServerError",
    "ConfigurationError",
    "UsageError",
    "MapFileError",
    "InvalidSeedError",
    "InternalConsistencyError",
]
