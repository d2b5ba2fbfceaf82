from routesim.runtime.config import (
    InputPaths,
    SimulationConfig,
    load_simulation_config,
    parse_simulation_config,
)

__all__ = [
    "InputPaths",
    "SimulationConfig",
    "load_simulation_config",
    "parse_simulation_config",
]
