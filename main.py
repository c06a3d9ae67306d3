# main.py

import logging

import numpy as np

import constants
import logger_setup
from collision_bridge import CollisionEvent, CollisionKind, ThermalWorld
from units import kelvin

# Get the application's dedicated logger
logger = logging.getLogger(constants.LOGGER_NAME)


def spawn_particles(world: ThermalWorld, rng: np.random.Generator, config: dict) -> list:
    """
    Fills the world with spherical particles, mimicking the sandbox's two spawn
    brushes: a "cold" one (0..6000 K) and a "hot" one (10000..100000 K).

    Data Contract:
    - Inputs:
        - world (ThermalWorld): Target arena.
        - rng (np.random.Generator): The master seeded random number generator.
        - config (dict): The 'simulation' section of the config file.
    - Outputs: List of spawned handles.
    """
    count = config['particle_count']
    hot_fraction = config.get('hot_fraction', 0.5)
    min_d = config.get('min_diameter_mm', constants.MIN_DIAMETER_MM)
    max_d = config.get('max_diameter_mm', constants.MAX_DIAMETER_MM)

    diameters = rng.integers(min_d, max_d, size=count) * constants.MM_TO_M
    is_hot = rng.random(count) < hot_fraction
    temps = np.where(
        is_hot,
        rng.uniform(*constants.HOT_TEMP_RANGE, size=count),
        rng.uniform(*constants.COLD_TEMP_RANGE, size=count),
    )

    handles = []
    for diameter, temp in zip(diameters, temps):
        handle, _ = world.spawn_sphere(kelvin(temp), float(diameter))
        handles.append(handle)

    logger.info(f"Spawned {count} particles ({int(is_hot.sum())} hot, {count - int(is_hot.sum())} cold).")
    return handles


def random_collision_events(handles, rng: np.random.Generator, count: int) -> list:
    """
    Produces one tick's worth of collision-start events between distinct
    particles. Stands in for the rigid-body engine's contact reports.
    """
    if len(handles) < 2:
        return []
    handles = np.asarray(handles)
    events = []
    for _ in range(count):
        a, b = rng.choice(handles, size=2, replace=False)
        events.append(CollisionEvent(CollisionKind.STARTED, int(a), int(b)))
    return events


def run_simulation(world: ThermalWorld, rng: np.random.Generator, config: dict) -> dict:
    """
    Feeds random collision batches through the world for the configured
    number of ticks, logging the thermal energy balance periodically.

    Returns a summary with the initial/final total energy and exchange counts.
    """
    ticks = config.get('ticks', 1000)
    collisions_per_tick = config.get('collisions_per_tick', 10)
    log_interval = config.get('log_interval', 100)  # 0 disables the periodic log

    initial_energy = world.get_total_thermal_energy()
    last_logged_energy = initial_energy
    total_exchanges = 0
    accumulated_heat = 0.0

    for tick in range(ticks):
        events = random_collision_events(world.handles(), rng, collisions_per_tick)
        total_exchanges += world.handle_collisions(events)
        accumulated_heat += world.heat_transferred_last_batch

        # --- Logging (throttled) ---
        if log_interval > 0 and tick % log_interval == 0:
            total_energy = world.get_total_thermal_energy()
            delta_e = total_energy - last_logged_energy
            last_logged_energy = total_energy
            _, kelvins, _ = world.snapshot()
            mean_temp = float(kelvins.mean()) if kelvins.size else 0.0

            logger.debug(
                f"Tick={tick}, "
                f"Thermal={total_energy:.6g}, "
                f"Delta_E={delta_e:+.3e}, "
                f"MeanTemp={mean_temp:.1f} K, "
                f"AccumulatedHeat={accumulated_heat:.6g}, "
                f"Clamped={world.conduction.clamped_transfers}"
            )
            accumulated_heat = 0.0

    final_energy = world.get_total_thermal_energy()
    return {
        'ticks': ticks,
        'exchanges': total_exchanges,
        'clamped': world.conduction.clamped_transfers,
        'initial_energy': initial_energy,
        'final_energy': final_energy,
    }


def main():
    """
    Main function to initialize and run the heat exchange simulation headlessly.
    """
    # --- Setup ---
    logger_setup.setup_logging()

    config = logger_setup.load_config('config.json')
    sim_config = config['simulation']

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Initialization ---
    world = ThermalWorld(sim_config)
    spawn_particles(world, rng, sim_config)

    summary = run_simulation(world, rng, sim_config)

    drift = summary['final_energy'] - summary['initial_energy']
    logger.info(
        f"Run complete: {summary['ticks']} ticks, {summary['exchanges']} exchanges "
        f"({summary['clamped']} clamped). Energy drift: {drift:+.3e} J "
        f"of {summary['initial_energy']:.6g} J."
    )
    logger.info("Application shutting down.")


if __name__ == "__main__":
    main()
