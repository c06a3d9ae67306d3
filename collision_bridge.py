# collision_bridge.py

import itertools
import logging
from collections import namedtuple
from enum import Enum

import numpy as np

import constants
from conduction import ConductionModel
from heat_body import HeatBody, sphere_volume
from material import Material
from temperature_color import color_for, colors_for
from units import ThermodynamicTemperature, kelvin

logger = logging.getLogger(constants.LOGGER_NAME)


class CollisionKind(Enum):
    STARTED = "started"
    STOPPED = "stopped"


# A contact reported by the physics layer between two entity handles.
CollisionEvent = namedtuple('CollisionEvent', ['kind', 'a', 'b'])


class ThermalParticle:
    """Arena record: the heat state of one entity and its published color."""
    __slots__ = ("body", "color")

    def __init__(self, body: HeatBody, color: tuple):
        self.body = body
        self.color = color


class ThermalWorld:
    """
    Connects the physics layer's collision events to the heat exchange core.

    Thermal particles live in an arena keyed by stable integer handles. For
    every collision start between two thermal particles, one conduction step
    with a fixed per-event dt is applied and both colors are republished.

    Data Contract:
    - Inputs:
        - config (dict): The 'simulation' section of the config file. Reads
          'frame_dt' plus the ConductionModel keys.
    - Outputs: Colors per handle, read by the renderer via color()/snapshot().
    - Side Effects: Mutates the heat bodies it owns.
    - Invariants: Events are applied strictly one after another in report order,
      so an entity appearing in several pairs in one batch sees each update in turn.
      Total thermal energy only changes through spawn, despawn and injection.
    """
    def __init__(self, config: dict = None):
        self.config = config or {}
        self.frame_dt = float(self.config.get('frame_dt', constants.DEFAULT_FRAME_DT))
        if self.frame_dt < 0:
            raise ValueError(f"frame_dt must be non-negative, got {self.frame_dt}")
        self.conduction = ConductionModel(self.config)
        self.default_material = self.config.get('material', constants.DEFAULT_MATERIAL)

        self._particles = {}
        self._next_handle = itertools.count()

        # --- Per-batch tracking variables for logging ---
        self.exchanges_last_batch = 0
        self.heat_transferred_last_batch = 0.0

        logger.info(
            f"ThermalWorld created: frame_dt={self.frame_dt:.6f} s, "
            f"contact={self.conduction.contact_area:g} m^2 x {self.conduction.contact_thickness:g} m, "
            f"conductivity_mode={self.conduction.conductivity_mode}"
        )

    # --- Lifecycle ---

    def spawn(self, initial_temperature, volume: float, material_kind=None):
        """
        Creates a thermal particle.

        - Inputs: initial_temperature (ThermodynamicTemperature or float kelvin), volume (m^3),
          material_kind (MaterialType, preset name or Material; defaults to the
          configured material).
        - Outputs: (handle, color) where color is the initial render color.
        """
        if not isinstance(initial_temperature, ThermodynamicTemperature):
            initial_temperature = kelvin(initial_temperature)
        if material_kind is None:
            material_kind = self.default_material
        material = material_kind if isinstance(material_kind, Material) else Material.from_type(material_kind)

        body = HeatBody.from_temperature(initial_temperature, volume, material)
        handle = next(self._next_handle)
        color = color_for(initial_temperature)
        self._particles[handle] = ThermalParticle(body, color)

        logger.debug(f"Spawned particle {handle}: T={initial_temperature.kelvin:.1f} K, V={volume:.3g} m^3")
        return handle, color

    def spawn_sphere(self, initial_temperature, diameter: float, material_kind=None):
        """Spawns a spherical particle of the given diameter (m)."""
        return self.spawn(initial_temperature, sphere_volume(diameter), material_kind)

    def despawn(self, handle: int):
        del self._particles[handle]
        logger.debug(f"Despawned particle {handle}")

    # --- Collision handling ---

    def handle_collision(self, a: int, b: int):
        """
        Runs one conduction step between the particles behind `a` and `b`.

        Returns the heat moved from `a` to `b`, or None when the pair is not a
        thermal contact (either side has no heat state, or a == b).
        """
        if a == b:
            logger.warning(f"Ignoring self-collision reported for entity {a}")
            return None
        particle_a = self._particles.get(a)
        particle_b = self._particles.get(b)
        if particle_a is None or particle_b is None:
            return None

        heat_transfer = self.conduction.transfer_heat(particle_a.body, particle_b.body, self.frame_dt)

        particle_a.color = color_for(particle_a.body.temperature())
        particle_b.color = color_for(particle_b.body.temperature())
        return heat_transfer

    def handle_collisions(self, events) -> int:
        """
        Applies a tick's batch of collision events in the order reported.
        Only STARTED events exchange heat. Returns the number of exchanges.
        """
        exchanges = 0
        heat_transferred = 0.0
        for event in events:
            if event.kind is not CollisionKind.STARTED:
                continue
            heat_transfer = self.handle_collision(event.a, event.b)
            if heat_transfer is None:
                continue
            exchanges += 1
            heat_transferred += abs(heat_transfer)

        self.exchanges_last_batch = exchanges
        self.heat_transferred_last_batch = heat_transferred
        return exchanges

    # --- External injection ---

    def inject_heat(self, handle: int, energy: float):
        """Adds `energy` joules (may be negative) to a particle and recolors it."""
        particle = self._particles[handle]
        particle.body.add_heat(energy)
        particle.color = color_for(particle.body.temperature())

    def inject_temperature(self, handle: int, interval):
        """Shifts a particle's temperature by a TemperatureInterval and recolors it."""
        particle = self._particles[handle]
        particle.body.add_temperature(interval)
        particle.color = color_for(particle.body.temperature())

    # --- Accessors ---

    def __len__(self):
        return len(self._particles)

    def __contains__(self, handle):
        return handle in self._particles

    def handles(self) -> list:
        return list(self._particles)

    def body(self, handle: int) -> HeatBody:
        return self._particles[handle].body

    def temperature(self, handle: int):
        return self._particles[handle].body.temperature()

    def color(self, handle: int) -> tuple:
        return self._particles[handle].color

    def get_total_thermal_energy(self) -> float:
        """Sum of stored energy over all particles, in joules."""
        return float(sum(p.body.stored_energy for p in self._particles.values()))

    def snapshot(self):
        """
        Returns (handles, kelvins, colors) as arrays for a renderer that
        redraws every particle each frame. colors has shape (N, 3).
        """
        handles = np.fromiter(self._particles.keys(), dtype=np.int64, count=len(self._particles))
        kelvins = np.fromiter(
            (p.body.temperature().kelvin for p in self._particles.values()),
            dtype=np.float64,
            count=len(self._particles),
        )
        return handles, kelvins, colors_for(kelvins)
