# conduction.py

import logging

import constants
from heat_body import HeatBody

logger = logging.getLogger(constants.LOGGER_NAME)


class ConductionModel:
    """
    Heat exchange between two touching particles.

    The contact is approximated by a fixed conductive disk (area, thickness)
    independent of the particle geometry. One call performs a single
    first-order step Q = G * dT * dt, bounded so that neither body is carried
    past the midpoint of the two temperatures. That bound is what keeps the
    exchange stable for tiny particles, large conductance or long steps.

    Data Contract:
    - Inputs:
        - config (dict): The 'simulation' section of the config file. Reads
          'contact_area', 'contact_thickness' and 'conductivity_mode'.
    - Outputs: transfer_heat returns the energy moved from the first body to the second.
    - Side Effects: transfer_heat mutates the stored energy of both bodies.
    - Invariants: the sum of stored energies is unchanged by a transfer.
    """
    def __init__(self, config: dict = None):
        config = config or {}
        self.contact_area = float(config.get('contact_area', constants.DEFAULT_CONTACT_AREA))
        self.contact_thickness = float(config.get('contact_thickness', constants.DEFAULT_CONTACT_THICKNESS))
        self.conductivity_mode = config.get('conductivity_mode', constants.DEFAULT_CONDUCTIVITY_MODE)

        if self.contact_area <= 0 or self.contact_thickness <= 0:
            raise ValueError(
                f"Contact area and thickness must be positive, got "
                f"area={self.contact_area}, thickness={self.contact_thickness}"
            )
        if self.conductivity_mode not in constants.CONDUCTIVITY_MODES:
            raise ValueError(
                f"Unknown conductivity_mode '{self.conductivity_mode}'. "
                f"Expected one of {constants.CONDUCTIVITY_MODES}"
            )

        # Clamp activations since creation, for diagnostics.
        self.clamped_transfers = 0

    def contact_conductivity(self, a: HeatBody, b: HeatBody) -> float:
        """Conductivity (W/(m K)) used for the contact between `a` and `b`."""
        k_a = a.material.thermal_conductivity
        if self.conductivity_mode == "first":
            return k_a
        k_b = b.material.thermal_conductivity
        return 2.0 * k_a * k_b / (k_a + k_b)

    def thermal_conductance(self, a: HeatBody, b: HeatBody) -> float:
        """G = k * A / L, in W/K."""
        return self.contact_conductivity(a, b) * self.contact_area / self.contact_thickness

    def transfer_heat(self, a: HeatBody, b: HeatBody, dt: float) -> float:
        """
        Moves heat between `a` and `b` over `dt` seconds.

        Returns Q, the energy (J) taken from `a` and given to `b`. Q is
        negative when `b` is the hotter body.
        """
        temp_a = a.temperature()
        temp_b = b.temperature()
        temperature_delta = temp_a - temp_b
        midpoint = temp_a - temperature_delta / 2

        raw_transfer = self.thermal_conductance(a, b) * temperature_delta.kelvin * dt

        # Neither body may move past the midpoint in one step. The body with the
        # smaller heat capacity reaches it first, so it sets the limit.
        # With the colder body at 0 K and equal capacities this reduces to the plain [-mid*C_b, mid*C_a] clamp.
        limit = abs(temp_a - midpoint).to_energy(min(a.heat_capacity(), b.heat_capacity()))
        heat_transfer = min(max(raw_transfer, -limit), limit)

        if heat_transfer != raw_transfer:
            self.clamped_transfers += 1

        a.add_heat(-heat_transfer)
        b.add_heat(heat_transfer)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Conduction: temps {temp_a.kelvin:.3f} K / {temp_b.kelvin:.3f} K -> "
                f"{a.temperature().kelvin:.3f} K / {b.temperature().kelvin:.3f} K, "
                f"Q={heat_transfer:.6g} J (raw {raw_transfer:.6g} J, "
                f"clamped={heat_transfer != raw_transfer})"
            )
        return heat_transfer
