"""Component type taxonomy.

Types form a two-level tree: generic categories (RESISTOR, ACCELEROMETER,
...) and manufacturer-qualified children (ACCELEROMETER_BOSCH, ...). A
request for a generic type is satisfied by a match on any of its qualified
children, never the other way round.
"""

from enum import Enum


class ComponentType(Enum):
    """Classification tag for a part number."""

    # Passives
    RESISTOR = "resistor"
    CAPACITOR = "capacitor"
    INDUCTOR = "inductor"
    FERRITE_BEAD = "ferrite_bead"
    CRYSTAL = "crystal"
    # Discrete semiconductors
    DIODE = "diode"
    TRANSISTOR = "transistor"
    MOSFET = "mosfet"
    IGBT = "igbt"
    # Integrated circuits
    IC = "ic"
    OPAMP = "opamp"
    VOLTAGE_REGULATOR = "voltage_regulator"
    LED_DRIVER = "led_driver"
    MOTOR_DRIVER = "motor_driver"
    OPTOCOUPLER = "optocoupler"
    OSCILLATOR = "oscillator"
    RTC = "rtc"
    # Sensors
    SENSOR = "sensor"
    ACCELEROMETER = "accelerometer"
    GYROSCOPE = "gyroscope"
    MAGNETOMETER = "magnetometer"
    PRESSURE_SENSOR = "pressure_sensor"
    HUMIDITY_SENSOR = "humidity_sensor"
    TEMPERATURE_SENSOR = "temperature_sensor"

    # Manufacturer-qualified types
    ACCELEROMETER_BOSCH = "accelerometer_bosch"
    GYROSCOPE_BOSCH = "gyroscope_bosch"
    IMU_BOSCH = "imu_bosch"
    MAGNETOMETER_BOSCH = "magnetometer_bosch"
    PRESSURE_SENSOR_BOSCH = "pressure_sensor_bosch"
    HUMIDITY_SENSOR_BOSCH = "humidity_sensor_bosch"
    TEMPERATURE_SENSOR_BOSCH = "temperature_sensor_bosch"
    GAS_SENSOR_BOSCH = "gas_sensor_bosch"
    RESISTOR_CHIP_VIKING = "resistor_chip_viking"
    DIODE_TVS_PROTEK = "diode_tvs_protek"
    DIODE_ON = "diode_on"
    MOSFET_ONSEMI = "mosfet_onsemi"
    IGBT_ONSEMI = "igbt_onsemi"
    OPAMP_ON = "opamp_on"
    VOLTAGE_REGULATOR_LINEAR_ON = "voltage_regulator_linear_on"
    VOLTAGE_REGULATOR_SWITCHING_ON = "voltage_regulator_switching_on"
    LED_DRIVER_ONSEMI = "led_driver_onsemi"
    MOTOR_DRIVER_ONSEMI = "motor_driver_onsemi"
    OPTOCOUPLER_ISOCOM = "optocoupler_isocom"
    INDUCTOR_CHIP_COILCRAFT = "inductor_chip_coilcraft"
    CRYSTAL_EPSON = "crystal_epson"
    OSCILLATOR_EPSON = "oscillator_epson"
    OSCILLATOR_TCXO_EPSON = "oscillator_tcxo_epson"
    OSCILLATOR_VCXO_EPSON = "oscillator_vcxo_epson"
    OSCILLATOR_OCXO_EPSON = "oscillator_ocxo_epson"
    RTC_EPSON = "rtc_epson"

    @property
    def base_type(self) -> "ComponentType":
        """Generic category of this type (itself when already generic)."""
        return _PARENTS.get(self, self)

    @property
    def is_manufacturer_specific(self) -> bool:
        return self in _PARENTS

    @property
    def is_passive(self) -> bool:
        return self.base_type in _PASSIVE_TYPES

    @property
    def is_semiconductor(self) -> bool:
        return not self.is_passive


_PARENTS: dict[ComponentType, ComponentType] = {
    ComponentType.ACCELEROMETER_BOSCH: ComponentType.ACCELEROMETER,
    ComponentType.GYROSCOPE_BOSCH: ComponentType.GYROSCOPE,
    ComponentType.IMU_BOSCH: ComponentType.SENSOR,
    ComponentType.MAGNETOMETER_BOSCH: ComponentType.MAGNETOMETER,
    ComponentType.PRESSURE_SENSOR_BOSCH: ComponentType.PRESSURE_SENSOR,
    ComponentType.HUMIDITY_SENSOR_BOSCH: ComponentType.HUMIDITY_SENSOR,
    ComponentType.TEMPERATURE_SENSOR_BOSCH: ComponentType.TEMPERATURE_SENSOR,
    ComponentType.GAS_SENSOR_BOSCH: ComponentType.SENSOR,
    ComponentType.RESISTOR_CHIP_VIKING: ComponentType.RESISTOR,
    ComponentType.DIODE_TVS_PROTEK: ComponentType.DIODE,
    ComponentType.DIODE_ON: ComponentType.DIODE,
    ComponentType.MOSFET_ONSEMI: ComponentType.MOSFET,
    ComponentType.IGBT_ONSEMI: ComponentType.IGBT,
    ComponentType.OPAMP_ON: ComponentType.OPAMP,
    ComponentType.VOLTAGE_REGULATOR_LINEAR_ON: ComponentType.VOLTAGE_REGULATOR,
    ComponentType.VOLTAGE_REGULATOR_SWITCHING_ON: ComponentType.VOLTAGE_REGULATOR,
    ComponentType.LED_DRIVER_ONSEMI: ComponentType.LED_DRIVER,
    ComponentType.MOTOR_DRIVER_ONSEMI: ComponentType.MOTOR_DRIVER,
    ComponentType.OPTOCOUPLER_ISOCOM: ComponentType.OPTOCOUPLER,
    ComponentType.INDUCTOR_CHIP_COILCRAFT: ComponentType.INDUCTOR,
    ComponentType.CRYSTAL_EPSON: ComponentType.CRYSTAL,
    ComponentType.OSCILLATOR_EPSON: ComponentType.OSCILLATOR,
    ComponentType.OSCILLATOR_TCXO_EPSON: ComponentType.OSCILLATOR,
    ComponentType.OSCILLATOR_VCXO_EPSON: ComponentType.OSCILLATOR,
    ComponentType.OSCILLATOR_OCXO_EPSON: ComponentType.OSCILLATOR,
    ComponentType.RTC_EPSON: ComponentType.RTC,
}

_PASSIVE_TYPES = frozenset({
    ComponentType.RESISTOR,
    ComponentType.CAPACITOR,
    ComponentType.INDUCTOR,
    ComponentType.FERRITE_BEAD,
    ComponentType.CRYSTAL,
})


def is_satisfied_by(requested: ComponentType | None, matched: ComponentType | None) -> bool:
    """Check whether a match on `matched` answers a request for `requested`.

    Args:
        requested: Type the caller asked about (e.g., ACCELEROMETER)
        matched: Type a rule actually matched (e.g., ACCELEROMETER_BOSCH)

    Returns:
        True if the types are equal or `matched` is a qualified child of
        `requested`. Asking for a qualified type is never satisfied by a
        generic match.
    """
    if requested is None or matched is None:
        return False
    return matched is requested or _PARENTS.get(matched) is requested


def qualified_types(base: ComponentType) -> frozenset[ComponentType]:
    """Manufacturer-qualified children of a generic type."""
    return frozenset(child for child, parent in _PARENTS.items() if parent is base)
