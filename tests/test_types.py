"""Tests for the component type taxonomy."""

import pytest

from mpn_engine.types import ComponentType, is_satisfied_by, qualified_types


class TestBaseType:
    """Tests for ComponentType.base_type and related properties."""

    @pytest.mark.parametrize("qualified,generic", [
        (ComponentType.ACCELEROMETER_BOSCH, ComponentType.ACCELEROMETER),
        (ComponentType.IMU_BOSCH, ComponentType.SENSOR),
        (ComponentType.GAS_SENSOR_BOSCH, ComponentType.SENSOR),
        (ComponentType.RESISTOR_CHIP_VIKING, ComponentType.RESISTOR),
        (ComponentType.DIODE_TVS_PROTEK, ComponentType.DIODE),
        (ComponentType.VOLTAGE_REGULATOR_SWITCHING_ON, ComponentType.VOLTAGE_REGULATOR),
        (ComponentType.OPTOCOUPLER_ISOCOM, ComponentType.OPTOCOUPLER),
        (ComponentType.OSCILLATOR_TCXO_EPSON, ComponentType.OSCILLATOR),
        (ComponentType.RTC_EPSON, ComponentType.RTC),
    ])
    def test_qualified_maps_to_generic(self, qualified: ComponentType, generic: ComponentType):
        assert qualified.base_type is generic
        assert qualified.is_manufacturer_specific
        assert not generic.is_manufacturer_specific

    def test_generic_is_its_own_base(self):
        for component_type in ComponentType:
            if not component_type.is_manufacturer_specific:
                assert component_type.base_type is component_type

    def test_every_base_is_generic(self):
        for component_type in ComponentType:
            assert not component_type.base_type.is_manufacturer_specific

    @pytest.mark.parametrize("component_type,passive", [
        (ComponentType.RESISTOR, True),
        (ComponentType.RESISTOR_CHIP_VIKING, True),
        (ComponentType.INDUCTOR_CHIP_COILCRAFT, True),
        (ComponentType.FERRITE_BEAD, True),
        (ComponentType.CRYSTAL_EPSON, True),
        (ComponentType.MOSFET, False),
        (ComponentType.DIODE_ON, False),
        (ComponentType.ACCELEROMETER_BOSCH, False),
    ])
    def test_passive_split(self, component_type: ComponentType, passive: bool):
        assert component_type.is_passive is passive
        assert component_type.is_semiconductor is not passive


class TestIsSatisfiedBy:
    """Tests for the generic/qualified subsumption rule."""

    def test_same_type(self):
        assert is_satisfied_by(ComponentType.ACCELEROMETER, ComponentType.ACCELEROMETER)

    def test_generic_request_accepts_qualified_match(self):
        assert is_satisfied_by(ComponentType.ACCELEROMETER, ComponentType.ACCELEROMETER_BOSCH)

    def test_qualified_request_rejects_generic_match(self):
        assert not is_satisfied_by(ComponentType.ACCELEROMETER_BOSCH, ComponentType.ACCELEROMETER)

    def test_unrelated_types(self):
        assert not is_satisfied_by(ComponentType.GYROSCOPE, ComponentType.ACCELEROMETER_BOSCH)

    def test_none(self):
        assert not is_satisfied_by(None, ComponentType.RESISTOR)
        assert not is_satisfied_by(ComponentType.RESISTOR, None)


class TestQualifiedTypes:
    """Tests for qualified_types."""

    def test_oscillator_children(self):
        assert qualified_types(ComponentType.OSCILLATOR) == {
            ComponentType.OSCILLATOR_EPSON,
            ComponentType.OSCILLATOR_TCXO_EPSON,
            ComponentType.OSCILLATOR_VCXO_EPSON,
            ComponentType.OSCILLATOR_OCXO_EPSON,
        }

    def test_type_without_children(self):
        assert qualified_types(ComponentType.CAPACITOR) == frozenset()
