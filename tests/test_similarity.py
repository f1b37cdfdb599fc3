"""Tests for the category similarity calculators."""

import pytest

from mpn_engine.config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY
from mpn_engine.similarity import (
    CapacitorSimilarityCalculator,
    DiodeSimilarityCalculator,
    InductorSimilarityCalculator,
    MosfetSimilarityCalculator,
    OpAmpSimilarityCalculator,
    ResistorSimilarityCalculator,
    SensorSimilarityCalculator,
    SimilarityCalculator,
    TransistorSimilarityCalculator,
    VoltageRegulatorSimilarityCalculator,
    default_calculators,
    lexical_similarity,
)
from mpn_engine.similarity.capacitor import parse_capacitor
from mpn_engine.similarity.lexical import split_mpn
from mpn_engine.similarity.regulator import parse_regulator
from mpn_engine.similarity.resistor import parse_resistor
from mpn_engine.similarity.transistor import strip_packaging_suffix
from mpn_engine.types import ComponentType

# One recognized pair per calculator
SAMPLE_PAIRS = [
    (MosfetSimilarityCalculator, "IRF540N", "STF540N"),
    (TransistorSimilarityCalculator, "2N2222", "PN2222"),
    (DiodeSimilarityCalculator, "1N4148", "1N914"),
    (ResistorSimilarityCalculator, "RC0603FR-0710KL", "RC0603JR-0710KL"),
    (CapacitorSimilarityCalculator, "GRM188R71H104KA93D", "GRM188R71E104KA01D"),
    (InductorSimilarityCalculator, "XAL4020-222MEB", "XAL4020-472MEB"),
    (VoltageRegulatorSimilarityCalculator, "MC7805CT", "LM7805"),
    (OpAmpSimilarityCalculator, "LM358DR", "MC1458"),
    (SensorSimilarityCalculator, "DS18B20+", "MAX31820"),
]


class TestCalculatorContract:
    """Properties shared by every calculator."""

    @pytest.mark.parametrize("calculator_class,mpn1,mpn2", SAMPLE_PAIRS)
    def test_symmetric_and_bounded(self, calculator_class, mpn1: str, mpn2: str):
        calculator = calculator_class()
        forward = calculator.calculate_similarity(mpn1, mpn2)
        assert forward == calculator.calculate_similarity(mpn2, mpn1)
        assert 0.0 < forward <= 1.0

    @pytest.mark.parametrize("calculator_class,mpn1,mpn2", SAMPLE_PAIRS)
    def test_identity(self, calculator_class, mpn1: str, mpn2: str):
        calculator = calculator_class()
        assert calculator.calculate_similarity(mpn1, mpn1.lower()) == 1.0

    @pytest.mark.parametrize("calculator_class,mpn1,mpn2", SAMPLE_PAIRS)
    def test_null_and_empty(self, calculator_class, mpn1: str, mpn2: str):
        calculator = calculator_class()
        assert calculator.calculate_similarity(None, mpn1) == 0.0
        assert calculator.calculate_similarity(mpn1, "") == 0.0
        assert calculator.calculate_similarity("  ", "  ") == 0.0

    @pytest.mark.parametrize("calculator_class,mpn1,mpn2", SAMPLE_PAIRS)
    def test_unrecognized_part(self, calculator_class, mpn1: str, mpn2: str):
        assert calculator_class().calculate_similarity(mpn1, "ZZZ999") == 0.0

    def test_applicability_uses_base_type(self):
        assert DiodeSimilarityCalculator().is_applicable(ComponentType.DIODE_ON)
        assert DiodeSimilarityCalculator().is_applicable(ComponentType.DIODE_TVS_PROTEK)
        assert MosfetSimilarityCalculator().is_applicable(ComponentType.MOSFET_ONSEMI)
        assert not MosfetSimilarityCalculator().is_applicable(ComponentType.TRANSISTOR)
        assert not TransistorSimilarityCalculator().is_applicable(None)

    def test_default_order(self):
        names = [calculator.name for calculator in default_calculators()]
        assert names == [
            "mosfet", "transistor", "diode", "resistor", "capacitor", "inductor",
            "voltage_regulator", "opamp", "sensor",
        ]

    def test_base_class_requires_score(self):
        with pytest.raises(NotImplementedError):
            SimilarityCalculator().calculate_similarity("ABC1", "ABC2")


class TestTransistorSimilarity:
    """Tests for TransistorSimilarityCalculator."""

    @pytest.fixture
    def calculator(self):
        return TransistorSimilarityCalculator()

    @pytest.mark.parametrize("input_val,expected", [
        ("2N2222A", "2N2222"),
        ("2N2222A-TR", "2N2222"),
        ("PN2222TA", "PN2222"),
        ("BC547B", "BC547B"),
    ])
    def test_strip_packaging_suffix(self, input_val: str, expected: str):
        assert strip_packaging_suffix(input_val) == expected

    def test_equivalent_group(self, calculator):
        assert calculator.calculate_similarity("2N2222", "PN2222") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("BC547B", "BC548") == HIGH_SIMILARITY

    def test_packaging_variants(self, calculator):
        assert calculator.calculate_similarity("2N2222A", "2N2222") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("2N2222A-TR", "2N2222") == HIGH_SIMILARITY

    def test_opposite_polarity(self, calculator):
        assert calculator.calculate_similarity("2N2222", "2N2907") == LOW_SIMILARITY
        assert calculator.calculate_similarity("BC547", "BC557") == LOW_SIMILARITY

    def test_different_family(self, calculator):
        assert calculator.calculate_similarity("2N2222", "BC547") == LOW_SIMILARITY

    def test_characteristics_within_tolerance(self, calculator):
        assert calculator.calculate_similarity("2N2222", "2N4401") == HIGH_SIMILARITY

    def test_characteristics_outside_tolerance(self, calculator):
        assert calculator.calculate_similarity("2N3904", "2N4401") == LOW_SIMILARITY

    def test_series_neighbours(self, calculator):
        assert calculator.calculate_similarity("2N2218", "2N2222") == MEDIUM_SIMILARITY

    def test_polarity(self, calculator):
        assert calculator.polarity("2N3904") == "NPN"
        assert calculator.polarity("2SA1015") == "PNP"
        assert calculator.polarity("TIP31") == ""

    def test_unknown_parts_use_lexical_band(self, calculator):
        score = calculator.calculate_similarity("TIP31", "TIP32")
        expected = LOW_SIMILARITY + (MEDIUM_SIMILARITY - LOW_SIMILARITY) * lexical_similarity("TIP31", "TIP32")
        assert score == pytest.approx(expected)
        assert LOW_SIMILARITY < score < MEDIUM_SIMILARITY

    def test_small_signal_mosfets_not_recognized(self, calculator):
        assert not calculator.recognizes("2N7002")
        assert calculator.calculate_similarity("2N7002", "2N2222") == 0.0
        assert MosfetSimilarityCalculator().recognizes("2N7002")


class TestMosfetSimilarity:
    """Tests for MosfetSimilarityCalculator."""

    @pytest.fixture
    def calculator(self):
        return MosfetSimilarityCalculator()

    def test_base_part(self, calculator):
        assert calculator.base_part("IRF540NPBF") == "IRF540N"
        assert calculator.base_part("FQP30N06L") == "FQP30N06"

    def test_channel(self, calculator):
        assert calculator.is_n_channel("IRF540N")
        assert not calculator.is_n_channel("IRF9540")

    def test_cross_vendor_equivalents(self, calculator):
        assert calculator.calculate_similarity("IRF540N", "STF540N") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("IRF530", "FQP30N06") == HIGH_SIMILARITY

    def test_same_base_part(self, calculator):
        assert calculator.calculate_similarity("IRF540NPBF", "IRF540N") == HIGH_SIMILARITY

    def test_channel_mismatch(self, calculator):
        assert calculator.calculate_similarity("IRF540N", "IRF9540") == LOW_SIMILARITY

    def test_stronger_part_capped_at_high(self, calculator):
        # IRF640 exceeds both IRF530 ratings
        assert calculator.calculate_similarity("IRF530", "IRF640") == HIGH_SIMILARITY

    def test_unrelated_ratings(self, calculator):
        # Only the TO-220 package agrees
        assert calculator.calculate_similarity("FQP30N06", "IRF640") == pytest.approx(0.4)

    def test_unknown_parts_use_lexical_band(self, calculator):
        score = calculator.calculate_similarity("IRF3205", "IRF3710")
        assert LOW_SIMILARITY < score <= MEDIUM_SIMILARITY


class TestDiodeSimilarity:
    """Tests for DiodeSimilarityCalculator."""

    @pytest.fixture
    def calculator(self):
        return DiodeSimilarityCalculator()

    @pytest.mark.parametrize("input_val,expected", [
        ("1N4007", "1N400X"),
        ("RL207", "1N400X"),
        ("1N4148", "SIGNAL"),
        ("LL4148", "SIGNAL"),
        ("BAT54", "SCHOTTKY"),
        ("1N5819", "SCHOTTKY"),
        ("1N4733A", "ZENER"),
        ("BZX84C5V1", "ZENER"),
        ("UF4007", "FAST_RECTIFIER"),
        ("1N5408", "RECTIFIER"),
        ("BAV99", "OTHER"),
    ])
    def test_family(self, calculator, input_val: str, expected: str):
        assert calculator.family(input_val) == expected

    @pytest.mark.parametrize("input_val,expected", [
        ("1N4733A", 5.1),
        ("BZX84C3V3", 3.3),
        ("BZX55C12", 12.0),
    ])
    def test_zener_voltage(self, calculator, input_val: str, expected: float):
        assert calculator.zener_voltage(input_val) == pytest.approx(expected)

    @pytest.mark.parametrize("input_val,expected", [
        ("MBR20100", 100),
        ("MBR0520", 20),
        ("MBRS340", 40),
        ("BAT54S", 30),
        ("1N4148", 0),
    ])
    def test_schottky_voltage(self, calculator, input_val: str, expected: int):
        assert calculator.schottky_voltage(input_val) == expected

    def test_signal_diodes(self, calculator):
        assert calculator.calculate_similarity("1N4148", "1N914") == HIGH_SIMILARITY

    def test_rectifier_ladder(self, calculator):
        assert calculator.calculate_similarity("1N4007", "RL207") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("1N4001", "1N4007") == MEDIUM_SIMILARITY

    def test_zener_voltages(self, calculator):
        assert calculator.calculate_similarity("1N4733A", "BZX84C5V1") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("1N4733A", "1N4742A") == LOW_SIMILARITY

    def test_schottky(self, calculator):
        assert calculator.calculate_similarity("BAT54", "BAT54S") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("1N5819", "BAT48") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("1N5817", "1N5819") == MEDIUM_SIMILARITY

    def test_mixed_families(self, calculator):
        assert calculator.calculate_similarity("1N4007", "1N5408") == MEDIUM_SIMILARITY
        assert calculator.calculate_similarity("FR107", "UF4007") == MEDIUM_SIMILARITY
        assert calculator.calculate_similarity("1N4148", "1N4007") == LOW_SIMILARITY


class TestResistorSimilarity:
    """Tests for ResistorSimilarityCalculator."""

    @pytest.fixture
    def calculator(self):
        return ResistorSimilarityCalculator()

    @pytest.mark.parametrize("input_val,size,ohms,tolerance", [
        ("CRCW060310K0FKEA", "0603", 10000, 1.0),
        ("RC0603FR-0710KL", "0603", 10000, 1.0),
        ("RC0402JR-074K7L", "0402", 4700, 5.0),
        ("CR0603-FX-1001ELF", "0603", 1000, 1.0),
        ("CSR0805-0R010F", "0805", 0.01, 1.0),
    ])
    def test_parse(self, input_val: str, size: str, ohms: float, tolerance: float):
        spec = parse_resistor(input_val)
        assert spec.size == size
        assert spec.ohms == pytest.approx(ohms)
        assert spec.tolerance == tolerance

    def test_parse_unknown(self):
        assert parse_resistor("LM358") is None

    def test_cross_vendor_match(self, calculator):
        assert calculator.calculate_similarity("CRCW060310K0FKEA", "RC0603FR-0710KL") == pytest.approx(1.0)
        assert calculator.calculate_similarity("CR0603-FX-1001ELF", "RC0603FR-071KL") == pytest.approx(1.0)

    def test_tolerance_differs(self, calculator):
        assert calculator.calculate_similarity("RC0603FR-0710KL", "RC0603JR-0710KL") == pytest.approx(0.9)

    def test_size_differs(self, calculator):
        assert calculator.calculate_similarity("RC0603FR-0710KL", "RC0805FR-0710KL") == pytest.approx(0.7)

    def test_value_differs(self, calculator):
        assert calculator.calculate_similarity("RC0603FR-0710KL", "RC0603FR-074K7L") == pytest.approx(0.5)


class TestCapacitorSimilarity:
    """Tests for CapacitorSimilarityCalculator."""

    @pytest.fixture
    def calculator(self):
        return CapacitorSimilarityCalculator()

    def test_parse_murata(self):
        spec = parse_capacitor("GRM188R71H104KA93D")
        assert spec.size == "0603"
        assert spec.farads == pytest.approx(100e-9)
        assert spec.volts == 50

    def test_parse_samsung(self):
        spec = parse_capacitor("CL10B104KB8NNNC")
        assert spec.size == "0603"
        assert spec.farads == pytest.approx(100e-9)
        assert spec.volts == 50

    def test_cross_vendor_match(self, calculator):
        assert calculator.calculate_similarity("GRM188R71H104KA93D", "CL10B104KB8NNNC") == pytest.approx(1.0)

    def test_voltage_differs(self, calculator):
        score = calculator.calculate_similarity("GRM188R71H104KA93D", "GRM188R71E104KA01D")
        assert score == pytest.approx(0.8 / 0.9)

    def test_size_differs(self, calculator):
        score = calculator.calculate_similarity("GRM188R71H104KA93D", "GRM21BR71H104KA01L")
        assert score == pytest.approx(0.6 / 0.9)

    def test_value_differs(self, calculator):
        score = calculator.calculate_similarity("GRM188R71H104KA93D", "GRM188R71H105KA93D")
        assert score == pytest.approx(0.5 / 0.9)


class TestInductorSimilarity:
    """Tests for InductorSimilarityCalculator."""

    @pytest.fixture
    def calculator(self):
        return InductorSimilarityCalculator()

    def test_family(self, calculator):
        assert calculator.family("XAL4020-222MEB") == "XAL"
        assert calculator.family("SWPA4020S4R7MT") == "SWPA"
        assert calculator.family("LM358") == ""

    def test_packaging_variant(self, calculator):
        assert calculator.calculate_similarity("XAL4020-222MEB", "XAL4020-222MEC") == pytest.approx(1.0)

    def test_value_differs(self, calculator):
        assert calculator.calculate_similarity("XAL4020-222MEB", "XAL4020-472MEB") == pytest.approx(0.5)

    def test_size_differs(self, calculator):
        assert calculator.calculate_similarity("XAL4020-222MEB", "XAL5030-222MEB") == pytest.approx(0.7)

    def test_cross_vendor_same_value(self, calculator):
        assert calculator.calculate_similarity("SWPA4020S4R7MT", "XAL4020-472MEB") == pytest.approx(0.5)


class TestVoltageRegulatorSimilarity:
    """Tests for VoltageRegulatorSimilarityCalculator."""

    @pytest.fixture
    def calculator(self):
        return VoltageRegulatorSimilarityCalculator()

    @pytest.mark.parametrize("input_val,kind,polarity,voltage,current", [
        ("MC7805CT", "fixed", "positive", "05", 1000),
        ("LM7912", "fixed", "negative", "12", 1000),
        ("MC78L05ACP", "fixed", "positive", "05", 100),
        ("LM317T", "adjustable", "positive", "", 1500),
        ("LM337T", "adjustable", "negative", "", 1500),
        ("NCP1117ST33T3G", "fixed", "positive", "33", 800),
        ("LM1117-3.3", "fixed", "positive", "33", 800),
        ("AMS1117-ADJ", "adjustable", "positive", "", 800),
    ])
    def test_parse(self, input_val: str, kind: str, polarity: str, voltage: str, current: int):
        spec = parse_regulator(input_val)
        assert spec.kind == kind
        assert spec.polarity == polarity
        assert spec.voltage == voltage
        assert spec.current == current

    def test_parse_unknown(self):
        assert parse_regulator("LM358") is None

    def test_cross_vendor_same_output(self, calculator):
        assert calculator.calculate_similarity("MC7805CT", "LM7805") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("NCP1117ST33T3G", "LM1117-3.3") == HIGH_SIMILARITY

    def test_current_grade_differs(self, calculator):
        assert calculator.calculate_similarity("MC7805CT", "MC78L05ACP") == MEDIUM_SIMILARITY

    @pytest.mark.parametrize("mpn1,mpn2", [
        ("MC7805CT", "MC7812CT"),
        ("MC7805CT", "MC7905CT"),
        ("LM317T", "LM337T"),
        ("LM317T", "MC7805CT"),
        ("NCP1117ST33T3G", "NCP1117ST50T3G"),
    ])
    def test_incompatible(self, calculator, mpn1: str, mpn2: str):
        assert calculator.calculate_similarity(mpn1, mpn2) == LOW_SIMILARITY
        assert calculator.calculate_similarity(mpn2, mpn1) == LOW_SIMILARITY

    def test_adjustable_family(self, calculator):
        assert calculator.calculate_similarity("LM317T", "LM350T") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("LM317T", "AMS1117-ADJ") == MEDIUM_SIMILARITY


class TestOpAmpSimilarity:
    """Tests for OpAmpSimilarityCalculator."""

    @pytest.fixture
    def calculator(self):
        return OpAmpSimilarityCalculator()

    @pytest.mark.parametrize("input_val,expected", [
        ("LM358DR", "LM358"),
        ("LM2904DR", "LM2904"),
        ("TL072CP", "TL072"),
        ("MC1458P", "MC1458"),
        ("LM317T", ""),
    ])
    def test_family(self, calculator, input_val: str, expected: str):
        assert calculator.family(input_val) == expected

    def test_same_family_packages(self, calculator):
        assert calculator.calculate_similarity("LM358DR", "LM358N") == HIGH_SIMILARITY

    def test_pin_compatible_duals(self, calculator):
        assert calculator.calculate_similarity("LM358DR", "MC1458") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("TL072CP", "TL082CP") == HIGH_SIMILARITY

    def test_input_stage_differs(self, calculator):
        assert calculator.calculate_similarity("LM358N", "TL072CP") == MEDIUM_SIMILARITY
        assert calculator.calculate_similarity("TL074CN", "LM324N") == MEDIUM_SIMILARITY

    @pytest.mark.parametrize("mpn1,mpn2", [
        ("LM358DR", "LM324N"),
        ("MC1458", "MC741"),
        ("TL071CP", "TL074CN"),
    ])
    def test_channel_count_differs(self, calculator, mpn1: str, mpn2: str):
        assert calculator.calculate_similarity(mpn1, mpn2) == LOW_SIMILARITY
        assert calculator.calculate_similarity(mpn2, mpn1) == LOW_SIMILARITY


class TestSensorSimilarity:
    """Tests for SensorSimilarityCalculator."""

    @pytest.fixture
    def calculator(self):
        return SensorSimilarityCalculator()

    @pytest.mark.parametrize("input_val,expected", [
        ("BMA456", "ACCELEROMETER"),
        ("LIS3DHTR", "ACCELEROMETER"),
        ("DS18B20+", "TEMPERATURE"),
        ("LM35DZ", "TEMPERATURE"),
        ("BMG250", "GYROSCOPE"),
        ("MPU6050", "IMU"),
        ("SHT31-DIS-B", "HUMIDITY"),
        ("BMP280", "PRESSURE"),
        # Op-amp, not an LM35 grade
        ("LM358", ""),
    ])
    def test_kind(self, calculator, input_val: str, expected: str):
        assert calculator.kind(input_val) == expected

    @pytest.mark.parametrize("input_val,expected", [
        ("BMA456FB", "BMA456"),
        ("LIS3DHTR", "LIS3DH"),
        ("LM35DZ", "LM35D"),
        ("DS18B20+", "DS18B20"),
    ])
    def test_base_part(self, calculator, input_val: str, expected: str):
        assert calculator.base_part(input_val) == expected

    def test_packaging_variant(self, calculator):
        assert calculator.calculate_similarity("BMA456", "BMA456FB") == HIGH_SIMILARITY

    def test_equivalent_parts(self, calculator):
        assert calculator.calculate_similarity("DS18B20+", "MAX31820") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("LM35DZ", "LM35CZ") == HIGH_SIMILARITY
        assert calculator.calculate_similarity("SHT30-DIS-B", "SHT31-DIS-B") == HIGH_SIMILARITY

    def test_compatible_successor(self, calculator):
        assert calculator.calculate_similarity("BMP280", "BME280") == MEDIUM_SIMILARITY
        assert calculator.calculate_similarity("BMI160", "BMI270") == MEDIUM_SIMILARITY

    @pytest.mark.parametrize("mpn1,mpn2", [
        ("BMA456", "BMA400"),
        ("BMA456", "BMG250"),
        ("DS18B20+", "BMP280"),
        ("MPU6050", "ICM20948"),
    ])
    def test_incompatible(self, calculator, mpn1: str, mpn2: str):
        assert calculator.calculate_similarity(mpn1, mpn2) == LOW_SIMILARITY
        assert calculator.calculate_similarity(mpn2, mpn1) == LOW_SIMILARITY


class TestLexicalSimilarity:
    """Tests for the lexical fallback."""

    @pytest.mark.parametrize("input_val,expected", [
        ("2N2222A", ("2N", 2222, "A")),
        ("IRF540NPBF", ("IRF", 540, "NPBF")),
        # First of equally long runs wins
        ("CR0603-FX-1001ELF", ("CR", 603, "FX1001ELF")),
        ("LM", ("LM", None, "")),
    ])
    def test_split_mpn(self, input_val: str, expected: tuple):
        assert split_mpn(input_val) == expected

    def test_identity_and_empty(self):
        assert lexical_similarity("lm358", "LM358") == 1.0
        assert lexical_similarity(None, "LM358") == 0.0
        assert lexical_similarity("LM358", "") == 0.0

    def test_suffix_only_on_one_side(self):
        assert lexical_similarity("LM358", "LM358N") == pytest.approx(0.9)

    def test_numeric_ratio(self):
        assert lexical_similarity("LM358", "LM324") == pytest.approx(0.3 + 0.5 * 324 / 358 + 0.2)
