"""Configuration constants for the MPN classification engine."""

# Similarity score bands shared by every calculator
HIGH_SIMILARITY = 0.9
MEDIUM_SIMILARITY = 0.7
LOW_SIMILARITY = 0.3

# Dispatcher fallback when no category calculator produced a score
DEFAULT_SAME_BASE_TYPE_WEIGHT = 0.4
DEFAULT_SAME_MANUFACTURER_WEIGHT = 0.3
DEFAULT_SAME_SERIES_WEIGHT = 0.2

# Lexical fallback: letter prefix / numeric core / letter suffix
LEXICAL_PREFIX_WEIGHT = 0.3
LEXICAL_NUMERIC_WEIGHT = 0.5
LEXICAL_SUFFIX_WEIGHT = 0.2
LEXICAL_MISSING_SUFFIX_SCORE = 0.5  # One side has a suffix, the other none
LEXICAL_LOG_SCALE_ABOVE = 1000  # Numeric cores above this compare on a log scale

# Characteristic tolerances for discrete semiconductors (fraction of original)
VOLTAGE_TOLERANCE = 0.20
CURRENT_TOLERANCE = 0.30
GAIN_TOLERANCE = 0.30

# Passive calculator weights
PASSIVE_PACKAGE_WEIGHT = 0.3
RESISTOR_VALUE_WEIGHT = 0.5
RESISTOR_TOLERANCE_WEIGHT = 0.2
CAPACITOR_VALUE_WEIGHT = 0.4
CAPACITOR_VOLTAGE_WEIGHT = 0.2
INDUCTOR_VALUE_WEIGHT = 0.5
INDUCTOR_FAMILY_WEIGHT = 0.2

# Relative tolerance when comparing decoded component values (2%)
VALUE_MATCH_TOLERANCE = 0.02

# Decoration stripped from words before they are tried as MPNs
TEXT_TOKEN_PREFIXES = ("IC-", "PART-", "MPN:", "PN:", "P/N:", "REF:", "ITEM:")
TEXT_TOKEN_SUFFIXES = ("-SMD", "-THT", "-ROHS")
