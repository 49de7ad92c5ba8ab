# config.py
# Settings for the frequency scaler fitting workflow

# ================================
# External Program
# ================================

# Gaussian executables, tried in order. The fallback to the next candidate
# only happens on the very first calculation of a run.
GAUSSIAN_EXECUTABLES = ("g16", "g09")

# Default calculation level used when the prompt is answered with ENTER
DEFAULT_LEVEL = "B3LYP/6-31G*"

# Route line written for level-based inputs
ROUTE_TEMPLATE = "# Opt Freq {level}"

# ================================
# Files
# ================================

INPUT_EXTENSION = ".gjf"
OUTPUT_EXTENSION = ".out"
CHECKPOINT_EXTENSION = ".chk"

# Files removed by the cleanup step
TEMPORARY_EXTENSIONS = (INPUT_EXTENSION, OUTPUT_EXTENSION, CHECKPOINT_EXTENSION)

RESULT_FILE = "scalers_result.txt"

# User template looked up in the working directory when no level is given
TEMPLATE_FILE = "template.gjf"

TEMPLATE_PLACEHOLDERS = {
    "name": "[NAME]",          # molecule identifier
    "geometry": "[GEOMETRY]",  # charge/multiplicity line + Cartesian atoms
}

# ================================
# Report Parsing
# ================================

REPORT_MARKERS = {
    "zpe": "Zero-point vibrational energy",
    "section_start": "and normal coordinates:",
    "section_end": "Thermochemistry",
    "frequencies": "Frequencies",
}

# Samples closer than this (cm^-1) to the running average belong to one mode
FREQUENCY_THRESHOLD = 3.0

# Lines checked for a Gaussian banner by GaussianFrequencyParser.can_parse
BANNER_SCAN_LINES = 20

# ================================
# Messages
# ================================

MESSAGE_TYPES = {
    "info": {
        "prefix": "",
    },
    "warning": {
        "prefix": "WARNING",
    },
    "error": {
        "prefix": "ERROR",
    },
    "debug": {
        "prefix": "DEBUG",
    },
}

MAX_MESSAGES = 100

# ================================
# Exit Codes
# ================================

EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 1
EXIT_CALCULATION_ERROR = 2
EXIT_PARSE_ERROR = 3
EXIT_FIT_ERROR = 4
EXIT_USAGE_ERROR = 5
EXIT_OUTPUT_ERROR = 6
