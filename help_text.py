# help_text.py

from config import DEFAULT_LEVEL, RESULT_FILE, TEMPLATE_FILE, TEMPLATE_PLACEHOLDERS

USAGE_TEXT = [
    "Usage: freqscalers [-d] [level]",
    "",
    "Tests 15 small molecules and generates frequency scalers",
    "for fundamental frequency and zero-point energy using Gaussian.",
    "",
    "  level        calculation level and related keywords, e.g.",
    "               \"M062X/def2SVP EmpiricalDispersion=GD3 Integral=UltrafineGrid\"",
    "  -h, --help, /?  show this help and exit",
    "  -d, --debug  also print debug messages (e.g. parsed modes per report)",
    "",
    f"Without a level, {TEMPLATE_FILE} in the current directory is used as the",
    f"input template if present ({TEMPLATE_PLACEHOLDERS['geometry']} is replaced by the charge,",
    f"multiplicity and coordinates, {TEMPLATE_PLACEHOLDERS['name']} by the molecule name).",
    f"Otherwise the level is asked for; ENTER selects {DEFAULT_LEVEL}.",
    "",
    "Set GAUSS_EXEDIR to the directory containing your Gaussian executable",
    "and add it to PATH. g16 is tried first, then g09.",
    "",
    f"The result is saved to {RESULT_FILE}.",
]

PROMPT_TEXT = [
    "Tests 15 small molecules and generates frequency scalers",
    "for fundamental frequency and zero-point energy using Gaussian.",
    "",
    "Before using, you need to set system environment variable",
    "GAUSS_EXEDIR to the directory containing your gaussian executable.",
    "Also, this path should be added to environment variable PATH.",
    "",
    "Input the level and related keywords, e.g. ",
    "M062X/def2SVP EmpiricalDispersion=GD3 Integral=UltrafineGrid",
    f"If you press ENTER directly, {DEFAULT_LEVEL} will be used:",
]
