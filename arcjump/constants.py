"""
Shared constants for arcade jump calculations.

Numeric widths, their accepted spellings, the parameter kind spellings
understood by the solve-DSL and the JSON API, and the message strings
reported when an identity is undefined.

IMPORTANT: No unicode characters allowed in this file (Windows charmap constraint).
"""

# Canonical numeric widths
FLOAT32 = "f32"
FLOAT64 = "f64"

# Width used when nothing else decides (plain Python numbers)
DEFAULT_WIDTH = FLOAT64

# Accepted spellings for a numeric width (DSL preamble, `as` suffix, API)
WIDTH_ALIASES = {
    "f32": FLOAT32,
    "float32": FLOAT32,
    "f64": FLOAT64,
    "float64": FLOAT64,
}

# DSL spellings of the four parameter kinds, keyed by canonical name.
# Order is the canonical kind order: height < time < impulse < gravity.
KIND_SPELLINGS = (
    ("height", ("H", "Height")),
    ("time", ("T", "Time")),
    ("impulse", ("I", "Impulse")),
    ("gravity", ("G", "Gravity")),
)

# Extra spellings accepted in JSON payloads (case-insensitive)
API_KIND_ALIASES = {
    "h": "height",
    "t": "time",
    "i": "impulse",
    "v": "impulse",
    "velocity": "impulse",
    "g": "gravity",
}

# Resolver error messages, keyed by canonical kind name
NULL_PARAMETER_MESSAGES = {
    "height": "Height of the peak cannot be null",
    "time": "Time to reach the peak cannot be null",
    "impulse": "Initial vertical impulse cannot be null",
    "gravity": "Gravity cannot be null",
}

# Horizontal helper error messages
NULL_HORIZONTAL_MESSAGES = {
    "time": "Time to reach the distance cannot be null",
    "range": "Distance cannot be null",
    "speed": "Horizontal speed cannot be null",
}

# Upper bound on the magnitude of any value accepted by the JSON API
MAX_API_MAGNITUDE = 1.0e12
