import math

# Field name -> label used in the error message, in validation order
SINGLE_STAIR_FIELDS = [
    ("overall_height", "overall height"),
    ("step_height", "step height"),
    ("step_length", "step length"),
    ("stair_width", "stair width"),
]

STAIRWELL_FIELDS = [
    ("step_height", "step height"),
    ("step_length", "step length"),
    ("stair_width", "stair width"),
    ("platform_width", "platform width"),
    ("platform_depth", "platform depth"),
]


class ParameterValidationError(ValueError):
    """A named input field is missing, not a finite number, or not > 0."""

    def __init__(self, field, value, message):
        super().__init__(message)
        self.field = field
        self.value = value


def parse_positive(value):
    """Return value as a finite float > 0, or None if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def validate_fields(raw, fields):
    """Parse `fields` from `raw` in order; the first bad one raises.

    Returns a new dict with every listed field as a float. Keys of `raw`
    not listed in `fields` are copied through untouched.
    """
    result = dict(raw)
    for name, label in fields:
        number = parse_positive(raw.get(name))
        if number is None:
            raise ParameterValidationError(name, raw.get(name), f"Invalid {label}")
        result[name] = number
    return result


def validate_levels(step_counts):
    """Each level needs a whole number of steps > 0, and there must be at least one level."""
    if step_counts is None or len(step_counts) == 0:
        raise ParameterValidationError("levels", step_counts, "Stairwell needs at least one level")
    counts = []
    for i, value in enumerate(step_counts):
        if isinstance(value, dict):
            value = value.get("step_count")
        value = getattr(value, "step_count", value)
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        try:
            steps = int(str(value).strip())
        except ValueError:
            steps = 0
        if steps <= 0:
            raise ParameterValidationError(
                "levels", value, f"Invalid step count for level {i + 1}")
        counts.append(steps)
    return counts


def validate_single_stair(raw):
    return validate_fields(raw, SINGLE_STAIR_FIELDS)


def validate_stairwell(raw):
    config = validate_fields(raw, STAIRWELL_FIELDS)
    config["levels"] = validate_levels(raw.get("levels"))
    return config
