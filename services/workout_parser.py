"""Plan-text parsing shared by workout logging and plan generation.

A workout block is five lines::

    #Legs
    -Back Squat
    -5 sets 15 reps
    -30 kg
    -10 min

Blocks are separated by ``;``. Generated plans group blocks under
``Day N:`` headers.
"""

import re
from typing import List, Optional

from schemas.plan import ScheduleDay
from schemas.workout import ParsedWorkout
from utils.helpers import ordinal
from utils.logger import setup_logger

logger = setup_logger(__name__)

BLOCK_SEPARATOR = ";"
BLOCK_LINES = 5
CALORIES_PER_KG_MINUTE = 5

SETS_REPS_RE = re.compile(r"(\d+)\s*sets?\s*[xX]?\s*(\d+)\s*reps?", re.IGNORECASE)
WEIGHT_RE = re.compile(r"(\d*\.?\d+)\s*kg", re.IGNORECASE)
DURATION_RE = re.compile(r"(\d*\.?\d+)\s*min", re.IGNORECASE)
DAY_HEADER_RE = re.compile(r"^Day\s+(\d+)[:.]?", re.IGNORECASE)

FORMAT_HINT = (
    "Please enter workouts in the correct format. Expected: #Category, "
    "-Workout Name, -X sets Y reps (or X setsX Y reps), -Weight kg, -Duration min"
)


class WorkoutParseError(ValueError):
    """Raised when workout text does not follow the block format."""


def _strip_dash(line: str) -> str:
    return line[1:].strip() if line.startswith("-") else line.strip()


def parse_workout_lines(lines: List[str]) -> Optional[ParsedWorkout]:
    """Build a workout from the five lines of one block, or None if malformed."""
    if len(lines) < BLOCK_LINES or not lines[0].startswith("#"):
        return None

    category = lines[0][1:].strip()
    workout_name = _strip_dash(lines[1])
    sets_match = SETS_REPS_RE.search(_strip_dash(lines[2]))
    if not category or not workout_name or not sets_match:
        return None

    weight_match = WEIGHT_RE.search(_strip_dash(lines[3]))
    duration_match = DURATION_RE.search(_strip_dash(lines[4]))

    return ParsedWorkout(
        category=category,
        workout_name=workout_name,
        sets=int(sets_match.group(1)),
        reps=int(sets_match.group(2)),
        weight=float(weight_match.group(1)) if weight_match else 0,
        duration=float(duration_match.group(1)) if duration_match else 0,
    )


def parse_workout_blocks(raw: str) -> List[ParsedWorkout]:
    """Parse ``;``-separated workout blocks.

    Raises WorkoutParseError on the first block that is missing lines or
    fields; a string with no blocks at all yields an empty list.
    """
    blocks = [block.strip() for block in raw.split(BLOCK_SEPARATOR)]
    blocks = [block for block in blocks if block]

    workouts = []
    for index, block in enumerate(blocks, start=1):
        missing = f"Workout string is missing for {ordinal(index)} workout"
        if not block.startswith("#"):
            raise WorkoutParseError(missing)

        lines = [line.strip() for line in block.split("\n")]
        lines = [line for line in lines if line]
        if len(lines) < BLOCK_LINES:
            raise WorkoutParseError(missing)

        workout = parse_workout_lines(lines)
        if workout is None:
            logger.warning(f"Failed to parse workout block {index}: {lines}")
            raise WorkoutParseError(FORMAT_HINT)
        workouts.append(workout)

    return workouts


def calculate_calories_burned(workout: ParsedWorkout) -> float:
    """Calories burned: duration (min) x weight (kg) x 5."""
    return (workout.duration or 0) * (workout.weight or 0) * CALORIES_PER_KG_MINUTE


def _plan_lines(text: str) -> List[str]:
    """Trimmed non-empty lines, with ``;`` treated as a line break."""
    lines = []
    for raw_line in text.split("\n"):
        for part in raw_line.split(BLOCK_SEPARATOR):
            line = part.strip()
            if line:
                lines.append(line)
    return lines


def _scan_blocks(lines: List[str], reset_on_noise: bool) -> List[str]:
    blocks = []
    current: List[str] = []
    for line in lines:
        if line.startswith("#"):
            current = [line]
        elif line.startswith("-") and current:
            current.append(line)
            if len(current) == BLOCK_LINES:
                blocks.append("\n".join(current))
                current = []
        elif current and reset_on_noise:
            current = []
    return blocks


def extract_workout_format(text: str) -> Optional[str]:
    """Pull every complete workout block out of free text.

    Returns the blocks joined with ``"; "`` (ready for parse_workout_blocks),
    or None when the text holds no complete block.
    """
    blocks = _scan_blocks(_plan_lines(text), reset_on_noise=True)
    return "; ".join(blocks) if blocks else None


def parse_weekly_schedule(text: str) -> List[ScheduleDay]:
    """Group complete workout blocks under their ``Day N`` headers."""
    schedule = []
    day: Optional[int] = None
    day_lines: List[str] = []

    def close_day():
        if day is None:
            return
        workouts = _scan_blocks(day_lines, reset_on_noise=False)
        if workouts:
            schedule.append(ScheduleDay(day=day, workouts=workouts))

    for line in _plan_lines(text):
        match = DAY_HEADER_RE.match(line)
        if match:
            close_day()
            day = int(match.group(1))
            day_lines = []
        elif day is not None:
            day_lines.append(line)

    close_day()
    return schedule
