"""Fixed nSuns set tables as (reps, fraction of training max) pairs."""

MAIN_LIFT_TABLE: tuple[tuple[int, float], ...] = (
    (8, 0.75),
    (6, 0.85),
    (4, 0.95),
    (4, 0.90),
    (4, 0.85),
    (5, 0.80),
    (6, 0.75),
    (7, 0.70),
    (8, 0.65),
)

SECONDARY_LIFT_TABLE: tuple[tuple[int, float], ...] = (
    (6, 0.50),
    (5, 0.60),
    (3, 0.70),
    (5, 0.70),
    (7, 0.70),
    (4, 0.70),
    (6, 0.70),
    (8, 0.70),
)

# day type, main exercise, main lift, secondary exercise, secondary lift
FOUR_DAY_LAYOUT: tuple[tuple[str, str, str, str, str], ...] = (
    ("bench", "Bench Press", "bench", "Overhead Press", "overhead_press"),
    ("squat", "Squat", "squat", "Sumo Deadlift", "deadlift"),
    ("ohp", "Overhead Press", "overhead_press", "Incline Bench Press", "bench"),
    ("deadlift", "Deadlift", "deadlift", "Front Squat", "squat"),
)
