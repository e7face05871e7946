"""
Configuration for the dealership inventory simulation.
"""

# ============================================================================
# INVENTORY MODEL
# ============================================================================

# Stock on the lot before day 0
INITIAL_INVENTORY = 200  # cars

# Seeding period: fixed deliveries before the ordering loop has any history
SEED_DAYS = 5
SEED_DELIVERY = 20  # cars/day

# Desired inventory = perceived sales * horizon
DESIRED_INVENTORY_DAYS = 10

# ============================================================================
# USER CHOICES (form defaults)
# ============================================================================

# Delivery, perception and response delays are picked from these values
DELAY_CHOICES = (1, 2, 3, 4, 5)  # days
DEFAULT_DELIVERY_DELAY = 3
DEFAULT_PERCEPTION_DELAY = 3
DEFAULT_RESPONSE_DELAY = 3

# Alternating day,demand pairs: demand 20 from day 0, 22 from day 25
DEFAULT_DEMAND = "0,20,25,22"

# ============================================================================
# ANIMATION
# ============================================================================

TICKS_PER_SECOND = 10
TICK_INTERVAL = 1.0 / TICKS_PER_SECOND  # seconds between engine steps

# Display refresh callback period (independent of tick rate)
FRAME_INTERVAL = 1.0 / 60  # seconds

# Number of most recent days kept on the chart
DISPLAY_WINDOW = 35

# ============================================================================
# CANVAS
# ============================================================================

CANVAS_WIDTH = 700  # pixels
CANVAS_HEIGHT = 400  # pixels
CANVAS_DPI = 100

# Fixed vertical axis
Y_AXIS_MIN = 0
Y_AXIS_MAX = 400  # cars
Y_TICK_INTERVAL = 50  # cars between labels

# ============================================================================
# OUTPUT
# ============================================================================

OUTPUT_DIR = "outputs"
LOG_DIR = f"{OUTPUT_DIR}/logs"
PLOT_DIR = f"{OUTPUT_DIR}/plots"
REPORT_DIR = f"{OUTPUT_DIR}/reports"

# CSV day trace columns
DAY_LOG_COLUMNS = [
    "day",
    "deliveries",
    "demand",
    "perceived_sales",
    "desired_inventory",
    "discrepancy",
    "order",
    "inventory",
]

# Default number of days for a headless run
RUN_DAYS = 120
