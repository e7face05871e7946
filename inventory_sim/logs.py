import logging
import sys


def get_logger(component_name: str) -> logging.Logger:
    """
    Create a logger for a specific component with formatted output.

    Args:
        component_name: Name of the component (e.g., 'engine', 'driver')

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(f"inventory_sim.{component_name}")

    # Avoid adding handlers multiple times
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            f'[%(asctime)s] [{component_name.upper()}] %(levelname)s: %(message)s',
            datefmt='%H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
