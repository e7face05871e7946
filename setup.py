"""Setup script for dealership-inventory-sim."""

from setuptools import setup, find_packages

setup(
    name="dealership-inventory-sim",
    version="0.1.0",
    description="An animated dealership inventory simulation with delayed deliveries and perceived demand",
    author="Dealership Inventory Sim",
    license="MIT",
    packages=find_packages(include=["inventory_sim", "inventory_sim.*", "scripts"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        "simpy",
        "numpy",
        "pandas",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "run-simulation=scripts.run_simulation:main",
        ],
    },
)
