from setuptools import setup, find_packages

setup(
    name="dropfour",
    version="0.1.0",
    description="Rules engine for a two-player four-in-a-row drop game",
    packages=find_packages(include=["dropfour", "dropfour.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",  # Gymnasium environment wrapper
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
)
