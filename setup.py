from setuptools import setup, find_packages

setup(
    name="freqscalers",
    version="0.1.0",
    description="Fit Gaussian fundamental frequency and zero-point energy scalers on a 15-molecule benchmark",
    packages=find_packages(exclude=["tests"]),
    py_modules=[
        "freqscalers", "benchmark_geometries", "calculator", "config", "export",
        "help_text", "input_writer", "linear_fit", "message_service",
        "normal_modes", "reference_data", "scaler_fitter"
    ],
    install_requires=[
        "numpy>=1.19.0",
    ],
    extras_require={
        "tests": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "freqscalers=freqscalers:main",
        ],
    },
)
