from setuptools import setup, find_packages

setup(
    name="grid_kernels",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"grid_kernels": ["configs/*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "solve_grid=grid_kernels.scripts.solve_grid:run",
            "grid_visualizer=tools.grid_visualizer:main",
        ]
    },
)
