"""Setup configuration for prstats"""

from setuptools import setup, find_packages

setup(
    name="pr-ttm-stats",
    version="0.1.0",
    description=(
        "CLI tool that reports time-to-merge statistics for recently created "
        "pull requests from a CSV export."
    ),
    author="PR TTM Stats Contributors",
    author_email="",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "pr-ttm-stats=prstats.main:main",
        ],
    },
)
