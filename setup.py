from pathlib import Path

from setuptools import find_packages, setup

root = Path(__file__).parent


def read_version() -> str:
    # Single source of truth lives in the package so `jsxwire --version` agrees
    for line in (root / "src" / "jsxwire" / "_version.py").read_text("utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("\"'")
    raise RuntimeError("Unable to find __version__ in src/jsxwire/_version.py")


setup(
    name="jsxwire",
    version=read_version(),
    description="Compile HTML templates with bindings and control flow into JSX components.",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"jsxwire": ["templates/*.j2"]},
    include_package_data=True,
    install_requires=[
        "jinja2>=3.0",
        "rich>=13.0",
        "rich-click>=1.7",
        "watchfiles>=0.20",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "click>=8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "jsxwire=jsxwire.cli.main:cli",
        ],
    },
    zip_safe=False,
)
