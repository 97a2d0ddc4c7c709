"""Setup script for the mgtype (molecular grid atom typing) package."""

from pathlib import Path

from setuptools import find_packages, setup


def read_requirements() -> list[str]:
    reqs_path = Path(__file__).parent / "requirements.txt"
    if not reqs_path.exists():
        return []
    return [
        line.strip()
        for line in reqs_path.read_text().splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]


setup(
    name="mgtype",
    version="0.0.1",
    description="Atom typers and type mappers for molecular grid encoders.",
    author="",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    include_package_data=True,
)
