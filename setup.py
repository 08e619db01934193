from pathlib import Path
from setuptools import find_packages, setup


def read_requirements() -> list[str]:
    req_path = Path(__file__).parent / "requirements.txt"
    if not req_path.exists():
        return []
    return [line.strip() for line in req_path.read_text(encoding="utf-8").splitlines() if line.strip() and not line.startswith("#")]


setup(
    name="standardcheck",
    version="0.1.0",
    description="Check filesystem paths for portability to legacy and modern filesystem standards",
    packages=find_packages(include=["standardcheck", "standardcheck.*"]),
    install_requires=read_requirements(),
    extras_require={"test": ["pytest>=7"]},
    python_requires=">=3.10",
    include_package_data=True,
    package_data={"standardcheck.catalog": ["*.json"]},
    entry_points={"console_scripts": ["standardcheck=standardcheck.scripts.check:main"]},
)
