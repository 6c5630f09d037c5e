from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="interactables",
    version="0.1.0",
    description="Registry and partial-update engine for agent-driven interactive UI components",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "fastapi",
        "httpx",
        "numpy",
        "pydantic>=2",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "interactables=interactables.__main__:main",
        ],
    },
)
