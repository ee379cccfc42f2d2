# setup.py
from setuptools import setup, find_packages

setup(
    name="orgaudit",
    version="0.1.0",
    description="Audit an organization chart for manager salary bands and reporting line depth",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "orgaudit": ["interface/locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'orgaudit=orgaudit.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
