from setuptools import setup, find_packages
import re
from pathlib import Path


def read_readme():
    this_directory = Path(__file__).parent
    readme_file = this_directory / 'README.md'
    if readme_file.exists():
        return readme_file.read_text(encoding='utf-8')
    return ""

def get_version():
    init_file = Path(__file__).parent / 'catgql' / '__init__.py'
    if init_file.exists():
        content = init_file.read_text()
        match = re.search(r'__version__\s*=\s*["\']([^"\']+)["\']', content)
        if match:
            return match.group(1)
    return "0.1.0"


setup(
    name="catgql",
    version=get_version(),
    description="A small GraphQL-over-HTTP service for an in-memory cat catalog.",
    long_description=read_readme(),
    long_description_content_type='text/markdown',
    packages=find_packages(include=['catgql', 'catgql.*']),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "pydantic>=2.5",
        "strawberry-graphql>=0.220",
        "uvicorn>=0.27",
        "typer>=0.12",
        "httpx>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: FastAPI",
    ],
    keywords="graphql fastapi strawberry catalog",
    entry_points={
        'console_scripts': [
            'catgql=catgql.cli:main',
        ],
    },
)
