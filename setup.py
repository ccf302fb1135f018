# setup.py
from setuptools import setup, find_packages

setup(
    name="bfs_crawler",
    version="0.1.0",
    description="Breadth-first web crawler with a page budget and pluggable sinks",
    packages=find_packages(include=["bfs_crawler", "bfs_crawler.*"]),
    package_data={"bfs_crawler": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.2",
        "jinja2>=3.1",
        "pydantic>=2.5",
        "pymongo>=4.6",
        "python-dotenv>=1.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "bfs-crawler=bfs_crawler.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
