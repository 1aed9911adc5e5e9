"""
Pune Metro Route Planner - Package Build Script

This script installs the pune_metro package (FastAPI service + routing core).
"""

from setuptools import setup, find_packages


setup(
    name='pune-metro',
    version='1.2.0',
    author='Pune Metro Team',
    description='Shortest path and fare planner for the Pune Metro network',
    long_description='''
    Dijkstra-based route and fare calculation over a multi-line metro
    network joined at an interchange station. Includes admin topology
    changes (insert/remove station, add line, update fare) persisted to
    a plain-text data file.
    ''',
    packages=find_packages(include=['pune_metro', 'pune_metro.*']),
    install_requires=[
        'fastapi>=0.100.0',
        'uvicorn>=0.23.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'numpy>=1.24',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24',
        ],
    },
    zip_safe=False,
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Framework :: FastAPI',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
