from setuptools import setup

# install with: pip install -e .
# tests with:   pip install -e .[test] && pytest

setup(
    name='vnwordle',
    version='0.1.0',
    packages=['vnwordle'],
    python_requires='>=3.8',
    install_requires=[
        'click',
        'rich',
        'urwid',
        'blinker',
        'httpx',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'vnwordle = vnwordle.lookupui:cli',
            'vnwordle-interactive = vnwordle.interactive:cli',
        ],
    },
)
