from setuptools import setup

# install with: pip install -e .

setup(
    name='termwordle',
    version='0.1.0',
    packages=['termwordle'],
    python_requires='>=3.8',
    install_requires=[
        'click',
        'rich',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wordle = termwordle.wordleui:cli',
        ],
    },
)
