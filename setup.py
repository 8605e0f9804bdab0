from setuptools import setup

setup(
    name='rollcrc',
    version='0.0.1',
    url='',
    license='AGPL-3.0-only',

    author='Tancredi Orlando',
    author_email='tancredi.orlando@gmail.com',

    description='Table-driven CRC-8/16/32/64 with a catalogue of presets',
    long_description='',

    packages=['rollcrc'],

    python_requires='>3.10',

    extras_require={
        'dev': [
            'mypy>=0.991',
            'flake8>=5.0.4',
            'pytest>=7.2.0'
        ]
    },

    entry_points={
        'console_scripts': [
            'rollcrc = rollcrc.__main__:main'
        ]
    }
)
