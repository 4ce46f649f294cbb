from setuptools import find_packages, setup

setup(
    name='tbsessions',
    version='0.1',
    packages=['tbsessions'],
    install_requires=[
        'Click',
        'lz4',
        'PyYAML',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'ffsessions = tbsessions.ffsessions:cli',
            'qbsessions = tbsessions.qbsessions:cli',
        ],
    },
)
