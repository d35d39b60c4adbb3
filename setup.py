from setuptools import setup

setup(
    name='sine-spectrum',
    version='1.0.0',
    description='Composite sine signal and its spectrum rendered to PNG',
    packages=['sine_spectrum'],
    python_requires='>=3.9',
    install_requires=[
        'numpy',
        'scipy',
        'matplotlib',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['sine-spectrum=sine_spectrum.__main__:main'],
    },
)
