from setuptools import setup, find_packages

setup(
    name='toggler',
    version='0.1.0',
    description='A CLI tool for rounding and summarizing Toggl Track time entries.',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
        'tzdata',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'toggler=toggler.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['toggler.env.example'],
    },
    python_requires='>=3.9',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
