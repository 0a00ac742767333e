import os
from setuptools import setup, find_packages

HERE = os.path.realpath(os.path.dirname(__file__))

VERSION_MODULE_PATH = os.path.join(HERE, "rpncalc", "version.py")
README_PATH = os.path.join(HERE, "README.md")


def get_version_string():
    version = {}
    with open(VERSION_MODULE_PATH) as f:
        exec(f.read(), version)
    return version['VERSION_STRING']


def get_readme():
    with open(README_PATH, encoding='utf-8') as f:
        return f.read()


setup(
    name='rpncalc',
    description='An arithmetic expression evaluator built on the shunting-yard algorithm and an RPN stack machine.',
    license="LGPL-3.0-or-later",
    long_description=get_readme(),
    long_description_content_type="text/markdown",
    version=get_version_string(),
    packages=find_packages(exclude=['test']),
    python_requires='>=3.7',
    install_requires=[
        'colorama',
        'json5>=0.9.5',
        'numpy>=1.19.4',
        'PyYAML',
        'tqdm',
        'typing_extensions>=3.7.4.3'
    ],
    entry_points={
        'console_scripts': [
            'rpncalc = rpncalc.__main__:main'
        ]
    },
    extras_require={
        "dev": ["flake8", "pytest", "twine"]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Utilities'
    ],
    include_package_data=True
)
