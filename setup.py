
from setuptools import setup, find_packages
import quickasm


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='quickasm',
    description="Show the machine code of assembly instructions using a "
                "GNU cross toolchain, and disassemble machine code words",
    long_description=long_description,
    version=quickasm.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    install_requires=[
        'pygments',
        'prompt_toolkit>=3.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'quickasm = quickasm.cli.asm:asm',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Programming Language :: Assembly',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Software Development :: Assemblers',
        'Topic :: Software Development :: Disassemblers',
        'Topic :: Software Development :: Embedded Systems',
    ]
)
