from setuptools import setup, find_packages

setup(
    name='shapeforge',
    version='0.1.0',
    author='nassimberrada',
    author_email='your.email@example.com',
    description='A Python library for placing CSG primitives with alignment, orientation and connectors.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/yourusername/shapeforge',
    packages=find_packages(exclude=['tests', 'examples']),
    include_package_data=True,
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest',
        ]
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics :: 3D Modeling',
    ],
    python_requires='>=3.7',
)
