from setuptools import find_packages, setup

package_name = 'canvas_spline'

setup(
    name=package_name,
    version='0.0.0',
    packages=find_packages(exclude=['test', 'test.*']),
    package_data={
        package_name: ['config/*.yaml'],
    },
    python_requires='>=3.11',
    install_requires=[
        'setuptools',
        'pyyaml',
        'nudged',
    ],
    zip_safe=True,
    maintainer='hansoo',
    maintainer_email='hansoo@todo.todo',
    description='Piecewise cubic Bezier spline engine with arc-length LUT',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'canvas_spline = canvas_spline.presentation.main:main',
        ],
    },
)
