"""quadchar setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import quadchar

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='quadchar',
    version=quadchar.__version__,
    description='quadchar -- Quadratic characters over finite fields in Python',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['finite fields', 'Galois fields', 'quadratic residues', 'quadratic character',
              'Legendre symbol', 'Euler criterion', 'Gauss sums', 'Paley graphs',
              'Hadamard matrices'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=quadchar.__license__,
    packages=['quadchar'],
    platforms=['any'],
    install_requires=['gmpy2>=2.1', 'numpy>=1.22'],
    python_requires='>=3.9'
)
