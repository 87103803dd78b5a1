import os
import re
import subprocess
from setuptools import setup, find_packages, Command

root_dir = os.path.abspath(os.path.dirname(__file__))

# Importing strformat here would need its dependencies to be installed.
with open(os.path.join(root_dir, 'strformat', 'app_version.py'), 'r') as f:
    version = re.search(r"^version = '([^']*)'", f.read(), re.M).group(1)


class Coverage(Command):
    description = 'run tests with code coverage'
    user_options = [
        ('test-suite=', 's',
         "test suite to run (e.g. 'some_module.test_suite')"),
    ]

    def initialize_options(self):
        self.test_suite = None

    def finalize_options(self):
        pass

    def run(self):
        env = dict(os.environ)
        env.update({
            'COVERAGE_FILE': os.path.join(root_dir, '.coverage'),
            'COVERAGE_PROCESS_START': os.path.join(root_dir, 'setup.cfg'),
        })

        subprocess.run(['coverage', 'erase'], check=True)
        subprocess.run(
            ['coverage', 'run', '-m', 'unittest', 'discover'] +
            (['-q'] if self.verbose == 0 else []) +
            (['-k', self.test_suite] if self.test_suite else []),
            env=env, check=True
        )
        subprocess.run(['coverage', 'combine'], check=True,
                       stdout=subprocess.DEVNULL)


custom_cmds = {
    'coverage': Coverage,
}

with open(os.path.join(root_dir, 'README.md'), 'r') as f:
    long_desc = f.read()

setup(
    name='strformat',
    version=version,

    description='A printf-style format string engine',
    long_description=long_desc,
    long_description_content_type='text/markdown',
    keywords='printf format string quote',

    license='MIT',

    classifiers=[
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Developers',

        'Topic :: Text Processing',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],

    packages=find_packages(exclude=['test', 'test.*']),

    python_requires='>=3.8',
    install_requires=['colorama'],
    extras_require={
        'dev': ['coverage', 'flake8 >= 3.7', 'flake8-quotes'],
        'test': ['coverage', 'flake8 >= 3.7', 'flake8-quotes'],
    },

    entry_points={
        'console_scripts': [
            'strformat-printf=strformat.printf:main',
        ],
    },

    test_suite='test',
    cmdclass=custom_cmds,
)
