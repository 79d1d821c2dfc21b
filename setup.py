from setuptools import setup

setup(name='makebit',
        version='0.1.0',
        description='A minimal make-like build system: rule files, dependency ordering and command execution',
        classifiers=[
          "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
          "Environment :: Console",
          "Programming Language :: Python :: 3",
          "Development Status :: 3 - Alpha",
          "Intended Audience :: Developers",
          "Natural Language :: English",
          "Operating System :: POSIX",
          "Topic :: Software Development :: Build Tools"
           ],
        license='GPLv3',
        keywords='make build',
        packages=['makebit'],
        python_requires='>=3.7',
        install_requires=['ordered-set'],
        entry_points={'console_scripts':['makebit=makebit.make:main']},
        long_description="""\
makebit reads a rule file describing named targets, the targets they depend on
and the command lines that produce them, then runs one target together with
everything it depends on, dependencies first. ::

    build:
    	@echo 'executing build'
    test:
    	echo 'executing test'
    gendocs: build
    	echo 'executing gendocs'
    publish: test gendocs
    	echo 'executing publish'

Rule lines are ``name: dep1 dep2``, command lines start with a tab. A command
prefixed with '@' isn't echoed before it runs. Commands are split on whitespace
and run directly (there is no shell, so no quoting, pipes or variables).

Redeclaring a target puts the new dependencies in front of the old ones and
replaces its commands with the ones that follow the new declaration (a warning
is printed). A cyclic dependency is reported when the file is loaded.

Command line usage::

    makebit -f Makefile -t publish
    makebit -f Makefile -t publish --dry-run   # only print build sequence

From python::

    from makebit import Make

    make = Make()
    make.build(open('Makefile'))
    print(make.calc_build('publish'))
    make.run('publish')

Exit codes: 1 for a malformed rule file, 2 when a command fails, 5 for any
other error.
        """,
        )
