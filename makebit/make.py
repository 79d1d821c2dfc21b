#!/usr/bin/env python
"""a minimal build system inspired by gnu make.

    from makebit.make import Make

    make = Make()
    with open('Makefile') as fobj:
        make.build(fobj)
    print(make.calc_build('publish'))
    make.run('publish')

build() loads and validates the rules (a cyclic dependency is an error),
run() executes the commands of a target and of everything it depends on,
dependencies first.
"""

import argparse
import sys

from makebit import parser
from makebit.errors import (MakeError, InvalidMakefileFormat, NoTarget, CyclicDependency,
                            TargetNotFound, DependencyNotFound, CommandExecutionFailed)
from makebit.executor import execute
from makebit.graph import DependencyGraph
from makebit.rules import Registry


class Make(object):
    """Acts as the interface to the build system.

    execute - the function used to run a single Command, it should raise
        CommandExecutionFailed on failure (see makebit.executor.execute).
    """

    def __init__(self,execute=execute):
        self.execute = execute
        self.registry = Registry()
        self.graph = DependencyGraph({})

    def build(self,rule_text):
        """loads the rules from rule_text (a string or an iterable of lines) and
        checks that there are no cyclic dependencies. Any previously loaded
        rules are dropped."""
        registry = Registry()
        current = None
        for line in parser.parse_lines(rule_text):
            if line.kind == parser.RULE:
                name,deps = line.payload
                if not name:
                    raise NoTarget('line %d: rule %r names no target' %(line.lineno,line.raw))
                current = registry.declare_target(name,deps).name
            elif line.kind == parser.COMMAND:
                try:
                    registry.append_command(current,line.payload)
                except InvalidMakefileFormat as e:
                    raise InvalidMakefileFormat('line %d: %s' %(line.lineno,e)) from e
            elif line.kind == parser.MALFORMED:
                raise InvalidMakefileFormat('line %d: %r is neither a rule nor a command' %(line.lineno,line.raw))

        graph = DependencyGraph.from_registry(registry)
        cycle = graph.find_cycle()
        if cycle:
            raise CyclicDependency(cycle)
        self.registry = registry
        self.graph = graph

    def calc_build(self,target):
        """calculate the order in which targets are run to build target"""
        if target not in self.registry:
            raise TargetNotFound(target)
        return self.graph.build_order(target)

    def run(self,target):
        """runs the commands of target and of all of its dependencies. Stops at
        the first dependency without a rule or the first failing command."""
        for name in self.calc_build(target):
            rule = self.registry.get(name)
            if rule is None:
                raise DependencyNotFound(target,name)
            for command in rule.commands:
                self.execute(command)

    def dependency_graph(self):
        return self.graph.as_dict()

    def commands(self,name):
        rule = self.registry.get(name)
        if rule is None:
            raise TargetNotFound(name)
        return list(rule.commands)


## command line interface
##-----------------------------------------------------------------------------------------

EXIT_CODES = [(InvalidMakefileFormat,1),(CommandExecutionFailed,2)]

def exit_code(error):
    for cls,code in EXIT_CODES:
        if isinstance(error,cls):
            return code
    return 5


def main(argv=None):
    """command line interface for makebit"""
    argparser = argparse.ArgumentParser(description='The makebit build system (a small version of make)')
    argparser.add_argument('-f',dest='filepath',default='./Makefile',help='rule file to read (default: %(default)s)')
    argparser.add_argument('-t',dest='target',default='',help='select build target')
    argparser.add_argument('-n','--dry-run',dest='dryrun',action='store_true',help='only print build sequence')
    args = argparser.parse_args(argv)

    make = Make()
    try:
        if not args.target:
            raise NoTarget('target must be specified, use -t to specify it')
        try:
            with open(args.filepath,encoding='utf-8') as fobj:
                make.build(fobj)
        except OSError as e:
            raise MakeError("couldn't read %r: %s" %(args.filepath,e.strerror or e))
        except UnicodeDecodeError as e:
            raise MakeError("couldn't decode %r: %s" %(args.filepath,e))
        if args.dryrun:
            buildseq = make.calc_build(args.target)
            print('Build sequence:')
            for item in buildseq: print(item)
        else:
            make.run(args.target)
    except MakeError as e:
        print('Error:',e,file=sys.stderr)
        if isinstance(e,CommandExecutionFailed) and e.output:
            sys.stderr.write(e.output)
        return exit_code(e)
    return 0


if __name__=="__main__":
    sys.exit(main())
